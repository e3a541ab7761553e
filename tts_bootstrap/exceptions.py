"""Startup error taxonomy. Every error here aborts the startup run."""

from __future__ import annotations

import re

# Everything after /webhooks/{id}/ is the posting credential.
_WEBHOOK_TOKEN = re.compile(r"(/webhooks/[^/?#]+/)[^?#]*")


def redact_url(url: str) -> str:
    """Mask webhook tokens in ``url`` so it is safe to log or display."""
    return _WEBHOOK_TOKEN.sub(r"\1***", url)


class StartupError(Exception):
    """Base class for failures during startup provisioning."""


class ConfigurationError(StartupError):
    """Raised when required settings are missing or invalid."""


class MalformedWebhookUrlError(StartupError):
    """Raised when a webhook URL does not have the platform's webhook shape."""

    def __init__(self, name: str, url: str) -> None:
        self.name = name
        self.url = redact_url(url)
        super().__init__(f"Malformed {name} webhook URL: {self.url!r}")


class HttpStatusError(StartupError):
    """Raised when a provider answers with a non-success status."""

    def __init__(self, method: str, url: str, status_code: int) -> None:
        self.method = method
        self.url = redact_url(url)
        self.status_code = status_code
        super().__init__(f"{method} {self.url} returned HTTP {status_code}")


class DecodeError(StartupError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = redact_url(url)
        self.reason = reason
        super().__init__(f"Could not decode response from {self.url}: {reason}")


class NotificationDeliveryError(StartupError):
    """Raised when a webhook execution with wait=true returned no message."""
