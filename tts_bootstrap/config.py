"""Environment-driven startup settings."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from tts_bootstrap.exceptions import ConfigurationError
from tts_bootstrap.models import WebhookConfigRaw
from tts_bootstrap.webhook.discord import DEFAULT_API_BASE

_REQUIRED = (
    "TTS_SERVICE_URL",
    "LOGS_WEBHOOK_URL",
    "ERRORS_WEBHOOK_URL",
    "DM_LOGS_WEBHOOK_URL",
)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class StartupSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    tts_service_url: str
    tts_service_auth_key: str | None = None
    logs_webhook_url: str
    errors_webhook_url: str
    dm_logs_webhook_url: str
    discord_bot_token: str | None = None
    discord_api_base: str = DEFAULT_API_BASE
    translation_enabled: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StartupSettings:
        """Build settings from environment variables.

        Raises ConfigurationError naming every missing required variable.
        """
        env = os.environ if environ is None else environ
        missing = [name for name in _REQUIRED if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
            )

        return cls(
            tts_service_url=env["TTS_SERVICE_URL"],
            tts_service_auth_key=env.get("TTS_SERVICE_AUTH_KEY") or None,
            logs_webhook_url=env["LOGS_WEBHOOK_URL"],
            errors_webhook_url=env["ERRORS_WEBHOOK_URL"],
            dm_logs_webhook_url=env["DM_LOGS_WEBHOOK_URL"],
            discord_bot_token=env.get("DISCORD_BOT_TOKEN") or None,
            discord_api_base=env.get("DISCORD_API_BASE") or DEFAULT_API_BASE,
            translation_enabled=env.get("TRANSLATION_ENABLED", "").strip().lower() in _TRUTHY,
        )

    def webhook_urls(self) -> WebhookConfigRaw:
        return WebhookConfigRaw(
            logs=self.logs_webhook_url,
            errors=self.errors_webhook_url,
            dm_logs=self.dm_logs_webhook_url,
        )
