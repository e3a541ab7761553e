"""Webhook URL parsing."""

from __future__ import annotations

import re

import httpx

from tts_bootstrap.exceptions import MalformedWebhookUrlError

_WEBHOOK_HOSTS = frozenset({
    "discord.com",
    "discordapp.com",
    "canary.discord.com",
    "ptb.discord.com",
})

_WEBHOOK_PATH = re.compile(
    r"^/api(?:/v\d+)?/webhooks/(?P<id>\d{17,20})/(?P<token>[A-Za-z0-9_-]{60,68})/?$",
)


def parse_webhook_url(url: str, name: str = "webhook") -> tuple[int, str]:
    """Split a webhook URL into ``(webhook_id, token)``.

    Accepts ``http(s)://discord.com/api[/vN]/webhooks/{id}/{token}``; query
    and fragment are ignored. ``name`` is only used in the error message.
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise MalformedWebhookUrlError(name, url) from exc

    if parsed.scheme not in ("http", "https") or parsed.host not in _WEBHOOK_HOSTS:
        raise MalformedWebhookUrlError(name, url)

    match = _WEBHOOK_PATH.match(parsed.path)
    if match is None or int(match["id"]) == 0:
        raise MalformedWebhookUrlError(name, url)

    return int(match["id"]), match["token"]
