"""Concurrent, all-or-nothing resolution of the notification webhooks."""

from __future__ import annotations

import asyncio
import logging

from tts_bootstrap.models import WebhookConfig, WebhookConfigRaw
from tts_bootstrap.webhook.discord import DiscordWebhookClient
from tts_bootstrap.webhook.urls import parse_webhook_url

logger = logging.getLogger(__name__)


async def get_webhooks(
    discord: DiscordWebhookClient, webhooks_raw: WebhookConfigRaw,
) -> WebhookConfig:
    """Resolve the logs, errors and dm_logs webhooks.

    All three URLs are parsed before any request is made. The lookups then
    run concurrently; the first failure cancels the rest and is re-raised,
    so a partially resolved config is never returned.
    """
    logs = parse_webhook_url(webhooks_raw.logs, "logs")
    errors = parse_webhook_url(webhooks_raw.errors, "errors")
    dm_logs = parse_webhook_url(webhooks_raw.dm_logs, "dm_logs")

    try:
        async with asyncio.TaskGroup() as tg:
            logs_task = tg.create_task(discord.fetch_webhook(*logs))
            errors_task = tg.create_task(discord.fetch_webhook(*errors))
            dm_logs_task = tg.create_task(discord.fetch_webhook(*dm_logs))
    except ExceptionGroup as eg:
        raise eg.exceptions[0]

    logger.info("Fetched webhooks")
    return WebhookConfig(
        logs=logs_task.result(),
        errors=errors_task.result(),
        dm_logs=dm_logs_task.result(),
    )
