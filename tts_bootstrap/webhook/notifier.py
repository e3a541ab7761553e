"""Startup announcement on the logs webhook."""

from __future__ import annotations

from tts_bootstrap.exceptions import NotificationDeliveryError
from tts_bootstrap.models import Webhook
from tts_bootstrap.webhook.discord import DiscordWebhookClient

STARTUP_MESSAGE = "**TTS Bot is starting up**"


async def send_startup_message(discord: DiscordWebhookClient, log_webhook: Webhook) -> int:
    """Post the startup message and return its id, for editing on shutdown."""
    message = await discord.execute(log_webhook, STARTUP_MESSAGE, wait=True)
    if message is None:
        raise NotificationDeliveryError(
            f"Webhook {log_webhook.id} returned no message despite wait=true",
        )
    return message.id
