"""Startup sequence: webhooks, startup message, voice catalogs, translations.

Any failure aborts the whole run; nothing is returned unless every step
succeeded.
"""

from __future__ import annotations

import logging

import httpx

from tts_bootstrap.catalog.loader import fetch_translation_languages, load_voice_catalogs
from tts_bootstrap.config import StartupSettings
from tts_bootstrap.models import StartupData, TranslationLanguageMap
from tts_bootstrap.webhook.discord import DiscordWebhookClient
from tts_bootstrap.webhook.notifier import send_startup_message
from tts_bootstrap.webhook.resolver import get_webhooks

logger = logging.getLogger(__name__)


async def run_startup(settings: StartupSettings, client: httpx.AsyncClient) -> StartupData:
    discord = DiscordWebhookClient(
        client,
        api_base=settings.discord_api_base,
        bot_token=settings.discord_bot_token,
    )

    logger.info("Resolving webhooks")
    webhooks = await get_webhooks(discord, settings.webhook_urls())

    logger.info("Sending startup message")
    startup_message_id = await send_startup_message(discord, webhooks.logs)

    logger.info("Loading voice catalogs from %s", settings.tts_service_url)
    voices = await load_voice_catalogs(
        client, settings.tts_service_url, settings.tts_service_auth_key,
    )

    translation_languages: TranslationLanguageMap = {}
    if settings.translation_enabled:
        logger.info("Loading translation languages")
        translation_languages = await fetch_translation_languages(
            client, settings.tts_service_url, settings.tts_service_auth_key,
        )

    return StartupData(
        webhooks=webhooks,
        startup_message_id=startup_message_id,
        voices=voices,
        translation_languages=translation_languages,
    )
