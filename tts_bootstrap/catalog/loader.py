"""Voice catalog and translation language loading from the TTS service."""

from __future__ import annotations

import asyncio
import logging
from typing import TypeVar

import httpx

from tts_bootstrap.catalog.fetcher import fetch_json
from tts_bootstrap.catalog.gcloud import prepare_gcloud_voices
from tts_bootstrap.models import (
    GoogleVoice,
    PollyVoice,
    TranslationLanguageMap,
    TTSMode,
    VoiceCatalogs,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def voices_url(base_url: str, mode: TTSMode) -> httpx.URL:
    url = httpx.URL(base_url).copy_with(path="/voices")
    return url.copy_add_param("mode", mode.value).copy_add_param("raw", "true")


def translation_languages_url(base_url: str) -> httpx.URL:
    return httpx.URL(base_url).copy_with(path="/translation_languages")


async def fetch_voices(
    client: httpx.AsyncClient,
    base_url: str,
    auth_key: str | None,
    mode: TTSMode,
    model_type: type[T],
) -> T:
    """Fetch the raw voice list of one TTS mode, decoded as ``model_type``."""
    voices = await fetch_json(client, voices_url(base_url, mode), auth_key or "", model_type)
    logger.info("Loaded voices for TTS mode: %s", mode.value)
    return voices


async def fetch_translation_languages(
    client: httpx.AsyncClient,
    base_url: str,
    auth_key: str | None,
) -> TranslationLanguageMap:
    """Fetch ``[code, name]`` pairs and key them by lowercased code.

    Later pairs overwrite earlier ones that share a lowercased code.
    """
    raw_langs = await fetch_json(
        client, translation_languages_url(base_url), auth_key or "", list[tuple[str, str]],
    )
    lang_map = {code.lower(): name for code, name in raw_langs}

    logger.info("Loaded translation languages (%d)", len(lang_map))
    return lang_map


async def load_voice_catalogs(
    client: httpx.AsyncClient,
    base_url: str,
    auth_key: str | None,
) -> VoiceCatalogs:
    """Fetch every mode's catalog concurrently; the first failure aborts all."""
    try:
        async with asyncio.TaskGroup() as tg:
            gtts = tg.create_task(
                fetch_voices(client, base_url, auth_key, TTSMode.GTTS, dict[str, str]),
            )
            espeak = tg.create_task(
                fetch_voices(client, base_url, auth_key, TTSMode.ESPEAK, list[str]),
            )
            polly = tg.create_task(
                fetch_voices(client, base_url, auth_key, TTSMode.POLLY, list[PollyVoice]),
            )
            gcloud = tg.create_task(
                fetch_voices(client, base_url, auth_key, TTSMode.GCLOUD, list[GoogleVoice]),
            )
    except ExceptionGroup as eg:
        raise eg.exceptions[0]

    return VoiceCatalogs(
        gtts=gtts.result(),
        espeak=espeak.result(),
        polly=polly.result(),
        gcloud=prepare_gcloud_voices(gcloud.result()),
    )
