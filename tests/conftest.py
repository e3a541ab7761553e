"""Shared test fixtures for tts-bootstrap."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from tts_bootstrap.models import GoogleGender, GoogleVoice, Webhook

TTS_SERVICE_URL = "http://tts-service:8000"
DISCORD_API = "https://discord.com/api/v10"

# Tokens must be 60-68 characters of [A-Za-z0-9_-].
WEBHOOK_TOKEN = "x" * 40 + "Y-_z" * 6

LOGS_ID = 223704706495545344
ERRORS_ID = 223704706495545345
DM_LOGS_ID = 223704706495545346

Handler = Callable[[httpx.Request], httpx.Response]


def make_webhook_url(webhook_id: int, token: str = WEBHOOK_TOKEN) -> str:
    return f"https://discord.com/api/webhooks/{webhook_id}/{token}"


def make_webhook_payload(webhook_id: int, **kwargs: Any) -> dict[str, Any]:
    """Factory for a Discord webhook object as returned by the API."""
    defaults: dict[str, Any] = {
        "id": str(webhook_id),
        "type": 1,
        "channel_id": "199737254929760256",
        "guild_id": "199737254929760256",
        "name": f"hook-{webhook_id}",
        "token": WEBHOOK_TOKEN,
    }
    defaults.update(kwargs)
    return defaults


def make_webhook(webhook_id: int = LOGS_ID, **kwargs: Any) -> Webhook:
    defaults: dict[str, Any] = {"id": webhook_id, "token": WEBHOOK_TOKEN, "name": "logs"}
    defaults.update(kwargs)
    return Webhook(**defaults)


def make_google_voice(
    name: str = "en-US-Standard-A",
    language_codes: list[str] | None = None,
    gender: GoogleGender = GoogleGender.FEMALE,
) -> GoogleVoice:
    """Factory for GoogleVoice with sensible defaults."""
    return GoogleVoice.model_validate({
        "name": name,
        "languageCodes": language_codes or ["en-US"],
        "ssmlGender": gender.value,
    })


def make_polly_payload(**kwargs: Any) -> dict[str, Any]:
    defaults: dict[str, Any] = {
        "Id": "Joanna",
        "Name": "Joanna",
        "LanguageCode": "en-US",
        "LanguageName": "US English",
        "Gender": "Female",
        "SupportedEngines": ["neural", "standard"],
    }
    defaults.update(kwargs)
    return defaults


GCLOUD_PAYLOAD = [
    {"name": "en-US-Standard-A", "languageCodes": ["en-US"], "ssmlGender": "FEMALE",
     "naturalSampleRateHertz": 24000},
    {"name": "en-US-Wavenet-F", "languageCodes": ["en-US"], "ssmlGender": "FEMALE",
     "naturalSampleRateHertz": 24000},
    {"name": "de-DE-Neural2-B", "languageCodes": ["de-DE"], "ssmlGender": "MALE",
     "naturalSampleRateHertz": 24000},
]

VOICE_PAYLOADS: dict[str, Any] = {
    "gTTS": {"en": "English", "de": "German"},
    "eSpeak": ["en", "de", "fr"],
    "Polly": [make_polly_payload()],
    "gCloud": GCLOUD_PAYLOAD,
}


def tts_service_handler(request: httpx.Request) -> httpx.Response | None:
    """Answer TTS service requests, or return None for other hosts."""
    if request.url.host != "tts-service":
        return None
    if request.url.path == "/voices":
        return httpx.Response(200, json=VOICE_PAYLOADS[request.url.params["mode"]])
    if request.url.path == "/translation_languages":
        return httpx.Response(200, json=[["EN-US", "English (American)"], ["de", "German"]])
    return httpx.Response(404)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(recorded_requests: list[httpx.Request]) -> Callable[[Handler], httpx.AsyncClient]:
    """Build an AsyncClient backed by a MockTransport that records requests."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_record))

    return _make
