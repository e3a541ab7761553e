"""Click CLI for running and inspecting TTS bot startup provisioning."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import click
import httpx
from pydantic import TypeAdapter

from tts_bootstrap.catalog.gcloud import prepare_gcloud_voices
from tts_bootstrap.catalog.loader import fetch_translation_languages, fetch_voices
from tts_bootstrap.config import StartupSettings
from tts_bootstrap.exceptions import StartupError
from tts_bootstrap.models import GoogleGender, GoogleVoice, PollyVoice, TTSMode
from tts_bootstrap.startup import run_startup

T = TypeVar("T")

_MODE_RECORD_TYPES: dict[TTSMode, Any] = {
    TTSMode.GTTS: dict[str, str],
    TTSMode.ESPEAK: list[str],
    TTSMode.POLLY: list[PollyVoice],
    TTSMode.GCLOUD: list[GoogleVoice],
}


def _make_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    # No timeout at this layer.
    return httpx.AsyncClient(timeout=None, follow_redirects=True, transport=transport)


def _run_with_client(step: str, func: Callable[[httpx.AsyncClient], Awaitable[T]]) -> T:
    async def _main() -> T:
        async with _make_client() as client:
            return await func(client)

    try:
        return asyncio.run(_main())
    except (StartupError, httpx.HTTPError) as exc:
        raise click.ClickException(f"{step} failed: {type(exc).__name__}: {exc}") from exc


def _echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, sort_keys=True))


@click.group()
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level.",
)
def cli(log_level: str) -> None:
    """TTS bot startup provisioning."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("run")
def run_command() -> None:
    """Run the full startup sequence and print a summary."""
    try:
        settings = StartupSettings.from_env()
    except StartupError as exc:
        raise click.ClickException(str(exc)) from exc

    data = _run_with_client("Startup", lambda client: run_startup(settings, client))
    _echo_json({
        "startup_message_id": data.startup_message_id,
        "webhooks": {
            "logs": data.webhooks.logs.id,
            "errors": data.webhooks.errors.id,
            "dm_logs": data.webhooks.dm_logs.id,
        },
        "voices": {
            TTSMode.GTTS.value: len(data.voices.gtts),
            TTSMode.ESPEAK.value: len(data.voices.espeak),
            TTSMode.POLLY.value: len(data.voices.polly),
            TTSMode.GCLOUD.value: sum(len(v) for v in data.voices.gcloud.values()),
        },
        "translation_languages": len(data.translation_languages),
    })


@cli.command("voices")
@click.argument("mode", type=click.Choice([m.value for m in TTSMode]))
@click.option("--service-url", envvar="TTS_SERVICE_URL", required=True, help="TTS service base URL.")
@click.option("--auth-key", envvar="TTS_SERVICE_AUTH_KEY", default=None, help="TTS service auth key.")
def voices_command(mode: str, service_url: str, auth_key: str | None) -> None:
    """Fetch and print the voice catalog of one TTS mode."""
    tts_mode = TTSMode(mode)
    record_type = _MODE_RECORD_TYPES[tts_mode]
    records = _run_with_client(
        f"Loading {tts_mode.value} voices",
        lambda client: fetch_voices(client, service_url, auth_key, tts_mode, record_type),
    )

    if tts_mode is TTSMode.GCLOUD:
        records = prepare_gcloud_voices(records)
        record_type = dict[str, dict[str, GoogleGender]]
    _echo_json(TypeAdapter(record_type).dump_python(records, mode="json"))


@cli.command("translation-languages")
@click.option("--service-url", envvar="TTS_SERVICE_URL", required=True, help="TTS service base URL.")
@click.option("--auth-key", envvar="TTS_SERVICE_AUTH_KEY", default=None, help="TTS service auth key.")
def translation_languages_command(service_url: str, auth_key: str | None) -> None:
    """Fetch and print the translation language map."""
    languages = _run_with_client(
        "Loading translation languages",
        lambda client: fetch_translation_languages(client, service_url, auth_key),
    )
    _echo_json(languages)
