"""Voice catalog provisioning for tts-bootstrap.

This package provides:
- Typed JSON fetching from the TTS service
- Per-mode voice catalog and translation language loading
- Google Cloud voice name normalization
"""

from tts_bootstrap.catalog.fetcher import decode_response, fetch_json
from tts_bootstrap.catalog.gcloud import (
    ParsedVoiceName,
    VariantScheme,
    parse_voice_name,
    prepare_gcloud_voices,
)
from tts_bootstrap.catalog.loader import (
    fetch_translation_languages,
    fetch_voices,
    load_voice_catalogs,
)

__all__ = [
    # Fetching
    "decode_response",
    "fetch_json",
    # Loading
    "fetch_translation_languages",
    "fetch_voices",
    "load_voice_catalogs",
    # Normalization
    "ParsedVoiceName",
    "VariantScheme",
    "parse_voice_name",
    "prepare_gcloud_voices",
]
