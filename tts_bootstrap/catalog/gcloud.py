"""Google Cloud voice name normalization.

Google voice names encode language, region, voice type and variant in one
string, e.g. ``en-US-Standard-A`` or ``en-US-Wavenet-F``. Two naming schemes
are in use:

- legacy: ``Standard`` voices are keyed by the bare variant (``A``);
- prefixed: every other type keeps its type prefix (``Wavenet-F``).

The result is ``{language: {variant: gender}}``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from tts_bootstrap.models import GoogleVoice, NormalizedVoiceCatalog

_LEGACY_TYPE = "Standard"


class VariantScheme(str, Enum):
    LEGACY = "legacy"
    PREFIXED = "prefixed"


@dataclass(frozen=True)
class ParsedVoiceName:
    scheme: VariantScheme
    variant: str


def parse_voice_name(name: str) -> ParsedVoiceName | None:
    """Extract the variant key from a Google voice name.

    Returns None when the name has fewer than three ``-`` separated parts.
    """
    parts = name.split("-", 2)
    if len(parts) < 3:
        return None
    type_and_variant = parts[2]

    match type_and_variant.split("-", 1):
        case [voice_type, code] if voice_type == _LEGACY_TYPE:
            return ParsedVoiceName(VariantScheme.LEGACY, code)
        case _:
            return ParsedVoiceName(VariantScheme.PREFIXED, type_and_variant)


def prepare_gcloud_voices(voices: Iterable[GoogleVoice]) -> NormalizedVoiceCatalog:
    catalog: NormalizedVoiceCatalog = {}
    for voice in voices:
        parsed = parse_voice_name(voice.name)
        if parsed is None:
            continue

        language = voice.language_codes[0]
        catalog.setdefault(language, {})[parsed.variant] = voice.ssml_gender

    return catalog
