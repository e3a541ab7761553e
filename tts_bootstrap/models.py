"""Shared Pydantic data models for tts-bootstrap."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---


class TTSMode(str, Enum):
    GTTS = "gTTS"
    POLLY = "Polly"
    ESPEAK = "eSpeak"
    GCLOUD = "gCloud"


class GoogleGender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    NEUTRAL = "NEUTRAL"
    UNSPECIFIED = "SSML_VOICE_GENDER_UNSPECIFIED"


# --- Voice Catalog Models ---


class GoogleVoice(BaseModel):
    """One entry of the raw Google Cloud voice list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str  # e.g. "en-US-Standard-A"
    language_codes: list[str] = Field(alias="languageCodes", min_length=1)
    ssml_gender: GoogleGender = Field(alias="ssmlGender")


class PollyVoice(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="Id")
    name: str = Field(alias="Name")
    language_code: str = Field(alias="LanguageCode")
    language_name: str = Field(alias="LanguageName")
    gender: str = Field(alias="Gender")
    additional_language_codes: list[str] | None = Field(
        default=None, alias="AdditionalLanguageCodes",
    )
    supported_engines: list[str] = Field(default_factory=list, alias="SupportedEngines")


# {language: {variant: gender}}
NormalizedVoiceCatalog = dict[str, dict[str, GoogleGender]]

# {lowercase language code: display name}
TranslationLanguageMap = dict[str, str]


class VoiceCatalogs(BaseModel):
    model_config = ConfigDict(frozen=True)

    gtts: dict[str, str]
    espeak: list[str]
    polly: list[PollyVoice]
    gcloud: NormalizedVoiceCatalog


# --- Webhook Models ---


class Webhook(BaseModel):
    """A resolved webhook handle, as returned by the chat platform."""

    model_config = ConfigDict(frozen=True)

    id: int
    token: str | None = None
    name: str | None = None
    channel_id: int | None = None
    guild_id: int | None = None


class WebhookMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    channel_id: int | None = None
    content: str = ""


class WebhookConfigRaw(BaseModel):
    model_config = ConfigDict(frozen=True)

    logs: str
    errors: str
    dm_logs: str


class WebhookConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    logs: Webhook
    errors: Webhook
    dm_logs: Webhook


# --- Startup Models ---


class StartupData(BaseModel):
    """Everything provisioned by a successful startup run."""

    model_config = ConfigDict(frozen=True)

    webhooks: WebhookConfig
    startup_message_id: int
    voices: VoiceCatalogs
    translation_languages: TranslationLanguageMap = Field(default_factory=dict)
