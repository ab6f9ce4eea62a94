"""Addon configuration loaded from the environment."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class TranslatorConfig(BaseSettings):
    """Translation endpoint configuration."""

    model_config = {"env_prefix": "CHANTRANS_TRANSLATOR_"}

    endpoint: str = "https://translate.googleapis.com/translate_a/single"
    client: str = "gtx"
    translation_type: str = "t"
    timeout_seconds: float = 5.0


class Settings(BaseSettings):
    """Root addon settings."""

    model_config = {"env_prefix": "CHANTRANS_"}

    log_level: str = "INFO"
    # Appended as the last word of every re-emitted text event.
    marker: str = "~"
    poll_interval_ms: int = 50

    translator: TranslatorConfig = Field(default_factory=TranslatorConfig)
