"""Supported-language table for the translation endpoint."""

from channel_translator.languages.catalog import Language, LanguageCatalog

__all__ = ["Language", "LanguageCatalog"]
