"""Supported-language catalog loaded from a YAML table."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

_DEFAULT_TABLE = Path(__file__).resolve().parent / "languages.yml"


class Language(BaseModel):
    """A language the translation endpoint understands."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: str


class LanguageCatalog:
    """Lookup table of supported languages.

    Loads a YAML file holding a ``languages`` list of ``{name, code}``
    entries. Users may refer to a language by its display name (any case)
    or by its short code.
    """

    def __init__(self, table_path: str | Path | None = None) -> None:
        self._table_path = Path(table_path) if table_path else _DEFAULT_TABLE
        self._languages: list[Language] = []
        self._by_code: dict[str, Language] = {}
        self._load_table()

    def _load_table(self) -> None:
        with open(self._table_path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        for entry in data.get("languages", []):
            language = Language(name=str(entry["name"]), code=str(entry["code"]))
            self._languages.append(language)
            self._by_code[language.code] = language

    @property
    def languages(self) -> list[Language]:
        return list(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def is_supported(self, code: str) -> bool:
        return code in self._by_code

    def find(self, lang: str) -> Language | None:
        """Resolve a display name or short code to a catalog entry.

        Args:
            lang: A name like "Spanish" (case-insensitive) or a code like "es".

        Returns:
            The matching Language, or None if the language is unsupported.
        """
        lowered = lang.strip().lower()
        if lowered in self._by_code:
            return self._by_code[lowered]
        for language in self._languages:
            if language.name.lower() == lowered:
                return language
        return None

    def rows(self, columns: int = 3) -> Iterator[list[Language]]:
        """Yield the catalog in display rows of ``columns`` entries.

        The table is laid out column-major so that reading down each column
        stays alphabetical.
        """
        height = -(-len(self._languages) // columns)
        for row in range(height):
            yield [
                self._languages[index]
                for index in range(row, len(self._languages), height)
            ]
