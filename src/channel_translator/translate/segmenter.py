"""Splits chat text into independently translatable units.

The free translation endpoint stops translating after some punctuation
inside a single request, so every clause is sent on its own. A unit ends
after one or more terminal punctuation marks (``. ? ! ; |``) that are
followed by whitespace, or at the end of the text. The whitespace belongs
to the unit it follows, so joining the units gives back the input.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from channel_translator.core.types import Unit

_UNIT_RE = re.compile(r".+?(?:[.?!;|]+\s+|\Z)", re.DOTALL)


class UnitSequence:
    """Lazy, restartable sequence of the units of one text."""

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __iter__(self) -> Iterator[Unit]:
        for match in _UNIT_RE.finditer(self._text):
            span = match.group(0)
            yield Unit(text=span, trailing_space=span[-1].isspace())


def segment(text: str) -> UnitSequence:
    """Return the units of ``text``. Empty text has no units."""
    return UnitSequence(text)
