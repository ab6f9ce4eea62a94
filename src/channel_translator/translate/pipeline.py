"""Message-level translation: segment, translate each unit, aggregate."""

from __future__ import annotations

import logging
from typing import Protocol, assert_never

from channel_translator.core.types import (
    AggregateOutcome,
    Failed,
    FailureKind,
    Translated,
    Unit,
    UnitOutcome,
)
from channel_translator.translate.segmenter import segment

logger = logging.getLogger(__name__)


class UnitTranslator(Protocol):
    """Anything that can translate a single unit."""

    def translate_unit(self, unit: Unit, source: str, target: str) -> UnitOutcome: ...


class TranslationPipeline:
    """Translates whole messages one unit at a time.

    Units are translated sequentially in their original order. A failed
    unit keeps its original text so nothing the user wrote is dropped.

    Args:
        translator: The per-unit translator, usually a SegmentTranslator.
    """

    def __init__(self, translator: UnitTranslator) -> None:
        self._translator = translator

    def translate_message(self, text: str, source: str, target: str) -> AggregateOutcome:
        """Translate ``text`` from ``source`` to ``target``.

        Returns:
            An AggregateOutcome. Its ``errors`` are the distinct failure
            descriptions sorted lexicographically, empty on full success.
        """
        parts: list[str] = []
        errors: set[str] = set()
        rate_limited = False
        units = 0

        for unit in segment(text):
            units += 1
            outcome = self._translator.translate_unit(unit, source, target)
            match outcome:
                case Translated(text=translated):
                    parts.append(translated)
                case Failed(reason=reason, detail=detail):
                    parts.append(unit.text)
                    errors.add(detail)
                    if reason is FailureKind.RATE_LIMITED:
                        rate_limited = True
                case _:
                    assert_never(outcome)

        if errors:
            logger.debug(
                "Partial translation %s -> %s: %d unit(s), %d distinct error(s)",
                source, target, units, len(errors),
            )
        return AggregateOutcome(
            text="".join(parts),
            errors=sorted(errors),
            rate_limited=rate_limited,
        )
