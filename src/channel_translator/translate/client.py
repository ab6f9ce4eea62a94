"""HTTP client for the free Google translation endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from channel_translator.core.config import TranslatorConfig
from channel_translator.core.types import Failed, FailureKind, Translated, Unit, UnitOutcome

logger = logging.getLogger(__name__)

_UNREACHABLE_MESSAGE = "Translation service could not be reached."
_RATE_LIMIT_MESSAGE = "Translation service rate limit reached (HTTP 403)."
_MALFORMED_MESSAGE = "Translation service returned an unreadable response."


class SegmentTranslator:
    """Translates one unit per request and classifies the result.

    Requests are never retried. The underlying ``httpx.Client`` is safe to
    share between worker threads, so one translator serves every message.
    """

    def __init__(self, config: TranslatorConfig | None = None) -> None:
        self.config = config or TranslatorConfig()
        self._http = httpx.Client(timeout=httpx.Timeout(self.config.timeout_seconds))

    # -- public API ----------------------------------------------------------

    def translate_unit(self, unit: Unit, source: str, target: str) -> UnitOutcome:
        """Send ``unit`` to the endpoint and classify what comes back.

        Args:
            unit: The fragment to translate.
            source: Language code of the fragment.
            target: Language code to translate into.

        Returns:
            ``Translated`` with the service's text, or ``Failed`` carrying a
            FailureKind and a human-readable description.
        """
        try:
            resp = self._http.get(
                self.config.endpoint,
                params=self._params(unit.text, source, target),
            )
        except httpx.RequestError as exc:
            logger.warning("Transport error translating %s -> %s: %s", source, target, exc)
            return Failed(reason=FailureKind.TRANSIENT, detail=_UNREACHABLE_MESSAGE)

        if resp.status_code == 403:
            logger.warning("Translation endpoint is rate limiting requests")
            return Failed(reason=FailureKind.RATE_LIMITED, detail=_RATE_LIMIT_MESSAGE)
        if not resp.is_success:
            logger.warning("Translation endpoint returned %d", resp.status_code)
            return Failed(
                reason=FailureKind.MALFORMED,
                detail=(
                    "Translation service reported "
                    f"{resp.status_code} {resp.reason_phrase}."
                ),
            )

        try:
            text = self._extract_text(resp.json())
        except (ValueError, LookupError, TypeError) as exc:
            logger.warning("Unreadable translation response: %s", exc)
            return Failed(reason=FailureKind.MALFORMED, detail=_MALFORMED_MESSAGE)

        # The service trims surrounding whitespace.
        if unit.trailing_space:
            text += " "
        return Translated(text=text)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> SegmentTranslator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- internal ------------------------------------------------------------

    def _params(self, text: str, source: str, target: str) -> dict[str, str]:
        return {
            "client": self.config.client,
            "sl": source,
            "tl": target,
            "dt": self.config.translation_type,
            "q": text,
        }

    @staticmethod
    def _extract_text(data: Any) -> str:
        # [[["translated", "original", ...], ...], ...]
        outer = data[0] if isinstance(data, list) and data else None
        entry = outer[0] if isinstance(outer, list) and outer else None
        if not isinstance(entry, list) or not entry:
            raise TypeError("Expected a nested list of translated sentences")
        text = entry[0]
        if not isinstance(text, str):
            raise TypeError(f"Expected translated text, got {type(text).__name__}")
        return text
