"""Registry of conversations with translation switched on."""

from __future__ import annotations

import logging
import threading

from channel_translator.core.types import ContextKey, LanguagePair
from channel_translator.languages.catalog import LanguageCatalog

logger = logging.getLogger(__name__)


class ContextRegistry:
    """Maps each active conversation to its language pair.

    The UI thread and callbacks it schedules are the only callers, but they
    may interleave, so every access goes through one lock. Entries are only
    removed explicitly; contexts the host closes stay until deactivated.

    Args:
        catalog: Optional LanguageCatalog used to reject unsupported codes.
    """

    def __init__(self, catalog: LanguageCatalog | None = None) -> None:
        self._catalog = catalog
        self._pairs: dict[ContextKey, LanguagePair] = {}
        self._lock = threading.Lock()

    def activate(self, key: ContextKey, source: str, target: str) -> None:
        """Switch translation on for ``key``, replacing any previous pair.

        Raises:
            ValueError: If the codes are equal or not supported. The
                registry is left unchanged.
        """
        if source == target:
            raise ValueError(
                f"Source and target languages must differ (both {source!r})"
            )
        if self._catalog is not None:
            for code in (source, target):
                if not self._catalog.is_supported(code):
                    raise ValueError(f"Unsupported language code {code!r}")

        pair = LanguagePair(source=source, target=target)
        with self._lock:
            self._pairs[key] = pair
        logger.info(
            "Translation on for %s/%s: %s -> %s",
            key.network, key.channel, source, target,
        )

    def deactivate(self, key: ContextKey) -> None:
        """Switch translation off for ``key``. Unknown keys are ignored."""
        with self._lock:
            removed = self._pairs.pop(key, None)
        if removed is not None:
            logger.info("Translation off for %s/%s", key.network, key.channel)

    def lookup(self, key: ContextKey) -> LanguagePair | None:
        with self._lock:
            return self._pairs.get(key)

    def active_contexts(self) -> dict[ContextKey, LanguagePair]:
        """Return a snapshot copy of every active context."""
        with self._lock:
            return dict(self._pairs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pairs)
