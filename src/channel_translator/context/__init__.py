"""Per-conversation translation state."""

from channel_translator.context.registry import ContextRegistry

__all__ = ["ContextRegistry"]
