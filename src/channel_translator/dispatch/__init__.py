"""UI-thread / worker-thread scheduling."""

from channel_translator.dispatch.bridge import DispatchBridge

__all__ = ["DispatchBridge"]
