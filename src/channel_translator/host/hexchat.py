"""HostClient implementation over HexChat's embedded ``hexchat`` module."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

# hexchat.strip() flags: 1 = colours, 2 = attributes.
_STRIP_ALL = 3


class HexChatContext:
    """Wraps a ``hexchat`` context object."""

    def __init__(self, context: Any) -> None:
        self._context = context

    def emit_print(self, event: str, *args: str) -> None:
        self._context.emit_print(event, *args)

    def print(self, text: str) -> None:
        self._context.prnt(text)

    def command(self, text: str) -> None:
        self._context.command(text)


class HexChatHost:
    """Adapts the ``hexchat`` module to the HostClient protocol.

    The module only exists inside HexChat's Python interpreter, so it is
    passed in rather than imported.
    """

    def __init__(self, hexchat: Any) -> None:
        self._hexchat = hexchat

    @property
    def module(self) -> Any:
        return self._hexchat

    def get_info(self, name: str) -> str | None:
        try:
            value = self._hexchat.get_info(name)
        except Exception:
            logger.exception("hexchat.get_info(%r) failed", name)
            return None
        return value or None

    def strip(self, text: str) -> str:
        try:
            return self._hexchat.strip(text, -1, _STRIP_ALL)
        except Exception:
            logger.exception("hexchat.strip() failed; using text as-is")
            return text

    def find_context(self, network: str, channel: str) -> HexChatContext | None:
        try:
            context = self._hexchat.find_context(server=network, channel=channel)
        except Exception:
            logger.exception("hexchat.find_context(%r, %r) failed", network, channel)
            return None
        if context is None:
            return None
        return HexChatContext(context)

    def print(self, text: str) -> None:
        self._hexchat.prnt(text)

    def command(self, text: str) -> None:
        self._hexchat.command(text)
