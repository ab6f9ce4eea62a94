"""Protocol definitions for the chat client hosting the addon."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable


class Eat(IntEnum):
    """Hook return values, numerically identical to HexChat's EAT_* constants."""

    NONE = 0
    HEXCHAT = 1
    PLUGIN = 2
    ALL = 3


@runtime_checkable
class HostContext(Protocol):
    """One conversation window of the host client."""

    def emit_print(self, event: str, *args: str) -> None: ...

    def print(self, text: str) -> None: ...

    def command(self, text: str) -> None: ...


@runtime_checkable
class HostClient(Protocol):
    """The slice of the host client API the translator consumes.

    Every method must be called on the host's UI thread. Lookups return
    None when the host cannot answer (not connected, window closed).
    """

    def get_info(self, name: str) -> str | None: ...

    def strip(self, text: str) -> str: ...

    def find_context(self, network: str, channel: str) -> HostContext | None: ...

    def print(self, text: str) -> None: ...

    def command(self, text: str) -> None: ...
