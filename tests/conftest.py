"""Shared test fixtures and helpers."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from channel_translator.context.registry import ContextRegistry
from channel_translator.core.types import ContextKey, Failed, FailureKind, Translated, Unit
from channel_translator.dispatch.bridge import DispatchBridge
from channel_translator.languages.catalog import LanguageCatalog
from channel_translator.service import ChannelTranslator
from channel_translator.translate.pipeline import TranslationPipeline


NETWORK = "Libera.Chat"
CHANNEL = "#python"
KEY = ContextKey(network=NETWORK, channel=CHANNEL)


class FakeContext:
    """Records what the translator does to one window."""

    def __init__(self) -> None:
        self.emitted: list[tuple[str, tuple[str, ...]]] = []
        self.printed: list[str] = []
        self.commands: list[str] = []

    def emit_print(self, event: str, *args: str) -> None:
        self.emitted.append((event, args))

    def print(self, text: str) -> None:
        self.printed.append(text)

    def command(self, text: str) -> None:
        self.commands.append(text)


class FakeHost:
    """In-memory HostClient with a single current window."""

    def __init__(self, network: str | None = NETWORK, channel: str | None = CHANNEL) -> None:
        self.info: dict[str, str | None] = {"network": network, "channel": channel}
        self.contexts: dict[tuple[str, str], FakeContext] = {}
        if network is not None and channel is not None:
            self.contexts[(network, channel)] = FakeContext()
        self.printed: list[str] = []
        self.commands: list[str] = []

    @property
    def current(self) -> FakeContext:
        return self.contexts[(self.info["network"], self.info["channel"])]

    def get_info(self, name: str) -> str | None:
        return self.info.get(name)

    def strip(self, text: str) -> str:
        return text.replace("\x02", "").replace("\x1f", "")

    def find_context(self, network: str, channel: str) -> FakeContext | None:
        return self.contexts.get((network, channel))

    def print(self, text: str) -> None:
        self.printed.append(text)

    def command(self, text: str) -> None:
        self.commands.append(text)


class InlineBridge(DispatchBridge):
    """DispatchBridge that runs background work immediately on the caller."""

    def spawn_background(self, work, *, name=None):  # type: ignore[override]
        work()
        return None


class ScriptedTranslator:
    """Unit translator returning canned outcomes.

    ``script`` maps a unit's text to an outcome; unmapped units are
    "translated" by upper-casing them.
    """

    def __init__(self, script: dict[str, object] | None = None) -> None:
        self.script = script or {}
        self.calls: list[tuple[Unit, str, str]] = []

    def translate_unit(self, unit: Unit, source: str, target: str):
        self.calls.append((unit, source, target))
        outcome = self.script.get(unit.text)
        if outcome is None:
            return Translated(text=unit.text.upper())
        return outcome


def rate_limited() -> Failed:
    return Failed(
        reason=FailureKind.RATE_LIMITED,
        detail="Translation service rate limit reached (HTTP 403).",
    )


def unreachable() -> Failed:
    return Failed(
        reason=FailureKind.TRANSIENT,
        detail="Translation service could not be reached.",
    )


@pytest.fixture
def catalog() -> LanguageCatalog:
    return LanguageCatalog()


@pytest.fixture
def registry(catalog) -> ContextRegistry:
    return ContextRegistry(catalog)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def scripted() -> ScriptedTranslator:
    return ScriptedTranslator()


@pytest.fixture
def bridge() -> InlineBridge:
    return InlineBridge()


@pytest.fixture
def make_translator(host, registry, catalog, bridge) -> Callable[..., ChannelTranslator]:
    def factory(unit_translator=None, **overrides) -> ChannelTranslator:
        kwargs = {
            "host": host,
            "registry": registry,
            "catalog": catalog,
            "pipeline": TranslationPipeline(unit_translator or ScriptedTranslator()),
            "bridge": bridge,
        }
        kwargs.update(overrides)
        return ChannelTranslator(**kwargs)

    return factory
