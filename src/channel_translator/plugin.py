"""Wires the ChannelTranslator into a running HexChat instance."""

from __future__ import annotations

import logging
from typing import Any

from channel_translator.context.registry import ContextRegistry
from channel_translator.core.config import Settings
from channel_translator.dispatch.bridge import DispatchBridge
from channel_translator.host.hexchat import HexChatHost
from channel_translator.languages.catalog import LanguageCatalog
from channel_translator.service import (
    LISTLANG_HELP,
    LME_HELP,
    LSAY_HELP,
    OFFLANG_HELP,
    SETLANG_HELP,
    TEXT_EVENTS,
    ChannelTranslator,
)
from channel_translator.translate.client import SegmentTranslator
from channel_translator.translate.pipeline import TranslationPipeline

logger = logging.getLogger(__name__)

PLUGIN_NAME = "Language Translator"
PLUGIN_VERSION = "0.1"
PLUGIN_DESCRIPTION = "Instantly translated conversation in over 100 languages."


class TranslatorPlugin:
    """Owns the hook handles and resources of one loaded addon instance."""

    def __init__(
        self,
        hexchat: Any,
        translator: ChannelTranslator,
        segment_translator: SegmentTranslator,
    ) -> None:
        self._hexchat = hexchat
        self.translator = translator
        self._segment_translator = segment_translator
        self._hooks: list[Any] = []

    def hook(self, settings: Settings) -> None:
        hc = self._hexchat
        t = self.translator
        commands = (
            ("LISTLANG", t.on_listlang, LISTLANG_HELP),
            ("SETLANG", t.on_setlang, SETLANG_HELP),
            ("OFFLANG", t.on_offlang, OFFLANG_HELP),
            ("LSAY", t.on_lsay, LSAY_HELP),
            ("LME", t.on_lme, LME_HELP),
        )
        for name, handler, help_text in commands:
            self._hooks.append(
                hc.hook_command(name, _command_callback(handler), help=help_text)
            )
        for event in TEXT_EVENTS:
            self._hooks.append(
                hc.hook_print(event, self._on_print, userdata=event)
            )
        self._hooks.append(
            hc.hook_timer(settings.poll_interval_ms, self._on_timer)
        )
        hc.hook_unload(self._on_unload)

    def _on_print(self, word: list[str], word_eol: list[str], event: str) -> int:
        return int(self.translator.on_text_event(event, list(word)))

    def _on_timer(self, userdata: Any) -> bool:
        self.translator.bridge.drain()
        return True

    def _on_unload(self, userdata: Any) -> None:
        for handle in self._hooks:
            self._hexchat.unhook(handle)
        self._hooks.clear()
        active = len(self.translator.registry)
        if active:
            logger.info("Unloading with %d active context(s)", active)
        self._segment_translator.close()
        self._hexchat.prnt(f"{PLUGIN_NAME} unloaded")


def _command_callback(handler):
    def callback(word: list[str], word_eol: list[str], userdata: Any) -> int:
        return int(handler(list(word), list(word_eol)))

    return callback


def register(hexchat: Any, settings: Settings | None = None) -> TranslatorPlugin:
    """Build the translator and hook it into ``hexchat``.

    Args:
        hexchat: HexChat's embedded ``hexchat`` module.
        settings: Addon settings. Defaults to Settings() from the environment.

    Returns:
        The loaded TranslatorPlugin.
    """
    settings = settings or Settings()
    logging.getLogger("channel_translator").setLevel(settings.log_level.upper())

    catalog = LanguageCatalog()
    segment_translator = SegmentTranslator(settings.translator)
    translator = ChannelTranslator(
        host=HexChatHost(hexchat),
        registry=ContextRegistry(catalog),
        catalog=catalog,
        pipeline=TranslationPipeline(segment_translator),
        bridge=DispatchBridge(),
        marker=settings.marker,
    )
    plugin = TranslatorPlugin(hexchat, translator, segment_translator)
    plugin.hook(settings)
    hexchat.prnt(f"{PLUGIN_NAME} loaded")
    return plugin
