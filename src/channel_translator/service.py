"""Command and text-event handlers for the channel translator.

This is the entry point for everything the host calls. Handlers run on
the host's UI thread: they read the current context, snapshot what the
translation needs, and hand the network work to a background thread. The
result comes back through the DispatchBridge and is shown on the UI thread.
"""

from __future__ import annotations

import logging

from channel_translator.context.registry import ContextRegistry
from channel_translator.core.types import AggregateOutcome, ContextKey
from channel_translator.dispatch.bridge import DispatchBridge
from channel_translator.host.base import Eat, HostClient, HostContext
from channel_translator.languages.catalog import LanguageCatalog
from channel_translator.translate.pipeline import TranslationPipeline

logger = logging.getLogger(__name__)

LISTLANG_HELP = (
    "/LISTLANG - Lists languages supported and their abbreviations. "
    "This command takes no parameters."
)
SETLANG_HELP = "/SETLANG <src> <tgt> - Sets source and target languages for the channel."
OFFLANG_HELP = (
    "/OFFLANG - Deactivates translation on the channel. "
    "This command takes no parameters."
)
LSAY_HELP = "/LSAY <message> - Sends a translated message to the channel."
LME_HELP = "/LME <message> - Sends a channel action message translated."

# Events whose text is translated when the context is active.
MESSAGE_EVENTS = (
    "Channel Message",
    "Channel Msg Hilight",
    "Channel Action",
    "Channel Action Hilight",
    "Private Message",
    "Private Message to Dialog",
    "Private Action",
    "Private Action to Dialog",
)
# Observed but always passed through untouched.
PASSTHROUGH_EVENTS = (
    "You Part",
    "You Part with Reason",
    "Disconnected",
)
TEXT_EVENTS = MESSAGE_EVENTS + PASSTHROUGH_EVENTS

# mIRC colour 13 (pink); marks lines the translator prints itself.
_NOTE = "\x0313"

_BAD_LANGUAGES_MESSAGE = (
    "BAD LANGUAGE PARAMETERS. Use /LISTLANG to get a list of supported "
    "languages. And don't set translation source and target languages "
    "the same."
)
_NO_CONTEXT_MESSAGE = (
    "Channel Translator: unable to determine the current network and "
    "channel. Are you connected?"
)
_RATE_LIMIT_NOTICE = (
    "Channel Translator: the translation service is rate limiting "
    "requests. Translation turned OFF for this channel."
)


class ChannelTranslator:
    """Implements the translator's commands and its text-event hook.

    Args:
        host: The HostClient used for every UI-thread interaction.
        registry: The ContextRegistry holding active contexts.
        catalog: The LanguageCatalog used to resolve /SETLANG arguments.
        pipeline: The TranslationPipeline run on worker threads.
        bridge: The DispatchBridge moving work on and off the UI thread.
        marker: Word appended to re-emitted events so they are not
            translated a second time.
    """

    def __init__(
        self,
        host: HostClient,
        registry: ContextRegistry,
        catalog: LanguageCatalog,
        pipeline: TranslationPipeline,
        bridge: DispatchBridge,
        marker: str = "~",
    ) -> None:
        self._host = host
        self._registry = registry
        self._catalog = catalog
        self._pipeline = pipeline
        self._bridge = bridge
        self._marker = marker

    @property
    def registry(self) -> ContextRegistry:
        return self._registry

    @property
    def bridge(self) -> DispatchBridge:
        return self._bridge

    # -- commands ------------------------------------------------------------

    def on_listlang(self, word: list[str], word_eol: list[str]) -> Eat:
        """Print the supported-language table."""
        if len(word) != 1:
            self._host.print(f"USAGE: {LISTLANG_HELP}")
            return Eat.ALL

        self._host.print("")
        self._host.print(
            "------------------------ Supported Languages ------------------------"
        )
        for row in self._catalog.rows(columns=3):
            cells = [f"{lang.name:<15}{lang.code:<3}" for lang in row]
            self._host.print("        ".join(cells).rstrip())
        self._host.print("")
        return Eat.ALL

    def on_setlang(self, word: list[str], word_eol: list[str]) -> Eat:
        """Switch translation on for the current context.

        ``word`` is ``["SETLANG", <src>, <tgt>]`` where each language may be
        given by name or by code.
        """
        if len(word) != 3:
            self._host.print(f"USAGE: {SETLANG_HELP}")
            return Eat.ALL

        source = self._catalog.find(word[1])
        target = self._catalog.find(word[2])
        if source is None or target is None or source == target:
            self._host.print(_BAD_LANGUAGES_MESSAGE)
            return Eat.ALL

        key = self._current_key()
        if key is None:
            self._host.print(_NO_CONTEXT_MESSAGE)
            return Eat.ALL

        try:
            self._registry.activate(key, source.code, target.code)
        except ValueError as exc:
            self._host.print(f"{_BAD_LANGUAGES_MESSAGE} ({exc})")
            return Eat.ALL

        self._host.print(
            f"TRANSLATION IS ON FOR THIS CHANNEL! {source.name} (you) to "
            f"{target.name} (them)."
        )
        return Eat.ALL

    def on_offlang(self, word: list[str], word_eol: list[str]) -> Eat:
        """Switch translation off for the current context."""
        if len(word) != 1:
            self._host.print(f"USAGE: {OFFLANG_HELP}")
            return Eat.ALL

        key = self._current_key()
        if key is None:
            self._host.print(_NO_CONTEXT_MESSAGE)
            return Eat.ALL

        self._registry.deactivate(key)
        self._host.print("Translation turned OFF for this channel.")
        return Eat.ALL

    def on_lsay(self, word: list[str], word_eol: list[str], command: str = "SAY") -> Eat:
        """Translate a message and send it with ``command`` (SAY or ME).

        Translation runs in the background; the message is sent once it
        finishes. If translation is off here the text is sent as typed.
        """
        if len(word) < 2:
            help_text = LME_HELP if command == "ME" else LSAY_HELP
            self._host.print(f"USAGE: {help_text}")
            return Eat.ALL

        key = self._current_key()
        if key is None:
            self._host.print(_NO_CONTEXT_MESSAGE)
            return Eat.ALL

        message = word_eol[1]
        pair = self._registry.lookup(key)
        if pair is None:
            self._host.command(f"{command} {message}")
            return Eat.ALL

        text = self._host.strip(message)
        source, target = pair.source, pair.target

        def work() -> None:
            outcome = self._pipeline.translate_message(text, source, target)
            self._bridge.post_to_ui(
                lambda: self._deliver_outgoing(key, command, outcome)
            )

        self._bridge.spawn_background(work)
        return Eat.ALL

    def on_lme(self, word: list[str], word_eol: list[str]) -> Eat:
        return self.on_lsay(word, word_eol, command="ME")

    # -- text events ---------------------------------------------------------

    def on_text_event(self, event: str, word: list[str]) -> Eat:
        """Translate an incoming message into the local user's language.

        The original event is swallowed and re-emitted with the translation
        once it is ready. Re-emitted events end with the marker word and
        are let through untouched.
        """
        if event not in MESSAGE_EVENTS:
            logger.debug("Passing through %r event", event)
            return Eat.NONE
        if word and word[-1] == self._marker:
            return Eat.NONE
        if len(word) < 2 or not word[1]:
            return Eat.NONE

        key = self._current_key()
        if key is None:
            return Eat.NONE
        pair = self._registry.lookup(key)
        if pair is None:
            return Eat.NONE

        sender = word[0]
        text = self._host.strip(word[1])
        mode_char = word[2] if len(word) > 2 else ""
        # Incoming text is in the other side's language.
        source, target = pair.target, pair.source

        def work() -> None:
            outcome = self._pipeline.translate_message(text, source, target)
            self._bridge.post_to_ui(
                lambda: self._deliver_incoming(key, event, sender, text, mode_char, outcome)
            )

        self._bridge.spawn_background(work)
        return Eat.ALL

    # -- UI-thread delivery --------------------------------------------------

    def _deliver_outgoing(
        self, key: ContextKey, command: str, outcome: AggregateOutcome
    ) -> None:
        context = self._find_context(key)
        if context is not None:
            context.command(f"{command} {outcome.text}")
            if outcome.partial:
                context.print(
                    f"{_NOTE}Channel Translator: sent partially translated. "
                    f"{outcome.error_summary}"
                )
        if outcome.rate_limited:
            self._disable_for_rate_limit(key, context)

    def _deliver_incoming(
        self,
        key: ContextKey,
        event: str,
        sender: str,
        original: str,
        mode_char: str,
        outcome: AggregateOutcome,
    ) -> None:
        context = self._find_context(key)
        if context is not None:
            args = [sender, outcome.text]
            if mode_char:
                args.append(mode_char)
            args.append(self._marker)
            context.emit_print(event, *args)
            if outcome.text != original:
                context.print(f"{_NOTE}{original}")
            if outcome.partial:
                context.print(
                    f"{_NOTE}Channel Translator: partial translation. "
                    f"{outcome.error_summary}"
                )
        if outcome.rate_limited:
            self._disable_for_rate_limit(key, context)

    def _disable_for_rate_limit(self, key: ContextKey, context: HostContext | None) -> None:
        self._registry.deactivate(key)
        if context is not None:
            context.print(f"{_NOTE}{_RATE_LIMIT_NOTICE}")
        else:
            self._host.print(_RATE_LIMIT_NOTICE)

    # -- internal ------------------------------------------------------------

    def _current_key(self) -> ContextKey | None:
        network = self._host.get_info("network")
        channel = self._host.get_info("channel")
        if network is None or channel is None:
            return None
        return ContextKey(network=network, channel=channel)

    def _find_context(self, key: ContextKey) -> HostContext | None:
        context = self._host.find_context(key.network, key.channel)
        if context is None:
            logger.warning("Context %s/%s is gone", key.network, key.channel)
            self._host.print(
                f"Channel Translator: failed to find the window for "
                f"{key.channel} on {key.network}."
            )
        return context
