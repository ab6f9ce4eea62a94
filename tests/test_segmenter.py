"""Tests for splitting messages into translatable units."""

from __future__ import annotations

import pytest

from channel_translator.core.types import Unit
from channel_translator.translate.segmenter import segment


def _texts(text: str) -> list[str]:
    return [unit.text for unit in segment(text)]


class TestSegment:
    def test_empty_text_has_no_units(self):
        assert list(segment("")) == []

    def test_no_terminal_punctuation_is_one_unit(self):
        assert list(segment("Hello there")) == [Unit(text="Hello there", trailing_space=False)]

    def test_two_sentences(self):
        units = list(segment("Hello. How are you?"))
        assert units == [
            Unit(text="Hello. ", trailing_space=True),
            Unit(text="How are you?", trailing_space=False),
        ]

    @pytest.mark.parametrize("mark", [".", "?", "!", ";", "|"])
    def test_every_terminal_mark_splits(self, mark):
        assert _texts(f"one{mark} two") == [f"one{mark} ", "two"]

    def test_run_of_punctuation_stays_together(self):
        assert _texts("Really?!  Yes... ok") == ["Really?!  ", "Yes... ", "ok"]

    def test_punctuation_without_whitespace_does_not_split(self):
        assert _texts("see example.com or v1.2 now") == ["see example.com or v1.2 now"]

    def test_trailing_whitespace_flag_on_last_unit(self):
        units = list(segment("Done. "))
        assert units == [Unit(text="Done. ", trailing_space=True)]

    def test_newline_counts_as_whitespace(self):
        units = list(segment("First.\nSecond"))
        assert units[0] == Unit(text="First.\n", trailing_space=True)
        assert units[1].text == "Second"

    def test_whitespace_only_text(self):
        assert _texts("   ") == ["   "]

    @pytest.mark.parametrize(
        "text",
        [
            "Hello. How are you?",
            "  leading space. trailing  ",
            "a|b | c;d; e!!!   f",
            "no punctuation at all",
            "Line one.\n\nLine two?\n",
        ],
    )
    def test_units_join_back_to_input(self, text):
        assert "".join(_texts(text)) == text

    def test_sequence_is_restartable(self):
        units = segment("One. Two. Three")
        assert list(units) == list(units)
        assert len(list(units)) == 3
