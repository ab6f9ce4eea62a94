#!/usr/bin/env python3
"""CLI script to run the translation pipeline outside HexChat."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the project source is importable when running the script directly.
_project_root = Path(__file__).resolve().parent.parent
_src = _project_root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from channel_translator.core.config import Settings  # noqa: E402
from channel_translator.languages.catalog import LanguageCatalog  # noqa: E402
from channel_translator.translate.client import SegmentTranslator  # noqa: E402
from channel_translator.translate.pipeline import TranslationPipeline  # noqa: E402
from channel_translator.translate.segmenter import segment  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Translate a message the way the HexChat addon would."
    )
    parser.add_argument("source", help="Source language name or code.")
    parser.add_argument("target", help="Target language name or code.")
    parser.add_argument("message", nargs="+", help="Text to translate.")
    parser.add_argument(
        "--show-units",
        action="store_true",
        help="Print the units the message is split into before translating.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    catalog = LanguageCatalog()
    source = catalog.find(args.source)
    target = catalog.find(args.target)
    if source is None or target is None:
        print("Unknown language. Supported codes:")
        print("  " + ", ".join(lang.code for lang in catalog.languages))
        sys.exit(2)
    if source == target:
        print("Source and target languages must differ.")
        sys.exit(2)

    message = " ".join(args.message)
    if args.show_units:
        for index, unit in enumerate(segment(message), start=1):
            print(f"  unit {index}: {unit.text!r}")

    with SegmentTranslator(settings.translator) as translator:
        outcome = TranslationPipeline(translator).translate_message(
            message, source.code, target.code
        )

    print(outcome.text)
    if outcome.partial:
        print(f"Partial translation: {outcome.error_summary}")
        if outcome.rate_limited:
            print("The translation service is rate limiting requests.")
        sys.exit(1)


if __name__ == "__main__":
    main()
