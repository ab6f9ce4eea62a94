"""Segmentation, per-unit translation, and message aggregation."""

from channel_translator.translate.client import SegmentTranslator
from channel_translator.translate.pipeline import TranslationPipeline
from channel_translator.translate.segmenter import UnitSequence, segment

__all__ = ["SegmentTranslator", "TranslationPipeline", "UnitSequence", "segment"]
