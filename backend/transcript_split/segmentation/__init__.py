"""
Transcript Segmentation Module
==============================
Re-partitions timestamped transcript segments into display-sized chunks.

This module implements multiple splitting strategies:
- Sentence: Splits segments at terminal punctuation
- Time: Merges consecutive segments up to a maximum duration
- Character: Merges consecutive segments up to a maximum character count
- Semantic: Sentence splitting followed by time batching

Usage:
    from transcript_split.segmentation import TranscriptSplitter, split_segments

    segments = split_segments(segments, SplitOptions(mode=SplitMode.SENTENCE))
"""

from .strategies import (
    SplitStrategy,
    SentenceSplitStrategy,
    TimeBatchStrategy,
    CharacterBatchStrategy,
    SemanticStrategy,
    merge_batch,
)
from .segmenter import TranscriptSplitter, STRATEGY_REGISTRY, split_segments
from .boundaries import SentencePart, split_sentence_parts, has_terminal_punctuation
from .timing import calculate_duration, estimate_speaking_duration

__all__ = [
    'TranscriptSplitter',
    'STRATEGY_REGISTRY',
    'split_segments',
    'SplitStrategy',
    'SentenceSplitStrategy',
    'TimeBatchStrategy',
    'CharacterBatchStrategy',
    'SemanticStrategy',
    'merge_batch',
    'SentencePart',
    'split_sentence_parts',
    'has_terminal_punctuation',
    'calculate_duration',
    'estimate_speaking_duration',
]
