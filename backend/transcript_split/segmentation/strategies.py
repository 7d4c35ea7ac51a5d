"""
Splitting Strategies Module
===========================
Implements the transcript re-partitioning algorithms.

STRATEGY COMPARISON:
-------------------

SENTENCE:
  - Splits each segment at terminal punctuation
  - Start times of the pieces are interpolated by character share
  - Never merges segments

TIME:
  - Greedy batching bounded by cumulative estimated duration
  - A speaker change forces a cut (preserve_speaker)
  - No minimum batch duration

CHARACTER:
  - Greedy batching bounded by cumulative raw character count
  - A forced cut is only honoured once the batch holds min_characters;
    under-filled batches absorb the next segment even if that overflows
    max_characters or mixes speakers

SEMANTIC:
  - SENTENCE followed by TIME over the sentence pieces
  - A fixed two-pass heuristic, not language understanding

Strategies:
1. SentenceSplitStrategy
2. TimeBatchStrategy
3. CharacterBatchStrategy
4. SemanticStrategy
"""

from abc import ABC, abstractmethod
from typing import List, Sequence
import logging

from .boundaries import has_terminal_punctuation, split_sentence_parts
from .timing import calculate_duration
from ..models import (
    TranscriptSegment,
    SplitOptions,
    DEFAULT_MAX_DURATION,
    DEFAULT_MIN_CHARACTERS_BATCH,
    DEFAULT_MIN_CHARACTERS_SENTENCE,
)

logger = logging.getLogger(__name__)


def merge_batch(batch: Sequence[TranscriptSegment], start_time: float) -> TranscriptSegment:
    """
    Merge a batch of segments into one segment.

    Texts are joined with a single space as they are (no trimming); the
    speaker is taken from the first segment.

    Args:
        batch: Non-empty ordered list of segments
        start_time: Start time of the merged segment

    Returns:
        New TranscriptSegment starting at start_time
    """
    text = " ".join(segment.text for segment in batch)
    return TranscriptSegment.create(batch[0].speaker, start_time, text)


class SplitStrategy(ABC):
    """
    Abstract base class for splitting strategies.

    Strategies take an ordered segment sequence and options, returning a new
    list of segments. They never mutate their input and hold no state
    between calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name for logging."""
        pass

    @property
    def description(self) -> str:
        """Strategy description."""
        return f"Split strategy: {self.name}"

    @abstractmethod
    def split(
        self,
        segments: Sequence[TranscriptSegment],
        options: SplitOptions
    ) -> List[TranscriptSegment]:
        """
        Re-partition segments.

        Args:
            segments: Ordered transcript segments
            options: Split options; unset fields take this strategy's defaults

        Returns:
            New ordered list of segments
        """
        pass


class SentenceSplitStrategy(SplitStrategy):
    """
    Splits segments at sentence-terminal punctuation.

    For each segment:
    1. Texts shorter than min_characters, or without terminal punctuation,
       pass through unchanged
    2. The trimmed text is partitioned into sentence parts
    3. The segment's estimated duration is shared among the parts by
       character count, and each part starts at the running offset
    """

    @property
    def name(self) -> str:
        return "sentence"

    @property
    def description(self) -> str:
        return "Split at sentence-terminal punctuation with interpolated start times"

    def split(
        self,
        segments: Sequence[TranscriptSegment],
        options: SplitOptions
    ) -> List[TranscriptSegment]:
        min_characters = options.resolved_min_characters(DEFAULT_MIN_CHARACTERS_SENTENCE)
        result = []

        for index, segment in enumerate(segments):
            text = segment.trimmed_text

            if len(text) < min_characters or not has_terminal_punctuation(text):
                result.append(segment)
                continue

            parts = split_sentence_parts(text)
            if len(parts) <= 1:
                result.append(segment)
                continue

            next_segment = segments[index + 1] if index + 1 < len(segments) else None
            duration = calculate_duration(segment, next_segment, text)
            total_chars = len(text)

            offset = 0.0
            for part in parts:
                result.append(TranscriptSegment.create(
                    segment.speaker,
                    segment.start_time_seconds + offset,
                    part.text,
                ))
                offset += duration * (len(part) / total_chars)

            logger.debug(
                f"Split segment at {segment.timestamp} into {len(parts)} parts "
                f"over {duration:.2f}s"
            )

        return result


class TimeBatchStrategy(SplitStrategy):
    """
    Greedy batching bounded by cumulative duration.

    Each segment's duration is measured against the next segment of the
    sequence being scanned. The current batch is closed before a segment
    that would push it over max_duration, or before a speaker change when
    preserve_speaker is set.

    The reading-rate fallback measures the trimmed text, as sentence
    splitting does, so padding whitespace adds no duration.
    """

    @property
    def name(self) -> str:
        return "time"

    @property
    def description(self) -> str:
        return "Merge consecutive segments up to a maximum duration"

    def split(
        self,
        segments: Sequence[TranscriptSegment],
        options: SplitOptions
    ) -> List[TranscriptSegment]:
        max_duration = options.resolved_max_duration()
        preserve_speaker = options.resolved_preserve_speaker()
        result = []

        batch: List[TranscriptSegment] = []
        batch_start_time = 0.0
        batch_duration = 0.0

        for index, segment in enumerate(segments):
            next_segment = segments[index + 1] if index + 1 < len(segments) else None
            segment_duration = calculate_duration(segment, next_segment, segment.trimmed_text)

            should_start_new = (
                batch_duration + segment_duration > max_duration
                or (preserve_speaker and batch and batch[0].speaker != segment.speaker)
            )

            if should_start_new and batch:
                result.append(merge_batch(batch, batch_start_time))
                batch = []
                batch_duration = 0.0

            if not batch:
                batch_start_time = segment.start_time_seconds

            batch.append(segment)
            batch_duration += segment_duration

        if batch:
            result.append(merge_batch(batch, batch_start_time))

        logger.debug(f"Time batching merged {len(segments)} segments into {len(result)}")
        return result


class CharacterBatchStrategy(SplitStrategy):
    """
    Greedy batching bounded by cumulative character count.

    Counts raw (untrimmed) text length. A cut forced by overflow or a
    speaker change only happens when the current batch already holds
    min_characters; otherwise the segment joins the under-filled batch.
    """

    @property
    def name(self) -> str:
        return "character"

    @property
    def description(self) -> str:
        return "Merge consecutive segments up to a maximum character count"

    def split(
        self,
        segments: Sequence[TranscriptSegment],
        options: SplitOptions
    ) -> List[TranscriptSegment]:
        max_characters = options.resolved_max_characters()
        min_characters = options.resolved_min_characters(DEFAULT_MIN_CHARACTERS_BATCH)
        preserve_speaker = options.resolved_preserve_speaker()
        result = []

        batch: List[TranscriptSegment] = []
        batch_start_time = 0.0
        batch_chars = 0

        for segment in segments:
            segment_chars = len(segment.text)

            should_start_new = (
                batch_chars + segment_chars > max_characters
                or (preserve_speaker and batch and batch[0].speaker != segment.speaker)
            )

            if should_start_new and batch and batch_chars >= min_characters:
                result.append(merge_batch(batch, batch_start_time))
                batch = []
                batch_chars = 0

            if not batch:
                batch_start_time = segment.start_time_seconds

            batch.append(segment)
            batch_chars += segment_chars

        if batch:
            result.append(merge_batch(batch, batch_start_time))

        logger.debug(f"Character batching merged {len(segments)} segments into {len(result)}")
        return result


class SemanticStrategy(SplitStrategy):
    """
    Sentence splitting followed by time batching.

    The sentence pass gets the caller's options unchanged. The time pass
    gets the same options with max_duration defaulted to 30 seconds.
    """

    @property
    def name(self) -> str:
        return "semantic"

    @property
    def description(self) -> str:
        return "Sentence split, then merge sentences up to a maximum duration"

    def __init__(self):
        self.sentence_strategy = SentenceSplitStrategy()
        self.time_strategy = TimeBatchStrategy()

    def split(
        self,
        segments: Sequence[TranscriptSegment],
        options: SplitOptions
    ) -> List[TranscriptSegment]:
        sentences = self.sentence_strategy.split(segments, options)
        time_options = options.replace(max_duration=options.max_duration or DEFAULT_MAX_DURATION)
        return self.time_strategy.split(sentences, time_options)
