"""
Duration Estimation Module
==========================
Estimates how long a transcript segment takes to speak.

The preferred signal is the gap to the next segment's start time. When that
gap is missing or implausible the estimate falls back to a reading-rate
heuristic:

  CJK ideographs:   ~4 characters per second  (0.25 s each)
  everything else: ~20 characters per second  (0.05 s each)

The CJK test is a character-range heuristic only; there is no language
detection.
"""

from typing import Optional
import re

from ..models import TranscriptSegment


MAX_RELIABLE_GAP_SECONDS = 60.0
CJK_SECONDS_PER_CHAR = 0.25
OTHER_SECONDS_PER_CHAR = 0.05

CJK_PATTERN = re.compile(r"[\u4e00-\u9fa5]")


def count_cjk_characters(text: str) -> int:
    """Count characters in the CJK ideograph range U+4E00..U+9FA5."""
    return len(CJK_PATTERN.findall(text))


def estimate_speaking_duration(text: str) -> float:
    """Heuristic speaking time for text, in seconds."""
    cjk = count_cjk_characters(text)
    other = len(text) - cjk
    return cjk * CJK_SECONDS_PER_CHAR + other * OTHER_SECONDS_PER_CHAR


def calculate_duration(
    segment: TranscriptSegment,
    next_segment: Optional[TranscriptSegment],
    text: str
) -> float:
    """
    Duration of a segment within its scan sequence.

    Args:
        segment: The segment being measured
        next_segment: The following segment in the same sequence, if any
        text: The segment's trimmed text, used by the heuristic fallback

    Returns:
        The gap to next_segment when it lies in (0, 60] seconds, otherwise
        the heuristic estimate for text
    """
    if next_segment is not None:
        gap = next_segment.start_time_seconds - segment.start_time_seconds
        if 0 < gap <= MAX_RELIABLE_GAP_SECONDS:
            return gap

    return estimate_speaking_duration(text)
