"""
Transcript Split
================
Re-partitions timestamped speech-transcript segments into coherent,
time-aligned chunks for display or captioning.

Usage:
    from transcript_split import TranscriptSegment, SplitMode, SplitOptions, split_segments

    segments = [TranscriptSegment.create("A", 10.0, "Hello. World.")]
    result = split_segments(segments, SplitOptions(mode=SplitMode.SENTENCE))
"""

__version__ = "1.0.0"

from .models import TranscriptSegment, SplitMode, SplitOptions
from .segmentation import TranscriptSplitter, split_segments
from .utils.time_utils import format_time

__all__ = [
    '__version__',
    'TranscriptSegment',
    'SplitMode',
    'SplitOptions',
    'TranscriptSplitter',
    'split_segments',
    'format_time',
]
