"""
Data Models Package
===================
Exports all data model classes for transcript splitting.

Usage:
    from transcript_split.models import TranscriptSegment, SplitMode, SplitOptions
"""

from .schemas import (
    # Enums
    SplitMode,

    # Base
    BaseModel,

    # Segments
    TranscriptSegment,

    # Options
    SplitOptions,
    DEFAULT_MAX_DURATION,
    DEFAULT_MAX_CHARACTERS,
    DEFAULT_MIN_CHARACTERS_BATCH,
    DEFAULT_MIN_CHARACTERS_SENTENCE,
)

__all__ = [
    # Enums
    'SplitMode',

    # Base
    'BaseModel',

    # Segments
    'TranscriptSegment',

    # Options
    'SplitOptions',
    'DEFAULT_MAX_DURATION',
    'DEFAULT_MAX_CHARACTERS',
    'DEFAULT_MIN_CHARACTERS_BATCH',
    'DEFAULT_MIN_CHARACTERS_SENTENCE',
]
