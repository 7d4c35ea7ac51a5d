"""
Data Models and Schemas Module
==============================
Defines structured data representations for transcript splitting.

This module provides:
- The immutable TranscriptSegment value shared by every strategy
- The SplitMode enumeration and SplitOptions container
- Serialization/deserialization methods for the HTTP and CLI layers

These models form the contract between the splitting strategies and their
callers. Segments are frozen: strategies never mutate an input segment, they
build new ones.

Usage:
    from transcript_split.models import TranscriptSegment, SplitMode, SplitOptions

    segment = TranscriptSegment.create("A", 12.0, "Hello. World.")
    options = SplitOptions(mode=SplitMode.SENTENCE)
"""

from dataclasses import dataclass, asdict, fields
from enum import Enum
from typing import Optional, Dict, Any
import json
import math

from ..utils.time_utils import format_time, timestamp_to_seconds


# =============================================================================
# ENUMS
# =============================================================================

class SplitMode(str, Enum):
    """Splitting policies understood by the dispatcher."""
    SENTENCE = "sentence"
    TIME = "time"
    CHARACTER = "character"
    SEMANTIC = "semantic"

    @classmethod
    def parse(cls, value: Any) -> Optional["SplitMode"]:
        """Resolve a mode from an enum member or its string value, None if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


# =============================================================================
# BASE CLASSES
# =============================================================================

class BaseModel:
    """Mixin for all data models with common serialization methods."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary, handling nested objects."""
        def convert(obj):
            if isinstance(obj, BaseModel):
                return obj.to_dict()
            elif isinstance(obj, Enum):
                return obj.value
            elif isinstance(obj, (list, tuple)):
                return [convert(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: convert(v) for k, v in obj.items()}
            return obj

        return {k: convert(v) for k, v in asdict(self).items()}

    def to_json(self, indent: int = 2) -> str:
        """Convert model to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseModel":
        """Create model from dictionary. Override in subclasses for nested objects."""
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "BaseModel":
        """Create model from JSON string."""
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# TRANSCRIPT SEGMENTS
# =============================================================================

@dataclass(frozen=True)
class TranscriptSegment(BaseModel):
    """
    One speaker-attributed, timestamped span of transcript text.

    Attributes:
        speaker: Speaker identifier
        timestamp: Human-readable rendering of start_time_seconds
        start_time_seconds: Start time in seconds (non-negative)
        text: Raw utterance text, possibly padded with whitespace
    """
    speaker: str
    timestamp: str
    start_time_seconds: float
    text: str

    @classmethod
    def create(cls, speaker: str, start_time_seconds: float, text: str) -> "TranscriptSegment":
        """Build a segment whose timestamp is derived from its start time."""
        return cls(
            speaker=speaker,
            timestamp=format_time(start_time_seconds),
            start_time_seconds=start_time_seconds,
            text=text,
        )

    @property
    def trimmed_text(self) -> str:
        return self.text.strip()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase field names used on the wire."""
        return {
            'speaker': self.speaker,
            'timestamp': self.timestamp,
            'startTimeSeconds': self.start_time_seconds,
            'text': self.text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranscriptSegment":
        """
        Create a segment from a wire dictionary.

        Accepts camelCase (startTimeSeconds) or snake_case (start_time_seconds)
        keys. A missing timestamp is derived from the start time.

        Raises:
            ValueError: If the payload is not a mapping, text is missing, or the
                start time is not a non-negative number
        """
        if not isinstance(data, dict):
            raise ValueError(f"Segment must be an object, got {type(data).__name__}")

        text = data.get('text')
        if not isinstance(text, str):
            raise ValueError("Segment is missing a 'text' string")

        timestamp = data.get('timestamp')
        raw_start = data.get('startTimeSeconds', data.get('start_time_seconds'))
        if raw_start is None and isinstance(timestamp, str) and timestamp:
            raw_start = timestamp_to_seconds(timestamp)
        if isinstance(raw_start, bool) or raw_start is None:
            raise ValueError("Segment is missing 'startTimeSeconds'")
        try:
            start = float(raw_start)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid startTimeSeconds: {raw_start!r}")
        if math.isnan(start) or math.isinf(start) or start < 0:
            raise ValueError(f"startTimeSeconds must be a non-negative number, got {raw_start!r}")

        speaker = data.get('speaker', '')
        if not isinstance(timestamp, str) or not timestamp:
            return cls.create(str(speaker), start, text)

        return cls(
            speaker=str(speaker),
            timestamp=timestamp,
            start_time_seconds=start,
            text=text,
        )


# =============================================================================
# SPLIT OPTIONS
# =============================================================================

DEFAULT_MAX_DURATION = 30.0
DEFAULT_MAX_CHARACTERS = 100
DEFAULT_MIN_CHARACTERS_BATCH = 20
DEFAULT_MIN_CHARACTERS_SENTENCE = 5


def _positive_number(value: Any) -> Optional[float]:
    """Return value as a positive finite float, or None if it is malformed."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number) or number <= 0:
        return None
    return number


def _positive_int(value: Any) -> Optional[int]:
    number = _positive_number(value)
    if number is None:
        return None
    return int(number)


def _flag(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ('true', '1', 'yes'):
            return True
        if lowered in ('false', '0', 'no'):
            return False
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    return None


@dataclass(frozen=True)
class SplitOptions(BaseModel):
    """
    Options for one split invocation.

    Unset numeric fields stay None and each strategy applies its own
    documented default, because min_characters means different things in
    sentence splitting (5) and in the batching paths (20).

    Attributes:
        mode: Selected policy; None or an unknown value selects the identity transform
        max_duration: Batch duration ceiling in seconds (time/semantic)
        max_characters: Batch size ceiling (character)
        min_characters: Cut floor (character) / split floor (sentence)
        preserve_speaker: Force a new batch on speaker change
    """
    mode: Optional[SplitMode] = None
    max_duration: Optional[float] = None
    max_characters: Optional[int] = None
    min_characters: Optional[int] = None
    preserve_speaker: bool = True

    def __post_init__(self):
        # Plain strings are accepted for mode; unknown values become None
        object.__setattr__(self, 'mode', SplitMode.parse(self.mode))

    def resolved_preserve_speaker(self) -> bool:
        flag = _flag(self.preserve_speaker)
        return True if flag is None else flag

    def resolved_max_duration(self) -> float:
        return _positive_number(self.max_duration) or DEFAULT_MAX_DURATION

    def resolved_max_characters(self) -> int:
        return _positive_int(self.max_characters) or DEFAULT_MAX_CHARACTERS

    def resolved_min_characters(self, default: int) -> int:
        return _positive_int(self.min_characters) or default

    def replace(self, **changes) -> "SplitOptions":
        """Return a copy with the given fields changed."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(changes)
        return SplitOptions(**values)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], defaults: Optional["SplitOptions"] = None) -> "SplitOptions":
        """
        Create options from a wire dictionary.

        Accepts camelCase (maxDuration) or snake_case (max_duration) keys.
        Malformed values fall back to `defaults` (or to unset) rather than
        raising. An unknown mode string is kept as None so the dispatcher
        returns its input unchanged.
        """
        defaults = defaults or cls()
        data = data if isinstance(data, dict) else {}

        def pick(camel: str, snake: str):
            if camel in data:
                return data[camel]
            return data.get(snake)

        mode = defaults.mode
        if 'mode' in data:
            mode = SplitMode.parse(data['mode'])

        max_duration = _positive_number(pick('maxDuration', 'max_duration'))
        max_characters = _positive_int(pick('maxCharacters', 'max_characters'))
        min_characters = _positive_int(pick('minCharacters', 'min_characters'))
        preserve_speaker = _flag(pick('preserveSpeaker', 'preserve_speaker'))

        return cls(
            mode=mode,
            max_duration=max_duration if max_duration is not None else defaults.max_duration,
            max_characters=max_characters if max_characters is not None else defaults.max_characters,
            min_characters=min_characters if min_characters is not None else defaults.min_characters,
            preserve_speaker=preserve_speaker if preserve_speaker is not None else defaults.preserve_speaker,
        )

    @classmethod
    def from_config(cls, config) -> "SplitOptions":
        """Create default options from SplitConfig."""
        return cls(
            mode=SplitMode.parse(config.mode),
            max_duration=config.max_duration,
            max_characters=config.max_characters,
            min_characters=config.min_characters,
            preserve_speaker=config.preserve_speaker,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': self.mode.value if self.mode else None,
            'maxDuration': self.max_duration,
            'maxCharacters': self.max_characters,
            'minCharacters': self.min_characters,
            'preserveSpeaker': self.preserve_speaker,
        }
