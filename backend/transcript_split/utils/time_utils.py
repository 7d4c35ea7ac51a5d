"""
Time Utilities Module
=====================
Canonical implementation of the transcript time formatting helpers.
This module is the single source of truth for:
- Rendering start times as display timestamps
- Parsing display timestamps back to seconds

All other modules should import from here rather than defining their own versions.
"""

import math


def format_time(seconds: float) -> str:
    """
    Convert seconds to a display timestamp.

    Hours are shown only when non-zero and are not padded; minutes and
    seconds are always two digits. Fractions are floored.

    Args:
        seconds: Time in seconds (non-negative, may include fractional part)

    Returns:
        Formatted timestamp like "01:05" or "1:01:01"
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(math.floor(seconds % 60))

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Convert a display timestamp to seconds.

    Args:
        timestamp: "MM:SS" or "H:MM:SS", seconds may carry a fraction

    Returns:
        Time in seconds as float

    Raises:
        ValueError: If the timestamp does not have two or three numeric fields
    """
    parts = timestamp.strip().replace(',', '.').split(':')
    if len(parts) == 2:
        h, m, s = '0', parts[0], parts[1]
    elif len(parts) == 3:
        h, m, s = parts
    else:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")
    return int(h) * 3600 + int(m) * 60 + float(s)
