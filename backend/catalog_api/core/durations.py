"""Duration Utilities — M:SS strings <-> integer seconds, current-year default.

Invariants:
    - parse_duration(format_duration(n)) == n for every n >= 0
    - parse_duration accepts exactly two all-digit parts; seconds >= 60 are kept as-is
    - format_duration zero-pads seconds to two digits and never clamps
"""

from datetime import date


class DurationFormatError(ValueError):
    """Raised when a duration string is not of the form M:SS."""

    def __init__(self, value: object):
        super().__init__(f"Invalid length '{value}': expected M:SS")
        self.value = value


def parse_duration(value: str) -> int:
    """Convert "M:SS" (or "MM:SS") to total seconds."""
    if not isinstance(value, str):
        raise DurationFormatError(value)
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise DurationFormatError(value)
    minutes, seconds = (int(p) for p in parts)
    return minutes * 60 + seconds


def format_duration(seconds: int) -> str:
    """Convert total seconds to "M:SS"."""
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes}:{remainder:02d}"


def total_duration(lengths) -> int:
    """Sum M:SS lengths; missing (None/empty) lengths count as zero."""
    return sum(parse_duration(length) for length in lengths if length)


def current_year() -> int:
    return date.today().year
