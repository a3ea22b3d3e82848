# Time pattern components
TIME_COMPONENTS = {
    'hours': r'(\d{1,2})',                          # 0-23
    'clock': r'(?::(\d{1,2})(?::(\d{1,2}))?)?',     # :MM and :MM:SS
    'spaces': r'\s*',                               # Optional spaces
    'meridiem': r'(?:([ap])m?)?',                   # a/p/am/pm
}

# Build time patterns
def build_time_pattern():
    """Build the full-string time pattern from components"""
    return (r"^"
            f"{TIME_COMPONENTS['hours']}"
            f"{TIME_COMPONENTS['clock']}"
            f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['meridiem']}"
            r"$")

# Shared match unpacking
def parse_time_match(match):
    """Split a time match into raw (hour, minute, second, meridiem) fields"""
    hour = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    seconds = int(match.group(3)) if match.group(3) else 0
    meridiem = match.group(4).lower() if match.group(4) else None  # 'a', 'p' or None

    return hour, minutes, seconds, meridiem

from .time_parser import CanonicalTime, Period, TimeParser, parse_time  # noqa: E402
from .formatter import format_time, format_24h  # noqa: E402
from .picker import TimePicker  # noqa: E402

__all__ = [
    "CanonicalTime",
    "Period",
    "TimeParser",
    "TimePicker",
    "build_time_pattern",
    "format_24h",
    "format_time",
    "parse_time",
    "parse_time_match",
]
