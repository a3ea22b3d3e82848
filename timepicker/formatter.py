from .time_parser import CanonicalTime


def format_time(t: CanonicalTime) -> str:
    """Display string for the text box, e.g. '5:00:00 PM'"""
    hour = t.hour % 12 or 12
    return f"{hour}:{t.minute:02d}:{t.second:02d} {t.period.value}"


def format_24h(t: CanonicalTime) -> str:
    return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
