#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
time_parser.py - Free-text time parser for the time picker text box

Turns whatever the user typed ("11pm", "   9    AM   ", "23:45:00", "7")
into a fully resolved 24-hour time, or rejects it. Rejection is a plain
``None``: the caller decides what to show instead.
"""

import re
from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import Optional

from . import build_time_pattern, parse_time_match
from .logger import setup_logger
from .config import get_testing_mode

logger = setup_logger('time_parser', testing=get_testing_mode())

# Hour-only input without AM/PM: 1-6 reads as afternoon, 7-11 as morning
AFTERNOON_HOURS = range(1, 7)


class Period(Enum):
    AM = 'AM'
    PM = 'PM'

    @classmethod
    def from_hour(cls, hour: int) -> 'Period':
        return cls.AM if hour < 12 else cls.PM


@dataclass(frozen=True)
class CanonicalTime:
    """A resolved 24-hour time. Out-of-range fields raise ValueError."""
    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second must be in 0..59, got {self.second}")

    @property
    def period(self) -> Period:
        return Period.from_hour(self.hour)

    def to_time(self) -> time:
        return time(self.hour, self.minute, self.second)

    @classmethod
    def from_time(cls, value: time) -> 'CanonicalTime':
        return cls(value.hour, value.minute, value.second)


class TimeParser:
    def __init__(self):
        self.time_pattern = re.compile(build_time_pattern(), re.IGNORECASE | re.ASCII)

    def resolve_hour(self, hour: int, meridiem: Optional[str]) -> Optional[int]:
        """Map the typed hour onto the 24-hour clock, or None if it can't be"""
        if hour > 23:
            return None

        # Already a 24-hour value: the marker can't move it
        if hour >= 13:
            return hour

        if meridiem is None:
            if hour in AFTERNOON_HOURS:
                return hour + 12
            return hour

        hour %= 12
        if meridiem == 'p':
            hour += 12
        return hour

    def parse(self, raw: str) -> Optional[CanonicalTime]:
        """Parse typed text into a CanonicalTime, or None if it is rejected"""
        text = raw.strip() if raw else ''
        if not text:
            logger.debug("Rejected empty input")
            return None

        match = self.time_pattern.match(text)
        if not match:
            logger.debug(f"Rejected {raw!r}: not a time")
            return None

        hour, minutes, seconds, meridiem = parse_time_match(match)

        if not (0 <= minutes <= 59 and 0 <= seconds <= 59):
            logger.debug(f"Rejected {raw!r}: minutes/seconds out of range")
            return None

        resolved = self.resolve_hour(hour, meridiem)
        if resolved is None:
            logger.debug(f"Rejected {raw!r}: hour {hour} out of range")
            return None

        result = CanonicalTime(resolved, minutes, seconds)
        logger.debug(f"Parsed {raw!r} as {result}")
        return result


_default_parser = TimeParser()


def parse_time(raw: str) -> Optional[CanonicalTime]:
    """Parse typed text with the shared parser"""
    return _default_parser.parse(raw)
