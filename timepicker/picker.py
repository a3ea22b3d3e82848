#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from datetime import date, datetime
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from .time_parser import CanonicalTime, Period, parse_time
from .formatter import format_time
from .logger import setup_logger
from .config import get_testing_mode, load_config

# Get logger
logger = setup_logger('picker', testing=get_testing_mode())

# Any fixed day works: only the time of day survives a shift
_SHIFT_BASE_DATE = date(2000, 1, 1)


class TimePicker:
    """Selection state behind the time picker's text box and hour/minute/second lists.

    ``selection`` is the committed time (None when empty). ``text`` is what the
    text box shows; it can be edited freely and only counts once committed.
    A rejected commit never touches the selection, it just puts the last
    committed value back in the text box.
    """

    def __init__(self, config: Optional[Dict] = None):
        self.config = config if config is not None else load_config()
        self.default_period = Period(self.config.get('default_period', 'PM'))
        self.selection: Optional[CanonicalTime] = None
        self.text = ''

    def _set_selection(self, selected: CanonicalTime) -> CanonicalTime:
        self.selection = selected
        self.text = format_time(selected)
        logger.debug(f"Selected {self.text}")
        return selected

    def _current_period(self) -> Period:
        if self.selection is not None:
            return self.selection.period
        return self.default_period

    def _base_time(self) -> CanonicalTime:
        """Committed time, or 12 o'clock in the default period"""
        if self.selection is not None:
            return self.selection
        return CanonicalTime(12 if self.default_period is Period.PM else 0)

    def edit_text(self, raw: str):
        """Typing into the box: nothing is parsed until commit"""
        self.text = raw

    def commit_text(self, raw: Optional[str] = None) -> Optional[CanonicalTime]:
        """Enter / focus-out: parse the text and either commit it or revert"""
        if raw is None:
            raw = self.text

        parsed = parse_time(raw)
        if parsed is None:
            logger.debug(f"Reverting rejected input {raw!r}")
            self.text = format_time(self.selection) if self.selection is not None else ''
            return None

        return self._set_selection(parsed)

    def select_hour(self, hour: int) -> CanonicalTime:
        """Click on the hour list (12-hour values 1-12), keeping the current period"""
        if not 1 <= hour <= 12:
            raise ValueError(f"hour must be in 1..12, got {hour}")

        base = self.selection
        hour24 = hour % 12
        if self._current_period() is Period.PM:
            hour24 += 12

        if base is None:
            return self._set_selection(CanonicalTime(hour24))
        return self._set_selection(CanonicalTime(hour24, base.minute, base.second))

    def select_minute(self, minute: int) -> CanonicalTime:
        base = self._base_time()
        return self._set_selection(CanonicalTime(base.hour, minute, base.second))

    def select_second(self, second: int) -> CanonicalTime:
        base = self._base_time()
        return self._set_selection(CanonicalTime(base.hour, base.minute, second))

    def select_period(self, period: Period) -> CanonicalTime:
        """Move the selected hour into the given half of the day"""
        base = self._base_time()
        hour = base.hour % 12
        if period is Period.PM:
            hour += 12
        return self._set_selection(CanonicalTime(hour, base.minute, base.second))

    def shift(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> CanonicalTime:
        """Step the selection forwards or back, wrapping around midnight"""
        start = datetime.combine(_SHIFT_BASE_DATE, self._base_time().to_time())
        moved = start + relativedelta(hours=hours, minutes=minutes, seconds=seconds)
        return self._set_selection(CanonicalTime.from_time(moved.time()))

    def clear(self):
        self.selection = None
        self.text = ''

    def hour_options(self) -> List[int]:
        """Hour column in panel order: 12, 1, 2, ... 11"""
        step = self.config.get('hour_step', 1)
        return [h for h in [12] + list(range(1, 12)) if (h % 12) % step == 0]

    def minute_options(self) -> List[int]:
        step = self.config.get('minute_step', 1)
        return list(range(0, 60, step))

    def second_options(self) -> List[int]:
        step = self.config.get('second_step', 1)
        return list(range(0, 60, step))
