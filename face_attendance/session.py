"""
Attendance session module.

Owns the mutable attendance state:
- the set of names already marked for the current date
- the per-name cooldown between marking attempts

The current date is recomputed on every call, so a session that runs past
midnight starts a fresh day.
"""

import time
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, List, Optional, Set

from .ledger import AttendanceLedger
from .logging_config import get_logger
from .utils.dates import format_date, weekday_abbreviation

logger = get_logger(__name__)


class MarkOutcome(Enum):
    MARKED = 'marked'
    ALREADY_MARKED = 'already_marked'
    COOLDOWN = 'cooldown'


class AttendanceSession:
    """
    Attendance state for one running process.

    Args:
        ledger: Backing ledger file
        cooldown_seconds: Minimum time between attempts for one name
        zero_pad_dates: Date format written to the ledger
        now: Wall clock returning the current local datetime
        monotonic: Clock used for the cooldown
    """

    def __init__(
        self,
        ledger: AttendanceLedger,
        cooldown_seconds: float = 10.0,
        zero_pad_dates: bool = True,
        now: Callable[[], datetime] = datetime.now,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self.ledger = ledger
        self.cooldown_seconds = cooldown_seconds
        self.zero_pad_dates = zero_pad_dates
        self._now = now
        self._monotonic = monotonic

        self._day: str = ''
        self._marked: Set[str] = set()
        self._last_attempt: Dict[str, float] = {}

    def today(self) -> str:
        """Current date in ledger format."""
        return format_date(self._now().date(), self.zero_pad_dates)

    def load_today(self, day: Optional[str] = None) -> Set[str]:
        """
        Rebuild the daily set from the ledger for the current date.

        Args:
            day: Formatted date to load instead of today

        Returns:
            Names already marked for that date
        """
        self._day = day or self.today()
        self._marked = self.ledger.names_for(self._day)
        logger.info(f'{len(self._marked)} already marked for {self._day}')
        return set(self._marked)

    def _sync_day(self, day: Optional[str] = None) -> str:
        day = day or self.today()
        if day != self._day:
            if self._day:
                logger.info(f'Date changed {self._day} -> {day}, reloading attendance')
            self.load_today(day)
        return day

    def is_marked(self, name: str) -> bool:
        """Check whether a name is already recorded today."""
        self._sync_day()
        return name in self._marked

    def list_today(self) -> List[str]:
        """Names marked today, sorted."""
        self._sync_day()
        return sorted(self._marked)

    def mark(self, name: str) -> MarkOutcome:
        """
        Mark attendance for a name.

        A call within the cooldown window of the previous attempt for the
        same name does nothing. Otherwise the timer restarts and, unless the
        name is already marked today, one record is appended to the ledger.

        Args:
            name: Recognized person

        Returns:
            MarkOutcome
        """
        now = self._monotonic()
        last = self._last_attempt.get(name)
        if last is not None and now - last < self.cooldown_seconds:
            logger.debug(f'Cooldown active for {name}, skipping')
            return MarkOutcome.COOLDOWN

        self._last_attempt[name] = now

        current = self._now().date()
        day = self._sync_day(format_date(current, self.zero_pad_dates))
        weekday = weekday_abbreviation(current)

        if name in self._marked:
            logger.info(f'[Attendance] Already marked today: {name} ({day}, {weekday})')
            return MarkOutcome.ALREADY_MARKED

        self._marked.add(name)
        self.ledger.append(name, day, weekday)
        logger.info(f'[Attendance] Successfully marked: {name} | {day} ({weekday})')
        return MarkOutcome.MARKED
