"""
Attendance ledger module.

Append-only text file with one record per line:

    name,YYYY-MM-DD,Wkd

No header, no quoting. Existing lines are never rewritten.
"""

from pathlib import Path
from typing import List, NamedTuple, Optional, Set, Tuple

from .logging_config import get_logger

logger = get_logger(__name__)


class AttendanceRecord(NamedTuple):
    name: str
    date: str
    weekday: str


def parse_line(line: str) -> Optional[Tuple[str, str, str]]:
    """
    Split a ledger line into (name, date, rest).

    The name ends at the first comma and the date at the second one.

    Returns:
        Tuple of fields, or None for a malformed line
    """
    line = line.rstrip('\r\n')
    first = line.find(',')
    if first == -1:
        return None
    second = line.find(',', first + 1)
    if second == -1:
        return None
    return line[:first], line[first + 1:second], line[second + 1:]


class AttendanceLedger:
    """
    File-backed attendance record.

    The file is opened and closed on every operation; no handle is kept.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _lines(self) -> List[str]:
        if not self.path.exists():
            logger.debug(f'Ledger {self.path} does not exist yet')
            return []
        with open(self.path, 'rb') as f:
            raw_lines = f.readlines()

        lines: List[str] = []
        for raw in raw_lines:
            try:
                lines.append(raw.decode('utf-8'))
            except UnicodeDecodeError:
                logger.debug(f'Skipping undecodable ledger line {raw!r}')
        return lines

    def names_for(self, day: str) -> Set[str]:
        """
        Names recorded for a date.

        Malformed lines are skipped.

        Args:
            day: Date string exactly as written in the ledger

        Returns:
            Set of names
        """
        names: Set[str] = set()
        skipped = 0

        for line in self._lines():
            fields = parse_line(line)
            if fields is None:
                skipped += 1
                continue
            name, date, _ = fields
            if date == day:
                names.add(name)

        if skipped:
            logger.debug(f'Skipped {skipped} malformed ledger lines')

        return names

    def records(self) -> List[AttendanceRecord]:
        """All well-formed records in file order."""
        return [
            AttendanceRecord(*fields)
            for fields in map(parse_line, self._lines())
            if fields is not None
        ]

    def append(self, name: str, day: str, weekday: str) -> None:
        """
        Append one record and flush it to disk.

        Args:
            name: Person name
            day: Formatted date
            weekday: Weekday abbreviation
        """
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(f'{name},{day},{weekday}\n')
            f.flush()
