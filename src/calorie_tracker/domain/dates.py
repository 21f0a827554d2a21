"""Calendar date parsing for query windows."""

import re
from dataclasses import dataclass
from datetime import date

from calorie_tracker.domain.errors import InvalidRange

_CALENDAR_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class DateWindow:
    """Inclusive calendar date range."""

    start: date
    end: date

    @property
    def is_empty(self) -> bool:
        """Return True when the window contains no days."""
        return self.start > self.end

    def contains(self, day: date) -> bool:
        """Return True when the day falls inside the window."""
        return self.start <= day <= self.end


def parse_calendar_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string.

    Dates carry no time of day or offset, so the result is the same calendar
    day regardless of the server timezone.
    """
    if not isinstance(value, str) or not _CALENDAR_DATE.match(value.strip()):
        raise InvalidRange(f"Expected a YYYY-MM-DD date, got {value!r}")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidRange(f"Invalid calendar date {value!r}") from exc


def parse_window(start: str, end: str) -> DateWindow:
    """Parse both ends of a window; a reversed window is legal and empty."""
    return DateWindow(start=parse_calendar_date(start), end=parse_calendar_date(end))
