"""Calendar date values without time-of-day or timezone."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

FEBRUARY = 2
DECEMBER = 12
MIN_YEAR = 1
MAX_YEAR = 9999
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_ISO_DATE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
# Ordinal of 9999-12-31.
_MAX_ORDINAL = 3_652_059


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month (1-12)."""
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A year/month/day triple, ordered chronologically."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ValueError(f"Year out of range: {self.year}")
        if not 1 <= self.month <= DECEMBER:
            raise ValueError(f"Invalid month: {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise ValueError(f"Invalid day for {self.year}-{self.month}: {self.day}")

    @classmethod
    def from_iso(cls, text: str) -> "CalendarDate":
        """Parse a canonical ``YYYY-MM-DD`` string."""
        match = _ISO_DATE.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid calendar date: {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def minus_days(self, count: int) -> "CalendarDate":
        """Step back ``count`` days, borrowing from earlier months as needed."""
        if count < 0:
            return self.plus_days(-count)
        if count > self.to_ordinal() - 1:
            raise ValueError(f"{self} minus {count} days is before year {MIN_YEAR}")
        year, month, day = self.year, self.month, self.day - count
        while day < 1:
            month -= 1
            if month < 1:
                month = DECEMBER
                year -= 1
            day += days_in_month(year, month)
        return CalendarDate(year=year, month=month, day=day)

    def plus_days(self, count: int) -> "CalendarDate":
        """Step forward ``count`` days, carrying into later months as needed."""
        if count < 0:
            return self.minus_days(-count)
        if count > _MAX_ORDINAL - self.to_ordinal():
            raise ValueError(f"{self} plus {count} days is after year {MAX_YEAR}")
        year, month, day = self.year, self.month, self.day + count
        while day > days_in_month(year, month):
            day -= days_in_month(year, month)
            month += 1
            if month > DECEMBER:
                month = 1
                year += 1
        return CalendarDate(year=year, month=month, day=day)

    def days_until(self, other: "CalendarDate") -> int:
        """Return the signed number of days from this date to ``other``."""
        return other.to_ordinal() - self.to_ordinal()

    def to_ordinal(self) -> int:
        """Return a day count usable for differences (day 1 is 0001-01-01)."""
        previous = self.year - 1
        total = previous * 365 + previous // 4 - previous // 100 + previous // 400
        for month in range(1, self.month):
            total += days_in_month(self.year, month)
        return total + self.day


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates."""

    start: CalendarDate
    end: CalendarDate

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @property
    def length_days(self) -> int:
        return self.start.days_until(self.end) + 1

    def days(self) -> Iterator[CalendarDate]:
        """Yield every date in the range, oldest first."""
        current = self.start
        yield current
        while current < self.end:
            current = current.plus_days(1)
            yield current

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, CalendarDate):
            return False
        return self.start <= value <= self.end
