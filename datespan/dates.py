"""Calendar arithmetic: leap years, validation, parsing and date differences."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class DateDifference:
    """A calendar span expressed in whole years, months and days."""

    years: int = 0
    months: int = 0
    days: int = 0

    def __str__(self) -> str:
        return f"{self.years} years, {self.months} months, {self.days} days"

    def total_months(self) -> int:
        """Whole months in the span, ignoring the day part."""
        return self.years * 12 + self.months

    def approx_days(self) -> int:
        """Rough day count using 365-day years and 30-day months."""
        return self.years * 365 + self.months * 30 + self.days

    def approx_weeks(self) -> int:
        """Rough week count derived from :meth:`approx_days`."""
        return self.approx_days() // 7


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``; 0 for an invalid month."""
    if month == 2 and is_leap_year(year):
        return 29
    if not 1 <= month <= 12:
        return 0
    return _DAYS_IN_MONTH[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return True if the triple names a real date between years 1 and 9999."""
    if not 1 <= year <= 9999:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def parse_date(text: str) -> _dt.date:
    """Parse a strict ``YYYY-MM-DD`` string, raising ValueError if it is invalid."""
    if len(text) != 10 or text[4] != "-" or text[7] != "-":
        raise ValueError(f"invalid date format: {text!r}")
    parts = (text[0:4], text[5:7], text[8:10])
    if not all(set(part) <= _DIGITS for part in parts):
        raise ValueError(f"invalid date format: {text!r}")
    year, month, day = (int(part) for part in parts)
    if not is_valid_date(year, month, day):
        raise ValueError(f"invalid date: {text!r}")
    return _dt.date(year, month, day)


def current_date() -> _dt.date:
    """Today's date in local time."""
    return _dt.date.today()


def date_difference(start: _dt.date, end: _dt.date) -> DateDifference:
    """Years, months and days between two dates, in either order."""
    if start > end:
        start, end = end, start

    end_year, end_month = end.year, end.month
    days = end.day - start.day
    if days < 0:
        end_month -= 1
        if end_month < 1:
            end_month = 12
            end_year -= 1
        days += days_in_month(end_year, end_month)

    months = end_month - start.month
    if months < 0:
        months += 12
        end_year -= 1

    return DateDifference(end_year - start.year, months, days)