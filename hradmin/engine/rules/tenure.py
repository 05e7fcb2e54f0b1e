"""Tenure and calendar-month arithmetic.

Two tenure definitions coexist on purpose and must stay separate:

- ``years_of_service_julian``: elapsed days / 365.25, fractional. Used by
  the EOSB gratuity formula.
- ``years_of_service_calendar``: whole calendar years with a month/day
  correction. Used by the annual-leave entitlement.
"""

import calendar
from datetime import date

JULIAN_YEAR_DAYS = 365.25


def years_of_service_julian(start: date, end: date) -> float:
    """Fractional years between two dates, in Julian years."""
    return (end - start).days / JULIAN_YEAR_DAYS


def years_of_service_calendar(start: date | None, end: date) -> int:
    """Completed calendar years; 0 when there is no start date."""
    if start is None:
        return 0
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def month_index(d: date) -> int:
    """Months since year 0; consecutive calendar months differ by 1."""
    return d.year * 12 + (d.month - 1)


def months_between(start: date, end: date) -> int:
    """Calendar-month difference, ignoring the day of month."""
    return month_index(end) - month_index(start)


def add_months(d: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    idx = month_index(d) + months
    year, month0 = divmod(idx, 12)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(d.day, last_day))
