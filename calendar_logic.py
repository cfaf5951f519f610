"""Pure calendar calculations — no UI dependencies."""

import calendar
from datetime import MAXYEAR, MINYEAR, date
from typing import NamedTuple

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class CalendarConfig(NamedTuple):
    """Calendar system settings passed explicitly to every calculation.

    ``first_weekday`` uses the ``calendar`` module constants
    (``calendar.MONDAY`` == 0 ... ``calendar.SUNDAY`` == 6).
    """

    first_weekday: int = calendar.SUNDAY
    day_abbr: tuple[str, ...] = tuple(DAY_ABBR)
    title_format: str = "%m-%Y"


DEFAULT_CONFIG = CalendarConfig()


class DateResult(NamedTuple):
    """Outcome of a month calculation: a date, or an error message."""

    value: date | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def first_day_of_month(d: date) -> date:
    """Return day 1 of the month containing ``d`` (time of day dropped)."""
    return date(d.year, d.month, 1)


def add_months(d: date, months: int) -> DateResult:
    """Shift ``d`` by ``months`` calendar months, normalized to day 1."""
    year, month0 = divmod(d.year * 12 + (d.month - 1) + months, 12)
    if not MINYEAR <= year <= MAXYEAR:
        return DateResult(None, f"year {year} is out of range "
                                f"({MINYEAR}..{MAXYEAR})")
    return DateResult(date(year, month0 + 1, 1))


def next_month(d: date) -> DateResult:
    """Return the first day of the month after ``d``."""
    return add_months(d, 1)


def prev_month(d: date) -> DateResult:
    """Return the first day of the month before ``d``."""
    return add_months(d, -1)


def weekday_offset(d: date, config: CalendarConfig = DEFAULT_CONFIG) -> int:
    """Zero-based column of ``d`` in a week starting on ``config.first_weekday``."""
    return (d.weekday() - config.first_weekday) % 7


def days_in_month(d: date) -> int:
    """Return the number of days in the month containing ``d``."""
    return calendar.monthrange(d.year, d.month)[1]


def format_date(pattern: str, d: date) -> str:
    """Render ``d`` with a ``strftime`` pattern."""
    return d.strftime(pattern)


def weekday_labels(config: CalendarConfig = DEFAULT_CONFIG) -> list[str]:
    """Return the 7 weekday abbreviations, starting at the configured first weekday."""
    if len(config.day_abbr) != 7:
        raise ValueError(f"expected 7 weekday abbreviations, got {len(config.day_abbr)}")
    start = config.first_weekday % 7
    return list(config.day_abbr[start:]) + list(config.day_abbr[:start])
