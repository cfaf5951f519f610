"""Month grid view-model: display strings for the header row and date cells.

The window reads these strings on load and after every navigation command.
Cell layout is a flat index: 7 weekday headers, then 42 date cells
(6 rows x 7 columns) padded with blanks around the month.
"""

import logging
from datetime import date

from calendar_logic import (
    DEFAULT_CONFIG,
    CalendarConfig,
    DateResult,
    days_in_month,
    first_day_of_month,
    format_date,
    next_month,
    prev_month,
    weekday_labels,
    weekday_offset,
)

logger = logging.getLogger(__name__)

GRID_ROWS = 6
GRID_COLS = 7
HEADER_CELLS = GRID_COLS
DATE_CELLS = GRID_ROWS * GRID_COLS


class MonthViewModel:
    """Holds the displayed month and derives per-cell text from it."""

    def __init__(self, config: CalendarConfig | None = None,
                 today: date | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.current_month: date = first_day_of_month(today or date.today())
        self._labels = weekday_labels(self.config)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def advance_month(self) -> None:
        self._apply(next_month(self.current_month), "next")

    def retreat_month(self) -> None:
        self._apply(prev_month(self.current_month), "previous")

    def go_today(self, today: date | None = None) -> None:
        self.current_month = first_day_of_month(today or date.today())

    def _apply(self, result: DateResult, direction: str) -> None:
        if not result.ok:
            logger.warning("Cannot move to %s month from %s: %s",
                           direction, self.current_month.isoformat(), result.error)
            return
        self.current_month = result.value

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def weekday_offset(self) -> int:
        return weekday_offset(self.current_month, self.config)

    def days_in_month(self) -> int:
        return days_in_month(self.current_month)

    def weekday_label(self, index: int) -> str:
        """Header text for column ``index``; empty outside 0-6."""
        if not 0 <= index < len(self._labels):
            return ""
        return self._labels[index]

    def day_label(self, index: int) -> str:
        """Day number shown in date cell ``index``, or "" for padding cells."""
        day = index - self.weekday_offset()
        if 0 <= day < self.days_in_month():
            return str(day + 1)
        return ""

    def month_year_label(self) -> str:
        return format_date(self.config.title_format, self.current_month)

    def today_index(self, today: date | None = None) -> int | None:
        """Date-cell index of ``today`` if it falls in the displayed month."""
        today = today or date.today()
        if (today.year, today.month) != (self.current_month.year, self.current_month.month):
            return None
        return self.weekday_offset() + today.day - 1

    def is_weekend_column(self, col: int) -> bool:
        # col 0 is config.first_weekday; Saturday == 5, Sunday == 6
        return (self.config.first_weekday + col) % 7 >= 5
