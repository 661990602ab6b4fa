"""Headless month picker: the state behind the modal calendar grid."""

from __future__ import annotations

from datetime import date
from typing import Callable

from app_logger import get_logger
from calendar_logic import (
    GREGORIAN,
    Day,
    WeekConvention,
    generate_days_in_month,
    month_title,
    next_month,
    number_of_weeks,
    prev_month,
    weekday_labels,
)

log = get_logger("picker")


class PickerError(Exception):
    """Base class for picker misuse."""


class PickerDismissedError(PickerError):
    """Raised when a dismissed picker is asked to select a day."""


class CalendarPicker:
    """Month grid for one base date plus a fixed selected date.

    The selected date is the initial base date; navigating months only moves
    the base date.  Tapping a cell hands its date to *on_date_selected* and
    dismisses the picker.
    """

    def __init__(
        self,
        base_date: date,
        on_date_selected: Callable[[date], None],
        convention: WeekConvention = GREGORIAN,
    ) -> None:
        self.selected_date = base_date
        self.convention = convention
        self._on_date_selected = on_date_selected
        self._dismissed = False
        self._base_date = base_date
        self.days: list[Day] = []
        self._regenerate()

    # ------------------------------------------------------------------
    # Month data
    # ------------------------------------------------------------------
    @property
    def base_date(self) -> date:
        return self._base_date

    @base_date.setter
    def base_date(self, value: date) -> None:
        self._base_date = value
        self._regenerate()

    def _regenerate(self) -> None:
        self.days = generate_days_in_month(self._base_date, self.selected_date, self.convention)
        log.debug("Regenerated %d cells for %s", len(self.days), self._base_date)

    def __len__(self) -> int:
        return len(self.days)

    def __getitem__(self, index: int) -> Day:
        return self.days[index]

    @property
    def number_of_weeks(self) -> int:
        return number_of_weeks(self._base_date, self.convention)

    @property
    def title(self) -> str:
        return month_title(self._base_date)

    @property
    def weekday_labels(self) -> list[str]:
        return weekday_labels(self.convention)

    def cell_size(self, width: int, height: int) -> tuple[int, int]:
        """Return the integer (width, height) of one cell in a grid area."""
        weeks = self.number_of_weeks
        if weeks == 0:
            return 0, 0
        return width // 7, height // weeks

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def show_previous_month(self) -> None:
        y, m = prev_month(self._base_date.year, self._base_date.month)
        self.base_date = date(y, m, 1)

    def show_next_month(self) -> None:
        y, m = next_month(self._base_date.year, self._base_date.month)
        self.base_date = date(y, m, 1)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    @property
    def is_dismissed(self) -> bool:
        return self._dismissed

    def select(self, index: int) -> date:
        """Report the date of the cell at *index* and dismiss the picker."""
        if self._dismissed:
            raise PickerDismissedError("picker already dismissed")
        if not 0 <= index < len(self.days):
            raise IndexError(f"cell {index} outside grid of {len(self.days)}")
        day = self.days[index]
        log.debug("Selected %s at cell %d", day.date, index)
        self._on_date_selected(day.date)
        self._dismissed = True
        return day.date
