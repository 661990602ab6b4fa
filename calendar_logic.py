"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from app_logger import get_logger

log = get_logger("calendar_logic")

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


@dataclass(frozen=True)
class WeekConvention:
    """Which weekday opens a grid row (calendar.MONDAY .. calendar.SUNDAY)."""

    first_weekday: int = calendar.SUNDAY

    def __post_init__(self) -> None:
        if not 0 <= self.first_weekday <= 6:
            raise ValueError(f"first_weekday must be 0..6, got {self.first_weekday!r}")

    def weekday_index(self, d: date) -> int:
        """Return the 1-based position of *d* within its week (1..7)."""
        return (d.weekday() - self.first_weekday) % 7 + 1


# Sunday-first numbering: 1=Sunday .. 7=Saturday
GREGORIAN = WeekConvention()


@dataclass(frozen=True)
class Day:
    """One cell of the month grid."""

    date: date
    label: str
    is_selected: bool
    is_within_displayed_month: bool


@dataclass(frozen=True)
class MonthMetadata:
    number_of_days: int
    first_day: date
    first_day_weekday: int


def _as_date(value: date) -> date:
    # datetime is a date subclass; drop the time of day
    if isinstance(value, datetime):
        return value.date()
    return value


def _add_days(origin: date, offset: int) -> date:
    """Return *origin* shifted by *offset* days, or *origin* itself on overflow."""
    try:
        return origin + timedelta(days=offset)
    except OverflowError:
        log.warning("Day offset %d from %s out of range, keeping %s", offset, origin, origin)
        return origin


def month_metadata(
    base_date: date, convention: WeekConvention = GREGORIAN,
) -> MonthMetadata | None:
    """Return day count, first day and its weekday index for *base_date*'s month.

    Returns None when the month cannot be resolved.
    """
    try:
        base = _as_date(base_date)
        number_of_days = calendar.monthrange(base.year, base.month)[1]
        first_day = base.replace(day=1)
    except (AttributeError, TypeError, ValueError, OverflowError) as exc:
        log.warning("Cannot resolve month for %r: %s", base_date, exc)
        return None

    metadata = MonthMetadata(
        number_of_days=number_of_days,
        first_day=first_day,
        first_day_weekday=convention.weekday_index(first_day),
    )
    log.debug("Month metadata for %s: %s", base_date, metadata)
    return metadata


def generate_day(
    offset: int,
    origin: date,
    selected_date: date,
    is_within_displayed_month: bool,
) -> Day:
    """Build the cell *offset* days away from *origin*."""
    d = _add_days(origin, offset)
    return Day(
        date=d,
        label=str(d.day),
        is_selected=d == _as_date(selected_date),
        is_within_displayed_month=is_within_displayed_month,
    )


def generate_start_of_next_month(
    first_day: date,
    selected_date: date,
    convention: WeekConvention = GREGORIAN,
) -> list[Day]:
    """Return the next-month days that complete the last grid row.

    A month ending on the last weekday of the row needs none.
    """
    number_of_days = calendar.monthrange(first_day.year, first_day.month)[1]
    last_day = first_day + timedelta(days=number_of_days - 1)

    additional_days = 7 - convention.weekday_index(last_day)
    if additional_days <= 0:
        return []
    return [
        generate_day(offset, last_day, selected_date, False)
        for offset in range(1, additional_days + 1)
    ]


def generate_days_in_month(
    base_date: date,
    selected_date: date,
    convention: WeekConvention = GREGORIAN,
) -> list[Day]:
    """Return the grid cells for *base_date*'s month, padded to whole weeks.

    Leading cells come from the previous month, trailing cells from the next
    one; both have ``is_within_displayed_month`` set to False.  The result is
    chronological and its length is a multiple of 7.
    """
    metadata = month_metadata(base_date, convention)
    if metadata is None:
        return []

    offset_in_initial_row = metadata.first_day_weekday
    days: list[Day] = []
    for day in range(1, metadata.number_of_days + offset_in_initial_row):
        within = day >= offset_in_initial_row
        # Negative for days borrowed from the previous month
        offset = day - offset_in_initial_row
        days.append(generate_day(offset, metadata.first_day, selected_date, within))

    days += generate_start_of_next_month(metadata.first_day, selected_date, convention)
    return days


def number_of_weeks(base_date: date, convention: WeekConvention = GREGORIAN) -> int:
    """Return how many grid rows *base_date*'s month spans (4–6)."""
    metadata = month_metadata(base_date, convention)
    if metadata is None:
        return 0
    return -(-(metadata.first_day_weekday - 1 + metadata.number_of_days) // 7)


def weekday_labels(convention: WeekConvention = GREGORIAN) -> list[str]:
    """Return the weekday header row starting at the convention's first weekday."""
    start = convention.first_weekday
    return DAY_ABBR[start:] + DAY_ABBR[:start]


def month_title(base_date: date) -> str:
    """Return e.g. "February 2024"."""
    return f"{calendar.month_name[base_date.month]} {base_date.year}"


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
