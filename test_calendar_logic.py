"""Month grid generation checks."""

import calendar
from datetime import date, datetime, timedelta

import pytest

from calendar_logic import (
    GREGORIAN,
    Day,
    WeekConvention,
    generate_days_in_month,
    month_metadata,
    month_title,
    next_month,
    number_of_weeks,
    prev_month,
    weekday_labels,
)

MONDAY_FIRST = WeekConvention(calendar.MONDAY)


def _all_months(start_year=1999, end_year=2031):
    for year in range(start_year, end_year + 1):
        for month in range(1, 13):
            yield date(year, month, 15)


def _padding(days):
    leading = 0
    for d in days:
        if d.is_within_displayed_month:
            break
        leading += 1
    trailing = 0
    for d in reversed(days):
        if d.is_within_displayed_month:
            break
        trailing += 1
    return leading, trailing


# ------------------------------------------------------------------
# Known months
# ------------------------------------------------------------------
def test_february_2024_leap_year():
    days = generate_days_in_month(date(2024, 2, 10), date(2024, 2, 10))
    assert len(days) == 35
    assert _padding(days) == (4, 2)
    assert sum(d.is_within_displayed_month for d in days) == 29
    assert days[0].date == date(2024, 1, 28)
    assert days[4].date == date(2024, 2, 1)
    assert days[-1].date == date(2024, 3, 2)


def test_february_2023_non_leap_year():
    days = generate_days_in_month(date(2023, 2, 1), date(2023, 2, 1))
    assert sum(d.is_within_displayed_month for d in days) == 28
    # Feb 1 is a Wednesday, Feb 28 a Tuesday
    assert _padding(days) == (3, 4)
    assert len(days) == 35


def test_month_starting_sunday_ending_saturday_has_no_padding():
    days = generate_days_in_month(date(2015, 2, 1), date(2015, 2, 1))
    assert len(days) == 28
    assert all(d.is_within_displayed_month for d in days)
    assert days[0].date == date(2015, 2, 1)
    assert days[-1].date == date(2015, 2, 28)


def test_monday_first_rows_start_on_monday():
    days = generate_days_in_month(date(2024, 2, 1), date(2024, 2, 1), MONDAY_FIRST)
    assert _padding(days) == (3, 3)
    for row in range(0, len(days), 7):
        assert days[row].date.weekday() == calendar.MONDAY
        assert days[row + 6].date.weekday() == calendar.SUNDAY


def test_cell_fields():
    days = generate_days_in_month(date(2024, 3, 5), date(2024, 3, 9))
    ninth = next(d for d in days if d.date == date(2024, 3, 9))
    assert ninth == Day(date(2024, 3, 9), "9", True, True)
    assert {d.label for d in days if d.is_within_displayed_month} == {str(n) for n in range(1, 32)}


# ------------------------------------------------------------------
# Properties over many months
# ------------------------------------------------------------------
@pytest.mark.parametrize("convention", [GREGORIAN, MONDAY_FIRST, WeekConvention(calendar.WEDNESDAY)])
def test_grid_properties(convention):
    for base in _all_months():
        days = generate_days_in_month(base, base, convention)
        assert len(days) % 7 == 0
        in_month = [d for d in days if d.is_within_displayed_month]
        assert len(in_month) == calendar.monthrange(base.year, base.month)[1]
        assert all(d.date.month == base.month for d in in_month)
        for prev, cur in zip(days, days[1:]):
            assert cur.date - prev.date == timedelta(days=1)
        assert days[0].date.weekday() == convention.first_weekday
        assert len(days) // 7 == number_of_weeks(base, convention)


def test_selection_marks_at_most_one_cell():
    for base in _all_months(2020, 2025):
        days = generate_days_in_month(base, base)
        assert [d.date for d in days if d.is_selected] == [base]


def test_selection_on_padding_day():
    days = generate_days_in_month(date(2024, 2, 1), date(2024, 1, 29))
    selected = [d for d in days if d.is_selected]
    assert len(selected) == 1
    assert not selected[0].is_within_displayed_month


def test_selection_outside_range():
    days = generate_days_in_month(date(2024, 2, 1), date(2024, 6, 1))
    assert not any(d.is_selected for d in days)


def test_selection_ignores_time_of_day():
    days = generate_days_in_month(datetime(2024, 2, 1, 23, 59), datetime(2024, 2, 14, 8, 30))
    assert [d.date for d in days if d.is_selected] == [date(2024, 2, 14)]
    assert len(days) == 35


def test_generate_is_idempotent():
    first = generate_days_in_month(date(2024, 7, 4), date(2024, 7, 4))
    second = generate_days_in_month(date(2024, 7, 4), date(2024, 7, 4))
    assert first == second


# ------------------------------------------------------------------
# Edge cases
# ------------------------------------------------------------------
def test_unresolvable_base_date_gives_empty_grid():
    assert month_metadata(None) is None
    assert generate_days_in_month(None, date(2024, 1, 1)) == []
    assert number_of_weeks(None) == 0


def test_offset_overflow_falls_back_to_origin():
    last = generate_days_in_month(date.max, date.max)
    assert last[-1].date == date.max
    assert sum(d.is_within_displayed_month for d in last) == 31

    first = generate_days_in_month(date.min, date.min)
    assert first[0].date == date.min
    assert sum(d.is_within_displayed_month for d in first) == 31


def test_month_metadata():
    meta = month_metadata(date(2024, 2, 20))
    assert meta.number_of_days == 29
    assert meta.first_day == date(2024, 2, 1)
    assert meta.first_day_weekday == 5


def test_weekday_index_sunday_first():
    # 2024-03-03 is a Sunday
    assert [GREGORIAN.weekday_index(date(2024, 3, 3) + timedelta(days=i)) for i in range(7)] == list(range(1, 8))


def test_invalid_convention():
    with pytest.raises(ValueError):
        WeekConvention(7)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------
def test_weekday_labels():
    assert weekday_labels() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert weekday_labels(MONDAY_FIRST)[0] == "Mon"


def test_month_title():
    assert month_title(date(2024, 2, 10)) == "February 2024"


def test_month_stepping():
    assert prev_month(2024, 1) == (2023, 12)
    assert prev_month(2024, 5) == (2024, 4)
    assert next_month(2024, 12) == (2025, 1)
    assert next_month(2024, 5) == (2024, 6)
