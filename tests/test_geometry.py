from __future__ import annotations

import pytest

from habit_calendar import InvalidMonthError, Settings, compute_geometry, partition_weeks, weekday_labels
from habit_calendar.geometry import leading_blanks

CANONICAL = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")


def test_leap_february_sunday_start():
    g = compute_geometry(2024, 2, 0)
    assert g.first_weekday == 4
    assert g.days_in_month == 29
    assert g.weeks == (
        (0, 0, 0, 0, 1, 2, 3),
        (4, 5, 6, 7, 8, 9, 10),
        (11, 12, 13, 14, 15, 16, 17),
        (18, 19, 20, 21, 22, 23, 24),
        (25, 26, 27, 28, 29, 0, 0),
    )


def test_leap_february_monday_start():
    g = compute_geometry(2024, 2, 1)
    assert g.weeks[0] == (0, 0, 0, 1, 2, 3, 4)
    assert g.weeks[-1] == (26, 27, 28, 29, 0, 0, 0)


def test_february_starting_on_sunday_has_four_rows():
    # 2015-02-01 は日曜, 28 日
    g = compute_geometry(2015, 2, 0)
    assert g.first_weekday == 0
    assert len(g.weeks) == 4
    assert g.weeks[0] == (1, 2, 3, 4, 5, 6, 7)
    assert g.weeks[-1] == (22, 23, 24, 25, 26, 27, 28)


def test_january_starting_on_saturday_has_six_rows():
    # 2022-01-01 は土曜
    g = compute_geometry(2022, 1, 0)
    assert g.first_weekday == 6
    assert len(g.weeks) == 6
    assert g.weeks[0] == (0, 0, 0, 0, 0, 0, 1)
    assert g.weeks[-1] == (30, 31, 0, 0, 0, 0, 0)


@pytest.mark.parametrize("first_weekday, start_of_week, expected", [
    (4, 0, 4),
    (0, 1, 6),
    (3, 3, 0),
    (2, 5, 4),
])
def test_leading_blanks(first_weekday, start_of_week, expected):
    assert leading_blanks(first_weekday, start_of_week) == expected


@pytest.mark.parametrize("start_of_week", range(7))
@pytest.mark.parametrize("year", [2023, 2024, 2025])
def test_weeks_cover_every_day_once(year, start_of_week):
    for month in range(1, 13):
        g = compute_geometry(year, month, start_of_week)
        assert all(len(week) == 7 for week in g.weeks)
        assert 4 <= len(g.weeks) <= 6
        days = [d for week in g.weeks for d in week if d]
        assert days == list(range(1, g.days_in_month + 1))
        # 先頭の空セルの数は曜日と週はじまりで決まる
        assert g.weeks[0].index(1) == leading_blanks(g.first_weekday, start_of_week)


@pytest.mark.parametrize("days_in_month", [28, 29, 30, 31])
@pytest.mark.parametrize("first_weekday", range(7))
def test_partition_row_count(days_in_month, first_weekday):
    weeks = partition_weeks(first_weekday, days_in_month, 0)
    expected = -(-(first_weekday + days_in_month) // 7)
    assert len(weeks) == expected
    assert weeks[-1][-1] == 0 or (first_weekday + days_in_month) % 7 == 0


def test_start_of_week_is_taken_modulo_seven():
    assert partition_weeks(4, 29, 7) == partition_weeks(4, 29, 0)


@pytest.mark.parametrize("year, month", [(2024, 13), (2024, 0), ("abcd", 1), (None, None)])
def test_invalid_month(year, month):
    with pytest.raises(InvalidMonthError) as excinfo:
        compute_geometry(year, month)
    assert str(excinfo.value) == f"Fail: Invalid Date {year}-{month}"


@pytest.mark.parametrize("start_of_week", range(7))
def test_weekday_labels_are_a_rotation(start_of_week):
    labels = weekday_labels(Settings(start_of_week=str(start_of_week)))
    assert labels == CANONICAL[start_of_week:] + CANONICAL[:start_of_week]


def test_weekday_labels_use_custom_names():
    settings = Settings(start_of_week="1", sunday="日", monday="月")
    labels = weekday_labels(settings)
    assert labels[0] == "月"
    assert labels[-1] == "日"
