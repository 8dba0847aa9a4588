from __future__ import annotations

import pytest

from habit_calendar import Entry, bind_entries_to_days, normalize

from conftest import make_table


def test_entries_outside_month_are_dropped(feb_entries):
    marks = bind_entries_to_days(feb_entries, 2024, 2, "YYYY-MM-DD")
    assert sorted(marks) == [10, 14]
    assert marks[10].content == "ran 5k"


def test_other_year_is_dropped():
    marks = bind_entries_to_days([Entry(date="2023-02-10")], 2024, 2, "YYYY-MM-DD")
    assert dict(marks) == {}


def test_last_write_wins():
    first = Entry(date="2024-02-10", content="first")
    second = Entry(date="2024-02-10", content="second")
    marks = bind_entries_to_days([first, second], 2024, 2, "YYYY-MM-DD")
    assert marks[10] is second


def test_unparsable_dates_are_skipped():
    entries = [Entry(date="someday"), Entry(date="2024-02-31"), Entry(date="2024-02-29")]
    marks = bind_entries_to_days(entries, 2024, 2, "YYYY-MM-DD")
    assert list(marks) == [29]


def test_custom_pattern():
    marks = bind_entries_to_days([Entry(date="20240203")], 2024, 2, "YYYYMMDD")
    assert list(marks) == [3]


def test_result_is_read_only(feb_entries):
    marks = bind_entries_to_days(feb_entries, 2024, 2, "YYYY-MM-DD")
    with pytest.raises(TypeError):
        marks[1] = Entry(date="2024-02-01")


def test_normalize_then_bind_is_idempotent():
    params = {
        "year": 2024,
        "month": 2,
        "data": make_table(
            ["File", "mood|M", "note"],
            [["daily/2024-02-10.md", "3", None], ["daily/2024-02-10.md", None, "ok"], ["daily/2024-03-01.md", "1", "x"]],
        ),
    }

    def run():
        data = normalize(params)
        return dict(bind_entries_to_days(data.entries, data.year, data.month, data.date_pattern))

    assert run() == run()
    assert run()[10].content == "M 3\nnote ok\n"
