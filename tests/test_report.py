"""
Tests for activity listing and overtime report tables.
"""

import pytest

from factories import make_activity, make_performance_report
from mococp.service.report import (
    ACTIVITY_LIST_HEADER,
    OVERTIME_HEADER,
    activity_list_rows,
    format_hours,
    month_label,
    overtime_rows,
    overtime_summary,
    overtime_title,
)
from mococp.view.table import render_table


@pytest.mark.unit
@pytest.mark.parametrize(
    "hours, expected",
    [
        (0, "0"),
        (1.0, "1"),
        (1.5, "1.5"),
        (4.25, "4.25"),
        (0.333333, "0.33"),
        (-2.5, "-2.5"),
        (-0.001, "0"),
    ],
)
def test_format_hours(hours, expected):
    assert format_hours(hours) == expected


@pytest.mark.unit
def test_month_label():
    assert month_label(1) == "01: January"
    assert month_label(12) == "12: December"


@pytest.mark.unit
def test_activity_list_rows_totals_durations():
    activities = [
        make_activity(1, date="2024-01-01", hours=3.5),
        make_activity(2, date="2024-01-01", hours=1.0),
    ]

    rows = activity_list_rows(activities)

    assert rows[0] == ACTIVITY_LIST_HEADER
    assert rows[1] == ["2024-01-01", "Monday", "3.5", "ACME", "Development", "work"]
    assert rows[2][2] == "1"
    assert rows[-1] == ["-", "-", "4.5", "-", "-", ""]


@pytest.mark.unit
def test_activity_list_rows_missing_description_is_empty():
    rows = activity_list_rows([make_activity(1, description=None)])

    assert rows[1][5] == ""


@pytest.mark.unit
def test_activity_list_rows_without_activities():
    rows = activity_list_rows([])

    assert rows == [ACTIVITY_LIST_HEADER, ["-", "-", "0", "-", "-", ""]]


@pytest.mark.unit
def test_activity_list_rows_are_renderable():
    rows = activity_list_rows([make_activity(1), make_activity(2, date="2024-01-06")])

    rendered = render_table(rows)

    assert rendered.count("\n") == 4
    assert "Saturday" in rendered


@pytest.mark.unit
def test_overtime_rows_layout():
    rows = overtime_rows(make_performance_report(2024))

    assert rows[0] == OVERTIME_HEADER
    assert rows[1] == ["01: January", "1", "160", "161"]
    assert rows[12][0] == "12: December"
    assert rows[-1] == ["==>", "12.5", "1920", "1932.5"]
    assert len(rows) == 1 + 12 + 2


@pytest.mark.unit
def test_overtime_separator_matches_column_widths():
    rows = overtime_rows(make_performance_report(2024))

    separator = rows[-2]
    assert set("".join(separator)) == {"-"}
    assert [len(cell) for cell in separator] == [
        max(len(row[column]) for row in rows if row is not separator)
        for column in range(len(OVERTIME_HEADER))
    ]


@pytest.mark.unit
def test_overtime_title_and_summary():
    report = make_performance_report(2023)

    assert overtime_title(report) == "Your monthly overtime report for 2023"
    assert overtime_summary(report) == (
        "Your current overtime until end of today: 3.25"
    )
