# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum

from mococp.model.activity import Activity
from mococp.model.performance_report import PerformanceReport
from mococp.time import date_from_str

ACTIVITY_LIST_HEADER = ["Date", "Day", "Duration", "Customer", "Task", "Description"]
OVERTIME_HEADER = ["Month", "Overtime", "Target Hours", "Tracked Hours"]
PLACEHOLDER = "-"
ANNUAL_MARKER = "==>"


def format_hours(hours: float, places: int = 2) -> str:
    """Format hours with at most `places` decimals, trailing zeros stripped."""
    text = f"{hours:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def month_label(month: int) -> str:
    """'01: January' style label for a month number."""
    return f"{month:02d}: {pendulum.date(2000, month, 1).format('MMMM')}"


def activity_list_rows(
    activities: Sequence[Activity], day_format: str = "dddd"
) -> list[list[str]]:
    """
    Build the activity listing table.

    Header row, one row per activity (weekday derived from its date) and a
    trailing totals row holding the summed duration.
    """
    rows = [list(ACTIVITY_LIST_HEADER)]
    for activity in activities:
        rows.append(
            [
                activity["date"],
                date_from_str(activity["date"]).format(day_format),
                format_hours(activity["hours"]),
                activity["customer"]["name"],
                activity["task"]["name"],
                activity["description"] or "",
            ]
        )

    total = sum(activity["hours"] for activity in activities)
    rows.append(
        [
            PLACEHOLDER,
            PLACEHOLDER,
            format_hours(total),
            PLACEHOLDER,
            PLACEHOLDER,
            "",
        ]
    )
    return rows


def overtime_rows(report: PerformanceReport) -> list[list[str]]:
    """
    Build the monthly overtime table.

    Header row, one row per month, a separator row of dashes and the annual
    total prefixed with an arrow.
    """
    rows = [list(OVERTIME_HEADER)]
    for month in report["monthly"]:
        rows.append(
            [
                month_label(month["month"]),
                format_hours(month["variation"]),
                format_hours(month["target_hours"]),
                format_hours(month["hours_tracked_total"]),
            ]
        )

    annually = report["annually"]
    annual_row = [
        ANNUAL_MARKER,
        format_hours(annually["variation"]),
        format_hours(annually["target_hours"]),
        format_hours(annually["hours_tracked_total"]),
    ]

    widths = [
        max(len(row[column]) for row in rows + [annual_row])
        for column in range(len(OVERTIME_HEADER))
    ]
    rows.append(["-" * width for width in widths])
    rows.append(annual_row)
    return rows


def overtime_title(report: PerformanceReport) -> str:
    return f"Your monthly overtime report for {report['annually']['year']}"


def overtime_summary(report: PerformanceReport) -> str:
    variation = format_hours(report["annually"]["variation_until_today"])
    return f"Your current overtime until end of today: {variation}"
