# SPDX-License-Identifier: MIT

from typing import Literal, Optional, cast

import pendulum

from mococp.configuration import WEEK_DAYS, WeekStart

GranularityType = Literal["day", "week", "month"]
DateRange = tuple[pendulum.DateTime, pendulum.DateTime]

FORMAT_DATE = "YYYY-MM-DD"
FORMAT_DATE_DAY = "YYYY-MM-DD, dddd"


class InvalidDateShift(ValueError):
    """Raised when a granularity/offset pair leaves the representable calendar."""

    pass


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.DateTime:
    return pendulum.today("local")


def date_to_str(datetime: pendulum.DateTime) -> str:
    return datetime.format(FORMAT_DATE)


def date_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format(FORMAT_DATE_DAY)


def date_from_str(date_str: str) -> pendulum.DateTime:
    """Parse a 'YYYY-MM-DD' string to a pendulum.DateTime at local midnight."""
    return cast(
        pendulum.DateTime, pendulum.from_format(date_str, FORMAT_DATE, tz="local")
    )


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.DateTime]:
    if date_str is None:
        return None
    return date_from_str(date_str)


def granularity_from_flags(week: bool, month: bool) -> GranularityType:
    if week:
        return "week"
    if month:
        return "month"
    return "day"


def start_of_week(
    datetime: pendulum.DateTime, week_start: WeekStart = "monday"
) -> pendulum.DateTime:
    # isoweekday() is 1 for Monday through 7 for Sunday
    days_into_week = (datetime.isoweekday() - 1 - WEEK_DAYS.index(week_start)) % 7
    return datetime.subtract(days=days_into_week).start_of("day")


def compute_date_range(
    granularity: GranularityType,
    periods_back: int = 0,
    now: Optional[pendulum.DateTime] = None,
    week_start: WeekStart = "monday",
) -> DateRange:
    """
    Compute the inclusive date range covering one calendar period.

    Args:
        granularity: "day", "week" or "month"
        periods_back: How many periods to step back from the current one (0 = current)
        now: Reference instant, defaults to the current local time
        week_start: First day of the week for the "week" granularity

    Returns:
        (start, end) where start is the beginning of the first day and end the
        end of the last day of the period

    Raises:
        InvalidDateShift: periods_back is negative or the shifted date does
            not exist in the calendar
    """
    if periods_back < 0:
        raise InvalidDateShift(
            f"periods back must not be negative, got {periods_back}"
        )
    if now is None:
        now = now_local()

    try:
        if granularity == "week":
            anchor = now.subtract(weeks=periods_back)
            start = start_of_week(anchor, week_start)
            end = start.add(days=6).end_of("day")
        elif granularity == "month":
            # pendulum clamps to the last valid day of shorter months
            anchor = now.subtract(months=periods_back)
            start = anchor.start_of("month")
            end = anchor.end_of("month")
        else:
            anchor = now.subtract(days=periods_back)
            start = anchor.start_of("day")
            end = anchor.end_of("day")
    except (OverflowError, ValueError) as e:
        raise InvalidDateShift(
            f"cannot shift {now.to_date_string()} back {periods_back} {granularity}(s)"
        ) from e

    return start, end
