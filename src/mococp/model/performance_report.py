# SPDX-License-Identifier: MIT

from typing import TypedDict


class MonthlyPerformance(TypedDict):
    year: int
    month: int  # 1-12
    target_hours: float
    hours_tracked_total: float
    variation: float


class AnnualPerformance(TypedDict):
    year: int
    employment_hours: float
    target_hours: float
    hours_tracked_total: float
    variation: float
    variation_until_today: float


class PerformanceReport(TypedDict):
    annually: AnnualPerformance
    monthly: list[MonthlyPerformance]
