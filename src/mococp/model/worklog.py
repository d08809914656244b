# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict


class WorklogIssue(TypedDict):
    key: str


class Worklog(TypedDict):
    tempoWorklogId: int
    issue: WorklogIssue
    timeSpentSeconds: int
    startDate: str  # YYYY-MM-DD
    description: NotRequired[Optional[str]]


class WorklogResponse(TypedDict):
    results: list[Worklog]
