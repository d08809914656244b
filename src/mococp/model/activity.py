# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict


class ActivityReference(TypedDict):
    id: int
    name: str


class Activity(TypedDict):
    id: int
    date: str  # YYYY-MM-DD
    hours: float
    description: Optional[str]
    billable: NotRequired[bool]
    project: ActivityReference
    task: ActivityReference
    customer: ActivityReference
    timer_started_at: Optional[str]  # ISO timestamp while a timer runs


class CreateActivity(TypedDict):
    date: str
    project_id: int
    task_id: int
    hours: Optional[float]
    description: NotRequired[Optional[str]]


class EditActivity(TypedDict):
    project_id: int
    task_id: int
    date: str
    description: str
    hours: float
