# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Protocol, Sequence, TextIO

import pendulum

from mococp.model.activity import Activity
from mococp.model.performance_report import PerformanceReport
from mococp.model.project import Project, ProjectTask
from mococp.service.report import format_hours
from mococp.service.select import (
    NoCandidatesError,
    ask_date_str,
    find_index,
    resolve_streams,
    select_index,
)
from mococp.time import DateRange, date_from_str, date_to_str, today_local
from mococp.view.header import header

logger = logging.getLogger(__name__)

PROJECT_HEADER = ["Index", "Customer", "Project", "Project ID"]
TASK_HEADER = ["Index", "Task", "Task ID"]
ACTIVITY_HEADER = ["Index", "Date", "Duration", "Project", "Task", "Description"]


class ActivitySource(Protocol):
    def list_projects(self) -> list[Project]: ...

    def list_activities(self, date_range: DateRange) -> list[Activity]: ...

    def list_activities_today(self) -> list[Activity]: ...

    def get_overtime_report(self) -> PerformanceReport: ...


def project_row(index: int, project: Project) -> list[str]:
    return [
        str(index),
        project["customer"]["name"],
        project["name"],
        str(project["id"]),
    ]


def task_row(index: int, task: ProjectTask) -> list[str]:
    return [str(index), task["name"], str(task["id"])]


def activity_row(index: int, activity: Activity) -> list[str]:
    return [
        str(index),
        activity["date"],
        format_hours(activity["hours"]),
        activity["project"]["name"],
        activity["task"]["name"],
        activity["description"] or "",
    ]


def activity_id(activity: Activity) -> int:
    return activity["id"]


def active_tasks(project: Project) -> list[ProjectTask]:
    return [task for task in project["tasks"] if task["active"]]


def resolve_task(
    projects: Sequence[Project],
    preselected_project_id: Optional[int] = None,
    preselected_task_id: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> tuple[Project, ProjectTask]:
    """
    Resolve a project and one of its active tasks.

    Inactive tasks are never offered. A preselected task id that points at an
    inactive task is treated like an unknown id and the user picks among the
    active tasks instead.

    Raises:
        NoCandidatesError: there are no projects or the chosen project has no
            active task
    """
    if len(projects) == 0:
        raise NoCandidatesError("No projects are assigned to you")

    project_index = select_index(
        projects,
        PROJECT_HEADER,
        project_row,
        "Chose your Project: ",
        preselected_id=preselected_project_id,
        id_extractor=lambda project: project["id"],
        stdin=stdin,
        stdout=stdout,
    )
    project = projects[project_index]

    tasks = active_tasks(project)
    if len(tasks) == 0:
        raise NoCandidatesError(f"Project '{project['name']}' has no active tasks")

    task_index = select_index(
        tasks,
        TASK_HEADER,
        task_row,
        "Chose your Task: ",
        preselected_id=preselected_task_id,
        id_extractor=lambda task: task["id"],
        stdin=stdin,
        stdout=stdout,
    )
    logger.debug(
        "resolved project %s task %s", project["id"], tasks[task_index]["id"]
    )
    return project, tasks[task_index]


def resolve_activity(
    activities: Sequence[Activity],
    preselected_activity_id: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Activity:
    if len(activities) == 0:
        raise NoCandidatesError("No activities found in the selected date range")

    activity_index = select_index(
        activities,
        ACTIVITY_HEADER,
        activity_row,
        "Choose your Activity: ",
        preselected_id=preselected_activity_id,
        id_extractor=activity_id,
        stdin=stdin,
        stdout=stdout,
    )
    return activities[activity_index]


def prompt_task_select(
    source: ActivitySource,
    project_id: Optional[int] = None,
    task_id: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> tuple[Project, ProjectTask]:
    return resolve_task(source.list_projects(), project_id, task_id, stdin, stdout)


def resolve_activity_today(
    source: ActivitySource,
    preselected_activity_id: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Activity:
    """Resolve one of today's activities; used by the timer and quick edits."""
    activities = source.list_activities_today()
    preselected = find_index(activities, preselected_activity_id, activity_id)
    if activities and preselected is None:
        _, out = resolve_streams(stdin, stdout)
        header("List activities for today:", file=out)
    return resolve_activity(activities, preselected_activity_id, stdin, stdout)


def resolve_activity_in_range(
    source: ActivitySource,
    date_range: DateRange,
    preselected_activity_id: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Activity:
    activities = source.list_activities(date_range)
    return resolve_activity(activities, preselected_activity_id, stdin, stdout)


def resolve_activity_on_date(
    source: ActivitySource,
    date: pendulum.DateTime,
    preselected_activity_id: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Activity:
    date_range = (date.start_of("day"), date.end_of("day"))
    return resolve_activity_in_range(
        source, date_range, preselected_activity_id, stdin, stdout
    )


def prompt_activity_select(
    source: ActivitySource,
    preselected_activity_id: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Activity:
    """
    Ask for a date range, then resolve an activity inside it.

    An empty "from" answer means today, an empty "to" answer repeats the
    "from" date.
    """
    today = date_to_str(today_local())
    from_date = ask_date_str(
        "List activities from (YYYY-MM-DD) - Default 'today': ", today, stdin, stdout
    )
    to_date = ask_date_str(
        "List activities to (YYYY-MM-DD) - Default 'last answer': ",
        from_date,
        stdin,
        stdout,
    )

    start = date_from_str(from_date).start_of("day")
    end = date_from_str(to_date).end_of("day")
    if end < start:
        start, end = end.start_of("day"), start.end_of("day")
    return resolve_activity_in_range(
        source, (start, end), preselected_activity_id, stdin, stdout
    )
