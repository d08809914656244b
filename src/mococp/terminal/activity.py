# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from mococp.repository.configuration import CONFIGURATION_REPO
from mococp.service.report import activity_list_rows, format_hours
from mococp.service.resolve import (
    prompt_activity_select,
    prompt_task_select,
    resolve_activity_on_date,
    resolve_activity_today,
)
from mococp.service.select import ask_date, ask_date_str, ask_hours, ask_text
from mococp.terminal.connect import open_moco_client
from mococp.terminal.errors import report_errors
from mococp.terminal.parse import parse_date
from mococp.time import (
    compute_date_range,
    date_to_display_str,
    date_to_str,
    granularity_from_flags,
)
from mococp.view.header import header, success
from mococp.view.table import print_table


def list_activities(
    week: Annotated[
        bool, typer.Option("--week", "-w", help="List the whole week")
    ] = False,
    month: Annotated[
        bool, typer.Option("--month", "-m", help="List the whole month")
    ] = False,
    backward: Annotated[
        Optional[int],
        typer.Option(
            "--backward",
            "-b",
            min=0,
            help="Number of days/weeks/months to go back (0 = current)",
        ),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="List a single day (YYYY-MM-DD)"),
    ] = None,
) -> None:
    """List activities."""
    config = CONFIGURATION_REPO.get_config()
    day = parse_date(date)

    with report_errors(), open_moco_client(config) as client:
        if day is not None:
            header(f"List activities for {date_to_display_str(day)}")
            date_range = (day.start_of("day"), day.end_of("day"))
        else:
            date_range = compute_date_range(
                granularity_from_flags(week, month),
                backward or 0,
                week_start=config["week_start"],
            )
            header(
                f"List activities from {date_to_display_str(date_range[0])} "
                f"to {date_to_display_str(date_range[1])}"
            )
        activities = client.list_activities(date_range)
        print_table(activity_list_rows(activities))


def new(
    project: Annotated[Optional[int], typer.Option("--project", "-p")] = None,
    task: Annotated[Optional[int], typer.Option("--task", "-t")] = None,
    hours: Annotated[Optional[float], typer.Option("--hours", min=0)] = None,
    date: Annotated[
        Optional[str], typer.Option("--date", "-d", help="YYYY-MM-DD")
    ] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-ds")
    ] = None,
) -> None:
    """Create new activity."""
    config = CONFIGURATION_REPO.get_config()
    day = parse_date(date)

    with report_errors(), open_moco_client(config) as client:
        selected_project, selected_task = prompt_task_select(client, project, task)

        if day is None:
            day = ask_date("Date (YYYY-MM-DD) - Default 'today': ")
        if hours is None:
            hours = ask_hours("Duration (hours) - Default 'start timer': ", 0.0)

        activity = client.create_activity(
            {
                "date": date_to_str(day),
                "project_id": selected_project["id"],
                "task_id": selected_task["id"],
                "hours": hours,
                "description": description,
            }
        )
        if hours == 0:
            client.control_activity_timer(activity["id"], "start")
            success(f"Created activity {activity['id']} and started its timer")
        else:
            success(f"Created activity {activity['id']}")


def edit(
    activity: Annotated[Optional[int], typer.Option("--activity", "-a")] = None,
) -> None:
    """Edit activity."""
    config = CONFIGURATION_REPO.get_config()

    with report_errors(), open_moco_client(config) as client:
        selected = prompt_activity_select(client, activity)

        date = ask_date_str(
            f"New date (YYYY-MM-DD) - Default '{selected['date']}': ",
            selected["date"],
        )
        hours = ask_hours(
            f"New duration (hours) - Default '{format_hours(selected['hours'])}': ",
            selected["hours"],
        )
        description = ask_text(
            "New description - Default 'current': ", selected["description"] or ""
        )

        client.edit_activity(
            selected["id"],
            {
                "project_id": selected["project"]["id"],
                "task_id": selected["task"]["id"],
                "date": date,
                "description": description,
                "hours": hours,
            },
        )
        success(f"Updated activity {selected['id']}")


def edit_simple(
    activity: Annotated[Optional[int], typer.Option("--activity", "-a")] = None,
) -> None:
    """Edit the duration of one of today's activities."""
    config = CONFIGURATION_REPO.get_config()

    with report_errors(), open_moco_client(config) as client:
        selected = resolve_activity_today(client, activity)

        hours = ask_hours(
            f"New duration (hours) - Default '{format_hours(selected['hours'])}': ",
            selected["hours"],
        )

        client.edit_activity(
            selected["id"],
            {
                "project_id": selected["project"]["id"],
                "task_id": selected["task"]["id"],
                "date": selected["date"],
                "description": selected["description"] or "",
                "hours": hours,
            },
        )
        success(f"Updated activity {selected['id']}")


def rm(
    activity: Annotated[Optional[int], typer.Option("--activity", "-a")] = None,
    date: Annotated[
        Optional[str], typer.Option("--date", "-d", help="YYYY-MM-DD")
    ] = None,
) -> None:
    """Delete activity."""
    config = CONFIGURATION_REPO.get_config()
    day = parse_date(date)

    with report_errors(), open_moco_client(config) as client:
        if day is not None:
            header(f"Delete activities for {date_to_display_str(day)}")
            selected = resolve_activity_on_date(client, day, activity)
        else:
            selected = prompt_activity_select(client, activity)

        client.delete_activity(selected["id"])
        success(f"Deleted activity {selected['id']}")
