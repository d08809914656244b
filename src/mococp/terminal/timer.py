# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from mococp.repository.configuration import CONFIGURATION_REPO
from mococp.service.report import format_hours
from mococp.service.resolve import resolve_activity_today
from mococp.terminal.connect import open_moco_client
from mococp.terminal.custom_typer import AliasedTyperGroup
from mococp.terminal.errors import report_errors
from mococp.view.header import success, warning

app = typer.Typer(
    cls=AliasedTyperGroup, no_args_is_help=True, help="Start/Stop activity timer"
)


@app.command("start")
def start(
    activity: Annotated[Optional[int], typer.Option("--activity", "-a")] = None,
) -> None:
    """Start the timer of one of today's activities."""
    config = CONFIGURATION_REPO.get_config()

    with report_errors(), open_moco_client(config) as client:
        selected = resolve_activity_today(client, activity)
        client.control_activity_timer(selected["id"], "start")
        success(f"Timer started for activity {selected['id']}")


@app.command("stop")
def stop() -> None:
    """Stop the running timer."""
    config = CONFIGURATION_REPO.get_config()

    with report_errors(), open_moco_client(config) as client:
        running = [
            activity
            for activity in client.list_activities_today()
            if activity["timer_started_at"] is not None
        ]
        if len(running) == 0:
            warning("Could not stop timer since it was not on")
            return

        client.control_activity_timer(running[0]["id"], "stop")
        stopped = client.get_activity(running[0]["id"])
        typer.echo(f"Activity duration: {format_hours(stopped['hours'])} hours")
