# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from mococp import configuration
from mococp.repository.configuration import CONFIGURATION_REPO
from mococp.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _secret(value: Optional[str]) -> str:
    if value is None:
        return "✗ Not set"
    return "✓ Set"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("moco_company", config["moco_company"] or "")
    table.add_row("moco_api_key", _secret(config["moco_api_key"]))
    table.add_row("moco_bot_api_key", _secret(config["moco_bot_api_key"]))
    table.add_row(
        "moco_user_id",
        str(config["moco_user_id"]) if config["moco_user_id"] is not None else "",
    )
    table.add_row("jira_tempo_api_key", _secret(config["jira_tempo_api_key"]))
    table.add_row("week_start", config["week_start"])
    table.add_row("request_timeout", f"{config['request_timeout']}s")
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    week_start: Annotated[
        Optional[str],
        typer.Option(
            "--week-start",
            help="First day of the week for --week listings (monday..sunday)",
        ),
    ] = None,
    request_timeout: Annotated[
        Optional[float],
        typer.Option(
            "--request-timeout",
            min=0.1,
            help="Timeout for API requests in seconds",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    if week_start is not None:
        week_start = week_start.lower()
        if week_start not in configuration.WEEK_DAYS:
            raise typer.BadParameter(
                f"Invalid week start: {week_start}. "
                f"Valid options: {', '.join(configuration.WEEK_DAYS)}"
            )

    CONFIGURATION_REPO.update_config(
        week_start=week_start,  # type: ignore[arg-type]
        request_timeout=request_timeout,
    )
    CONFIGURATION_REPO.flush()
    view()
