# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from mococp.logger import configure_logging
from mococp.terminal import activity, configuration, overtime, timer
from mococp.terminal.custom_typer import OrderedAliasedTyperGroup
from mococp.terminal.login import login

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="mococp - Moco time tracking in the CLI",
    no_args_is_help=True,
)
app.command(name="login")(login)
app.command(name="list, ls")(activity.list_activities)
app.command(name="new, n")(activity.new)
app.command(name="edit, e")(activity.edit)
app.command(name="edit-simple, es")(activity.edit_simple)
app.command(name="rm")(activity.rm)
app.add_typer(timer.app, name="timer, t")
app.command(name="overtime, o")(overtime.overtime)
app.add_typer(configuration.app, name="config, c", help="View or change settings")


@app.callback()
def main_callback(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log requests and internal steps to stderr"),
    ] = False,
) -> None:
    """
    mococp - Moco time tracking in the CLI

    Global options that apply to all commands.
    """
    configure_logging(debug)


def run() -> None:
    app()
