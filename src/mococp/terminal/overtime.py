# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from mococp.repository.configuration import CONFIGURATION_REPO
from mococp.service.report import overtime_rows, overtime_summary, overtime_title
from mococp.terminal.connect import open_moco_client
from mococp.terminal.errors import report_errors
from mococp.view.header import header
from mococp.view.table import print_table


def overtime(
    monthly: Annotated[
        bool, typer.Option("--monthly", "-m", help="Show the month by month report")
    ] = False,
) -> None:
    """Show your overtime."""
    config = CONFIGURATION_REPO.get_config()

    with report_errors(), open_moco_client(config) as client:
        report = client.get_overtime_report()

        if monthly:
            header(overtime_title(report))
            print_table(overtime_rows(report))
        else:
            typer.echo(overtime_summary(report))
