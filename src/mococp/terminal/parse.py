# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from mococp.time import date_from_str


def parse_date(date_param: Optional[str]) -> Optional[pendulum.DateTime]:
    if date_param is None:
        return None

    if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_param):
        raise typer.BadParameter(
            f"Incorrect date format '{date_param}', use YYYY-MM-DD"
        )
    try:
        return date_from_str(date_param)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date '{date_param}': {e}")
