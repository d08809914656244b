# SPDX-License-Identifier: MIT

import logging
from contextlib import contextmanager
from typing import Iterator

import typer

from mococp.client.error import ApiError, NotLoggedInError
from mococp.service.select import InputExhaustedError, NoCandidatesError
from mococp.time import InvalidDateShift
from mococp.view.table import MalformedTableError

logger = logging.getLogger(__name__)

COMMAND_ERRORS = (
    ApiError,
    InputExhaustedError,
    InvalidDateShift,
    MalformedTableError,
    NoCandidatesError,
    NotLoggedInError,
)


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn a failed command into an error message and exit code 1."""
    try:
        yield
    except COMMAND_ERRORS as e:
        logger.debug("command failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
