# SPDX-License-Identifier: MIT

import math
import re
import sys
from typing import Callable, Optional, Sequence, TextIO, TypeVar

import pendulum

from mococp.time import date_from_str, date_to_str, today_local
from mococp.view.table import render_table

T = TypeVar("T")

INDEX_INVALID = "Index Invalid"

_INDEX_P = re.compile(r"^\d+$", re.ASCII)


class NoCandidatesError(LookupError):
    """Raised when a selection is attempted against an empty candidate list."""

    pass


class InputExhaustedError(EOFError):
    """Raised when standard input closes while a prompt is waiting for an answer."""

    pass


def resolve_streams(
    stdin: Optional[TextIO], stdout: Optional[TextIO]
) -> tuple[TextIO, TextIO]:
    # Resolved per call so redirected sys streams are honoured
    return (stdin if stdin is not None else sys.stdin), (
        stdout if stdout is not None else sys.stdout
    )


def _strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


def parse_index(line: str, count: int) -> Optional[int]:
    """Return the index typed on `line` if it addresses one of `count` candidates."""
    text = line.strip()
    if not _INDEX_P.match(text):
        return None
    index = int(text)
    if index >= count:
        return None
    return index


def find_index(
    candidates: Sequence[T],
    preselected_id: Optional[int],
    id_extractor: Optional[Callable[[T], int]],
) -> Optional[int]:
    if preselected_id is None or id_extractor is None:
        return None
    for index, candidate in enumerate(candidates):
        if id_extractor(candidate) == preselected_id:
            return index
    return None


def select_index(
    candidates: Sequence[T],
    header: Sequence[str],
    row_formatter: Callable[[int, T], list[str]],
    prompt: str,
    preselected_id: Optional[int] = None,
    id_extractor: Optional[Callable[[T], int]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Pick one candidate, by identifier or through a numbered prompt.

    When `preselected_id` matches a candidate (according to `id_extractor`)
    its index is returned without any I/O. Otherwise the candidates are shown
    as a table (header row first, then `row_formatter(index, candidate)` per
    candidate) and the user is asked for an index until a valid one is given.

    Args:
        candidates: Entities to choose from
        header: Header cells of the selection table
        row_formatter: Builds the table row for a candidate, index first
        prompt: Text written before every read
        preselected_id: Identifier requested by the caller, if any
        id_extractor: Returns the identifier of a candidate
        stdin: Input stream, defaults to sys.stdin
        stdout: Output stream, defaults to sys.stdout

    Returns:
        Index into `candidates`

    Raises:
        NoCandidatesError: `candidates` is empty
        InputExhaustedError: input closed before a valid index was read
    """
    if len(candidates) == 0:
        raise NoCandidatesError("Nothing to choose from")

    index = find_index(candidates, preselected_id, id_extractor)
    if index is not None:
        return index

    stdin, stdout = resolve_streams(stdin, stdout)
    rows = [list(header)] + [
        row_formatter(index, candidate) for index, candidate in enumerate(candidates)
    ]

    def ask() -> str:
        stdout.write(render_table(rows))
        stdout.write(prompt)
        stdout.flush()
        return stdin.readline()

    for line in iter(ask, ""):
        index = parse_index(line, len(candidates))
        if index is not None:
            return index
        stdout.write(INDEX_INVALID + "\n")

    raise InputExhaustedError("Input closed before a valid index was entered")


def ask_question(
    question: str,
    validator: Callable[[str], Optional[str]],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """Ask until `validator` accepts the answer (returns None)."""
    stdin, stdout = resolve_streams(stdin, stdout)

    def ask() -> str:
        stdout.write(question)
        stdout.flush()
        return stdin.readline()

    for line in iter(ask, ""):
        answer = _strip_newline(line)
        error = validator(answer)
        if error is None:
            return answer
        stdout.write(error + "\n")

    raise InputExhaustedError(f"Input closed while asking: {question.strip()}")


def mandatory_validator(answer: str) -> Optional[str]:
    if answer == "":
        return "Input is required"
    return None


def optional_date_validator(answer: str) -> Optional[str]:
    if answer == "":
        return None
    try:
        date_from_str(answer)
    except ValueError:
        return f"Invalid date '{answer}', expected YYYY-MM-DD"
    return None


def optional_hours_validator(answer: str) -> Optional[str]:
    if answer == "":
        return None
    try:
        hours = float(answer)
    except ValueError:
        return f"Invalid number of hours '{answer}'"
    if not math.isfinite(hours) or hours < 0:
        return f"Invalid number of hours '{answer}', expected 0 or more"
    return None


def ask_date(
    question: str,
    default: Optional[pendulum.DateTime] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> pendulum.DateTime:
    """Ask for a YYYY-MM-DD date; an empty answer yields `default` (today if unset)."""
    answer = ask_question(question, optional_date_validator, stdin, stdout)
    if answer == "":
        return default if default is not None else today_local()
    return date_from_str(answer)


def ask_date_str(
    question: str,
    default: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    answer = ask_question(question, optional_date_validator, stdin, stdout)
    if answer == "":
        return default
    return date_to_str(date_from_str(answer))


def ask_hours(
    question: str,
    default: float,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> float:
    answer = ask_question(question, optional_hours_validator, stdin, stdout)
    if answer == "":
        return default
    return float(answer)


def ask_text(
    question: str,
    default: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    answer = ask_question(question, lambda _: None, stdin, stdout)
    if answer == "":
        return default
    return answer
