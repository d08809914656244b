# SPDX-License-Identifier: MIT

from typing import Optional, TextIO

from rich import print
from rich.markup import escape


def header(text: str, file: Optional[TextIO] = None) -> None:
    """Print a section heading above a table, on `file` when given."""
    print(f"[dark_orange]{escape(text)}[/dark_orange]", file=file)


def success(text: str) -> None:
    print(f"[green]{escape(text)}[/green]")


def warning(text: str) -> None:
    print(f"[yellow]{escape(text)}[/yellow]")
