"""Command-line utilities for checking codebytes in posts.

``codebytes-check`` lists the top-level codebytes of each post file and
fails when any of them would be rejected at save time for lacking a
language.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from codebytes.composer import find_unlabelled_codebyte, parse_codebytes

if TYPE_CHECKING:
    from collections.abc import Sequence

console = Console()


def _build_codebyte_table(title: str, value: str) -> Table:
    """Build a table of the top-level codebytes in *value*."""
    table = Table(title=Text(title), title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Lines", justify="right")
    table.add_column("Language")
    table.add_column("Body lines", justify="right")

    for codebyte in parse_codebytes(value):
        if codebyte.language is None:
            language = Text("missing", style="red")
        else:
            language = Text(codebyte.language)
        body_lines = len(codebyte.text.splitlines())
        table.add_row(
            str(codebyte.index),
            f"{codebyte.start + 1}-{codebyte.end + 1}",
            language,
            str(body_lines),
        )
    return table


def check_post(path: Path) -> bool:
    """Print the codebytes of one post file; return True if it would save."""
    value = path.read_text(encoding="utf-8")
    console.print(_build_codebyte_table(str(path), value))

    offending = find_unlabelled_codebyte(value)
    if offending is None:
        console.print("[green]All codebytes declare a language[/]")
        return True
    console.print(
        f"[red]Codebyte {offending} has no language; save would be blocked[/]"
    )
    return False


def check(argv: Sequence[str] | None = None) -> None:
    """Entry point for ``codebytes-check``."""
    parser = argparse.ArgumentParser(
        prog="codebytes-check",
        description="Check that every codebyte in a post declares a language.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="post files to check")
    args = parser.parse_args(argv)

    ok = True
    for path in args.paths:
        if not path.is_file():
            console.print(f"[red]No such file: {path}[/]")
            ok = False
            continue
        ok = check_post(path) and ok
    sys.exit(0 if ok else 1)
