"""Tag-pair locator for codebyte blocks.

Scans the lines of a post for codebyte marker pairs and reports the line
range of top-level blocks. Nested pairs are tracked with a stack of pending
open-line indices; only a close that empties the stack finishes a
top-level block. Inline, unterminated and stray markers never match.

Top-level blocks are numbered from 0 in the order their close markers
appear.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codebytes.markers import is_close_tag, is_open_tag

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


def iter_codebytes(lines: Sequence[str]) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` line indices of each top-level codebyte.

    Args:
        lines: The post split into lines. Not modified.

    Yields:
        Inclusive line ranges, open marker line first, in document order.
    """
    open_lines: list[int] = []

    for line_number, line in enumerate(lines):
        if is_open_tag(line):
            open_lines.append(line_number)
        elif is_close_tag(line) and open_lines:
            start = open_lines.pop()
            if not open_lines:
                yield start, line_number


def find_codebyte(lines: Sequence[str], index: int) -> tuple[int, int] | None:
    """Locate the top-level codebyte at position *index*.

    Args:
        lines: The post split into lines. Not modified.
        index: Which top-level codebyte to find (0 = first).

    Returns:
        ``(start, end)`` line indices of the open and close markers, or
        ``None`` if the post has no such codebyte.
    """
    match_index = -1
    for start, end in iter_codebytes(lines):
        match_index += 1
        if match_index == index:
            return start, end
    return None
