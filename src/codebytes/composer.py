"""Text operations the composer performs on codebyte markers.

Everything here works on the raw post value (a single string) and returns
a new value; nothing touches the UI. The NiceGUI page in
``pages/composer.py`` wires these to the toolbar, the preview frames and
the save button.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from codebytes.locator import find_codebyte, iter_codebytes
from codebytes.markers import (
    CLOSE_TAG,
    CODEBYTE_OPEN_TAG_WITH_LANG,
    EMPTY_CODEBYTE_TEMPLATE,
    OPEN_TAG,
    open_tag_for,
    open_tag_language,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Codebyte:
    """A top-level codebyte found in a post."""

    index: int
    start: int
    end: int
    language: str | None
    text: str


def split_lines(value: str) -> list[str]:
    """Split a post into lines the way the locator expects."""
    return value.split("\n")


def insert_codebyte(value: str, selection_start: int, selection_end: int) -> str:
    """Insert an empty codebyte at the cursor, or wrap the selection in one.

    Newlines are added around the markers only where needed so that each
    marker ends up on a line of its own.

    Args:
        value: Current composer text.
        selection_start: Selection start offset (cursor if no selection).
        selection_end: Selection end offset.

    Returns:
        The new composer text.
    """
    pre = value[:selection_start]
    selected = value[selection_start:selection_end]
    post = value[selection_end:]

    line_value = split_lines(value)[pre.count("\n")]
    add_block_in_same_line = len(line_value) == 0
    new_line_after_selection = post.startswith("\n")

    if selected:
        start_tag = f"{OPEN_TAG}\n"
        end_tag = f"\n{CLOSE_TAG}"
        is_whole_line_selected = line_value == selected
        is_beginning_of_line_selected = pre.strip() == ""
        if not (
            add_block_in_same_line
            or is_whole_line_selected
            or is_beginning_of_line_selected
        ):
            start_tag = "\n" + start_tag
        if not new_line_after_selection:
            end_tag += "\n"
        logger.debug("Wrapping %d selected chars in a codebyte", len(selected))
        return f"{pre}{start_tag}{selected}{end_tag}{post}"

    template = EMPTY_CODEBYTE_TEMPLATE
    if not add_block_in_same_line:
        template = "\n" + template
    if not new_line_after_selection:
        template += "\n"
    logger.debug("Inserting empty codebyte at offset %d", selection_start)
    return f"{pre}{template}{post}"


def update_codebyte(value: str, index: int, language: str, text: str) -> str:
    """Replace the language and body of top-level codebyte *index*.

    The open marker is rewritten to declare *language* and the body is
    replaced by *text*; the close marker is kept. If the post has no such
    codebyte, *value* is returned unchanged.
    """
    lines = split_lines(value)
    found = find_codebyte(lines, index)
    if found is None:
        logger.debug("No codebyte at index %d; post left unchanged", index)
        return value

    start, end = found
    lines[start:end] = [open_tag_for(language), *split_lines(text)]
    logger.debug(
        "Updated codebyte %d (lines %d-%d) to language %r", index, start, end, language
    )
    return "\n".join(lines)


def parse_codebytes(value: str) -> list[Codebyte]:
    """Return every top-level codebyte in *value* with its language and body."""
    lines = split_lines(value)
    return [
        Codebyte(
            index=index,
            start=start,
            end=end,
            language=open_tag_language(lines[start]),
            text="\n".join(lines[start + 1 : end]).strip(),
        )
        for index, (start, end) in enumerate(iter_codebytes(lines))
    ]


def find_unlabelled_codebyte(value: str) -> int | None:
    """Return the index of the first top-level codebyte without a language.

    Walks top-level codebytes by index until the locator runs out. A block
    the locator never reports (e.g. one whose open marker has leading
    text) is not checked.

    Returns:
        Index of the offending codebyte, or ``None`` if all declare one.
    """
    lines = split_lines(value)
    index = 0
    while (found := find_codebyte(lines, index)) is not None:
        start, _end = found
        if CODEBYTE_OPEN_TAG_WITH_LANG.fullmatch(lines[start]) is None:
            logger.info("Codebyte %d (line %d) has no language", index, start)
            return index
        index += 1
    return None


def codebytes_are_valid(value: str) -> bool:
    """Check that every top-level codebyte declares a language."""
    return find_unlabelled_codebyte(value) is None
