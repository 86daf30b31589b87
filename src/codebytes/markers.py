"""Marker format constants for codebyte blocks.

A codebyte is delimited by an open marker line and a close marker line.
Markers must occupy the whole line; ``[codebyte]`` embedded in other text
is ordinary post content.

Used by locator.py (find_codebyte) and composer.py (insert/update/validate).
"""

from __future__ import annotations

import re

# Open marker in any form: [codebyte], [codebyte language=python], ...
CODEBYTE_OPEN_TAG = re.compile(r"^\[codebyte.*]$")
# Open marker that declares a language; group 1 is the language token
CODEBYTE_OPEN_TAG_WITH_LANG = re.compile(r"^\[codebyte[ ]+language=([^\s]+?)[ ]*]$")
CODEBYTE_CLOSE_TAG = re.compile(r"^\[/codebyte]$")

OPEN_TAG = "[codebyte]"
OPEN_TAG_WITH_LANG_TEMPLATE = "[codebyte language={}]"
CLOSE_TAG = "[/codebyte]"
EMPTY_CODEBYTE_TEMPLATE = f"{OPEN_TAG}\n\n{CLOSE_TAG}"


def is_open_tag(line: str) -> bool:
    """Return True if *line* is an open marker, with or without a language."""
    return CODEBYTE_OPEN_TAG.fullmatch(line) is not None


def is_close_tag(line: str) -> bool:
    """Return True if *line* is a close marker."""
    return CODEBYTE_CLOSE_TAG.fullmatch(line) is not None


def open_tag_language(line: str) -> str | None:
    """Return the declared language of an open marker line.

    Returns ``None`` for bare ``[codebyte]`` markers and for lines that are
    not open markers at all.
    """
    match = CODEBYTE_OPEN_TAG_WITH_LANG.fullmatch(line)
    if match is None:
        return None
    return match.group(1)


def open_tag_for(language: str) -> str:
    """Build the open marker line for *language*."""
    return OPEN_TAG_WITH_LANG_TEMPLATE.format(language)
