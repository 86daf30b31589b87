"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

# Posts used by several test modules, as line lists.
TWO_EMPTY_CODEBYTES = [
    "test test test",
    "[codebyte language=javascript]",
    "[/codebyte]",
    "[codebyte]",
    "[/codebyte]",
]

NESTED_THEN_SIBLING = [
    "test test test",
    "[codebyte language=javascript]",
    "[codebyte]",
    "test",
    "[/codebyte]",
    "[/codebyte]",
    "[codebyte]",
    "test",
    "[/codebyte]",
]

MIXED_GARBAGE = [
    "[/codebyte]",
    "intro [codebyte]",
    "[codebyte language=python]",
    "print('hi')",
    "[/codebyte]",
    "[codebyte ",
    "language=ruby]",
    "[/codebyte]",
    "[codebyte language=c]",
    "[codebyte]",
    "[/codebyte]",
    "int x;",
    "[/codebyte]",
    "[/codebyte]",
    "[codebyte]",
    "unterminated",
]

SAMPLE_POSTS = {
    "two_empty": TWO_EMPTY_CODEBYTES,
    "nested": NESTED_THEN_SIBLING,
    "garbage": MIXED_GARBAGE,
    "no_codebytes": ["just", "some", "text"],
    "empty": [],
}


@pytest.fixture(params=sorted(SAMPLE_POSTS))
def sample_post(request: pytest.FixtureRequest) -> list[str]:
    """Each sample post in turn, as a fresh list of lines."""
    return list(SAMPLE_POSTS[request.param])
