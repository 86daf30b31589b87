"""URLs and markup for the embedded codebyte editor frame.

Each codebyte in a post is shown as an iframe pointing at the remote
editor. The body text travels in the query string as URL-safe base64
without padding, which is what the editor expects.
"""

from __future__ import annotations

import base64
import html
from typing import TYPE_CHECKING
from urllib.parse import quote

from codebytes.config import get_settings

if TYPE_CHECKING:
    from codebytes.config import CodebytesConfig


def encode_text(text: str) -> str:
    """URL-safe base64 of *text* with ``=`` padding stripped."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def decode_text(encoded: str) -> str:
    """Inverse of :func:`encode_text`."""
    padding = "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(encoded + padding).decode("utf-8")


def build_editor_url(
    language: str | None,
    text: str,
    *,
    page_url: str,
    preview: bool = False,
    config: CodebytesConfig | None = None,
) -> str:
    """Build the editor frame URL for one codebyte.

    Args:
        language: Declared language, or None/empty for an unlabelled block.
        text: Codebyte body.
        page_url: URL of the post the codebyte belongs to.
        preview: True when embedded in the composer preview; the editor
            then shows its save controls.
        config: Codebyte settings; defaults to ``get_settings().codebytes``.

    Returns:
        Absolute editor URL.
    """
    if config is None:
        config = get_settings().codebytes

    lang = quote(language or "", safe="")
    page = quote(page_url, safe="!*'()")
    params = [
        f"lang={lang}",
        f"text={encode_text(text)}",
        f"client-name={config.client_name}",
        f"page={page}",
    ]
    if preview:
        params.append("mode=compose")
    return f"{config.editor_url}?{'&'.join(params)}"


def frame_style(config: CodebytesConfig | None = None) -> str:
    """Inline CSS for the editor iframe."""
    if config is None:
        config = get_settings().codebytes
    return (
        "display: block; "
        f"height: {config.frame_height}px; "
        "width: 100%; "
        f"max-width: {config.frame_max_width}px; "
        "margin-bottom: 24px; "
        "border: 0;"
    )


def frame_html(
    url: str, frame_id: str, config: CodebytesConfig | None = None
) -> str:
    """Render the ``<iframe>`` element for an editor URL."""
    return (
        f'<iframe id="{html.escape(frame_id)}" src="{html.escape(url)}" '
        f'allow="clipboard-write" style="{frame_style(config)}"></iframe>'
    )
