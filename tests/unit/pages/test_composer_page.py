"""Tests for composer page wiring that does not need a browser."""

from __future__ import annotations

import json

from codebytes.pages import composer
from codebytes.pages.registry import get_visible_pages


class TestPageRegistration:
    """The composer registers itself as the index route."""

    def test_composer_is_index_route(self) -> None:
        """The composer is registered at '/'."""
        routes = {page.route: page for page in get_visible_pages()}
        assert routes["/"].title == "Compose"

    def test_page_is_async(self) -> None:
        """The page function is a coroutine."""
        import inspect

        assert inspect.iscoroutinefunction(composer.composer_page)


class TestBrowserSnippets:
    """JavaScript sent to the browser."""

    def test_save_request_posts_to_frame(self) -> None:
        """Save request JS posts the message to the frame."""
        js = composer._save_request_js("codebyte-frame-0-1")
        assert 'document.getElementById("codebyte-frame-0-1")' in js
        assert json.dumps({"codeByteSaveRequest": True}) in js
        assert "postMessage" in js

    def test_listener_forwards_frame_id(self) -> None:
        """The listener forwards replies with the frame id."""
        js = composer._SAVE_RESPONSE_LISTENER_JS
        assert "emitEvent('codebyte_save_response'" in js
        assert ".codebyte-preview iframe" in js
        assert "frameId: frames[i].id" in js

    def test_selection_reads_textarea(self) -> None:
        """Selection JS reads the textarea's selection offsets."""
        js = composer._selection_js(42)
        assert "getHtmlElement(42)" in js
        assert "selectionStart" in js
