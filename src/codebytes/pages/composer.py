"""Composer page: write a post and embed codebytes in it.

The textarea holds the raw post. The toolbar button inserts an empty
codebyte (or wraps the selection in one), the preview shows one editor
frame per top-level codebyte, and "Save to post" asks that frame for its
code and writes the reply back into the post. Saving checks that every
top-level codebyte declares a language.
"""

from __future__ import annotations

import json
import logging
from functools import partial
from typing import TYPE_CHECKING, Any

from nicegui import ui

from codebytes.composer import (
    find_unlabelled_codebyte,
    insert_codebyte,
    parse_codebytes,
    update_codebyte,
)
from codebytes.config import get_settings
from codebytes.embed import build_editor_url, frame_html
from codebytes.messages import FrameChannel, SaveRequest
from codebytes.pages.dialogs import show_missing_language_dialog
from codebytes.pages.layout import page_layout
from codebytes.pages.registry import page_route

if TYPE_CHECKING:
    from nicegui.elements.textarea import Textarea

logger = logging.getLogger(__name__)

_PREVIEW_CLASS = "codebyte-preview"

# Forward frame replies to the server, tagged with the id of the frame
# that sent them.
# fmt: off
_SAVE_RESPONSE_LISTENER_JS = (
    "window.addEventListener('message', function(e) {"
    "  if (!e.data || !e.data.codeByteSaveResponse) return;"
    f"  var frames = document.querySelectorAll('.{_PREVIEW_CLASS} iframe');"
    "  for (var i = 0; i < frames.length; i++) {"
    "    if (frames[i].contentWindow === e.source) {"
    "      emitEvent('codebyte_save_response', {"
    "        frameId: frames[i].id,"
    "        codeByteSaveResponse: e.data.codeByteSaveResponse"
    "      });"
    "      return;"
    "    }"
    "  }"
    "}, false);"
)
# fmt: on


def _selection_js(element_id: int) -> str:
    return (
        f"const el = getHtmlElement({element_id}).querySelector('textarea');"
        "return [el.selectionStart, el.selectionEnd];"
    )


def _save_request_js(frame_id: str) -> str:
    message = json.dumps(SaveRequest().to_message())
    return (
        f"document.getElementById({json.dumps(frame_id)})"
        f".contentWindow.postMessage({message}, '*');"
    )


async def _insert_codebyte(editor: Textarea) -> None:
    """Toolbar action: insert a codebyte at the textarea's selection."""
    value = editor.value or ""
    try:
        selection = await ui.run_javascript(_selection_js(editor.id))
    except TimeoutError:
        logger.warning("Could not read textarea selection; appending codebyte")
        selection = [len(value), len(value)]
    start, end = (int(offset) for offset in selection)
    editor.set_value(insert_codebyte(value, start, end))


def _request_save(frame_id: str) -> None:
    ui.run_javascript(_save_request_js(frame_id))


@page_route("/", title="Compose", icon="edit", order=10)
async def composer_page() -> None:
    """Post composer with codebyte toolbar, preview and save check."""
    settings = get_settings()
    enabled = settings.codebytes.enabled
    page_url = f"{settings.app.base_url.rstrip('/')}/"
    channel = FrameChannel()

    with page_layout("Compose"):
        with ui.row().classes("w-full gap-2 mb-2"):
            insert_btn = ui.button("Codebyte", icon="code").props(
                'outline data-testid="codebyte-toolbar-btn"'
            )
            insert_btn.set_visibility(enabled)

        editor = (
            ui.textarea(label="Post", value="")
            .props('outlined autogrow data-testid="composer-textarea"')
            .classes("w-full font-mono")
        )

        @ui.refreshable
        def preview() -> None:
            channel.reset()
            if not enabled:
                return
            for codebyte in parse_codebytes(editor.value or ""):
                frame_id = channel.register()
                url = build_editor_url(
                    codebyte.language,
                    codebyte.text,
                    page_url=page_url,
                    preview=True,
                    config=settings.codebytes,
                )
                with ui.element("div").classes(_PREVIEW_CLASS):
                    ui.html(
                        frame_html(url, frame_id, settings.codebytes), sanitize=False
                    )
                    ui.button(
                        "Save to post", on_click=partial(_request_save, frame_id)
                    ).props("color=primary").classes("mb-6")

        ui.label("Preview").classes("text-lg font-semibold mt-4")
        preview()
        editor.on("blur", lambda _e: preview.refresh())

        async def on_insert() -> None:
            await _insert_codebyte(editor)
            preview.refresh()

        insert_btn.on_click(on_insert)

        def on_save_response(e: Any) -> None:
            resolved = channel.resolve(e.args or {})
            if resolved is None:
                return
            index, response = resolved
            value = editor.value or ""
            editor.set_value(
                update_codebyte(value, index, response.language, response.text)
            )
            preview.refresh()
            ui.notify(f"Codebyte {index + 1} saved to post", type="positive")

        async def on_save() -> None:
            value = editor.value or ""
            if enabled:
                offending = find_unlabelled_codebyte(value)
                if offending is not None:
                    await show_missing_language_dialog(offending)
                    return
            logger.info("Post accepted (%d chars)", len(value))
            ui.notify("Post is ready to publish", type="positive")

        ui.button("Save", icon="save", on_click=on_save).props(
            'color=primary data-testid="composer-save-btn"'
        ).classes("mt-4")

    if enabled:
        ui.on("codebyte_save_response", on_save_response)
        ui.run_javascript(_SAVE_RESPONSE_LISTENER_JS)
