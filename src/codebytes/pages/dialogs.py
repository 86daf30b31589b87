"""Reusable dialog components for NiceGUI pages."""

from __future__ import annotations

from nicegui import ui

MISSING_LANGUAGE_TITLE = "Codebyte language required"
MISSING_LANGUAGE_CONTENT = (
    "Every codebyte needs a language before the post can be saved. "
    "Pick a language in each codebyte editor and press \"Save to post\"."
)


async def show_missing_language_dialog(codebyte_index: int | None = None) -> None:
    """Show a blocking alert explaining why the post was not saved.

    Resolves once the user dismisses it; dismissing never saves.

    Args:
        codebyte_index: 0-based index of the first offending codebyte, shown
            to the user as a 1-based position when given.
    """
    with ui.dialog().props("persistent") as dialog, ui.card().classes("w-96"):
        ui.label(MISSING_LANGUAGE_TITLE).classes("text-lg font-bold mb-2")
        ui.label(MISSING_LANGUAGE_CONTENT).classes("text-sm text-gray-700 mb-2")
        if codebyte_index is not None:
            ui.label(f"Codebyte {codebyte_index + 1} has no language.").classes(
                "text-xs text-gray-500 mb-4"
            )

        with ui.row().classes("w-full justify-end gap-2"):
            ui.button("OK", on_click=lambda: dialog.submit(None)).props(
                'color=primary data-testid="missing-language-ok-btn"'
            )

    dialog.open()
    await dialog
