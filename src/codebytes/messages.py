"""Save protocol between the composer and the embedded editor frames.

The composer asks a frame for its current code by posting a
``SaveRequest``; the frame answers with a ``SaveResponse`` carrying the
chosen language and text. The browser forwards each answer to the server
as a ``FrameMessage`` tagged with the frame's id, and ``FrameChannel``
turns that id back into the index of the codebyte the frame shows.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class SaveRequest(BaseModel):
    """Message posted into a frame to ask for its code."""

    model_config = ConfigDict(populate_by_name=True)

    code_byte_save_request: bool = Field(default=True, alias="codeByteSaveRequest")

    def to_message(self) -> dict[str, Any]:
        """Serialise for ``window.postMessage``."""
        return self.model_dump(by_alias=True)


class SaveResponse(BaseModel):
    """Language and text a frame reports back."""

    language: str
    text: str


class FrameMessage(BaseModel):
    """A frame's reply as forwarded by the browser."""

    model_config = ConfigDict(populate_by_name=True)

    frame_id: str = Field(alias="frameId")
    save_response: SaveResponse | None = Field(
        default=None, alias="codeByteSaveResponse"
    )


class FrameChannel:
    """Correlates editor frames with the codebytes they display.

    Frame ids are handed out in preview order, so the position of an id in
    the channel is the index of its codebyte. One channel per composer
    page; call ``reset()`` whenever the preview is rebuilt.
    """

    def __init__(self, prefix: str = "codebyte-frame") -> None:
        self._prefix = prefix
        self._generation = 0
        self._frame_ids: list[str] = []

    def __len__(self) -> int:
        return len(self._frame_ids)

    def register(self) -> str:
        """Allocate an id for the next frame in the preview."""
        frame_id = f"{self._prefix}-{self._generation}-{len(self._frame_ids)}"
        self._frame_ids.append(frame_id)
        return frame_id

    def reset(self) -> None:
        """Forget all frames; replies from them will be ignored."""
        self._generation += 1
        self._frame_ids.clear()

    def index_of(self, frame_id: str) -> int | None:
        """Return the codebyte index of *frame_id*, or None if unknown."""
        try:
            return self._frame_ids.index(frame_id)
        except ValueError:
            return None

    def resolve(self, payload: dict[str, Any]) -> tuple[int, SaveResponse] | None:
        """Turn a forwarded frame reply into ``(index, response)``.

        Returns None for malformed payloads, replies without a save response
        and replies from frames this channel does not know.
        """
        try:
            message = FrameMessage.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Dropping malformed frame message: %s", exc)
            return None

        if message.save_response is None:
            logger.debug(
                "Frame %s sent a message without a save response", message.frame_id
            )
            return None

        index = self.index_of(message.frame_id)
        if index is None:
            logger.debug(
                "Ignoring save response from unknown frame %s", message.frame_id
            )
            return None
        return index, message.save_response
