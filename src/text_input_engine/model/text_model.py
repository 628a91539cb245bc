"""Editable codepoint buffer with a base/extent selection and directional cursor."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional

from text_input_engine.runtime import telemetry

from .codec import coerce_text, ensure_codepoint
from .config import TextInputConfig
from .state import SelectionState
from .sync import CodepointError, EditingState
from .validation import selection_fits


class TextInputModel:
    """State of one input session: text, selection and directional cursor.

    Text is stored as a list of single-codepoint strings so every offset is a
    codepoint offset. Edit operations return ``True`` when the text or the
    selection visibly changed, letting the caller skip redundant host updates.
    """

    def __init__(
        self,
        client_id: Any,
        config: TextInputConfig | Mapping[str, Any] | None = None,
        *,
        logger_name: Optional[str] = None,
    ) -> None:
        if not isinstance(config, TextInputConfig):
            config = TextInputConfig.from_mapping(config)
        self._client_id = client_id
        self._config = config
        self._text: List[str] = []
        self._selection = SelectionState()
        self._logger_name = logger_name

    @property
    def client_id(self) -> Any:
        return self._client_id

    @property
    def config(self) -> TextInputConfig:
        return self._config

    @property
    def input_action(self) -> str:
        return self._config.input_action

    @property
    def input_type(self) -> str:
        return self._config.input_type

    @property
    def text(self) -> str:
        return "".join(self._text)

    @property
    def selection_base(self) -> int:
        return self._selection.base

    @property
    def selection_extent(self) -> int:
        return self._selection.extent

    @property
    def selection_cursor(self) -> int:
        return self._selection.cursor

    def set_editing_state(
        self, selection_base: int, selection_extent: int, text: str | bytes
    ) -> bool:
        try:
            codepoints = list(coerce_text(text))
        except CodepointError as exc:
            self._reject_state(selection_base, selection_extent, reason=str(exc))
            return False
        if not selection_fits(selection_base, selection_extent, len(codepoints)):
            self._reject_state(
                selection_base, selection_extent, reason=f"length={len(codepoints)}"
            )
            return False
        with self._operation("set_editing_state"):
            self._text = codepoints
            self._selection.select(selection_base, selection_extent)
        return True

    def delete_selected(self) -> None:
        start, end = self._selection.span
        del self._text[start:end]
        self._selection.collapse(start)

    def get_selected(self) -> str:
        if not self._selection.is_active:
            return ""
        start, end = self._selection.span
        return "".join(self._text[start:end])

    def add_character(self, c: str | int) -> bool:
        char = ensure_codepoint(c)
        with self._operation("add_character"):
            self._insert_run([char])
        return True

    def insert(self, text: str | bytes) -> bool:
        if not text:
            return False
        try:
            run = list(coerce_text(text))
        except CodepointError as exc:
            telemetry.record_event(
                "text_input.decode_failed",
                level="warning",
                data={"client_id": self._client_id, "reason": str(exc)},
                logger_name=self._logger_name,
            )
            raise
        with self._operation("insert") as handle:
            handle.add_metadata("length", len(run))
            self._insert_run(run)
        return True

    def backspace(self) -> bool:
        with self._operation("backspace"):
            if self._selection.is_active:
                self.delete_selected()
                return True
            position = self._selection.base
            if position > 0:
                del self._text[position - 1]
                self._selection.collapse(position - 1)
                return True
            return False

    def delete(self) -> bool:
        with self._operation("delete"):
            if self._selection.is_active:
                self.delete_selected()
                return True
            position = self._selection.base
            if position < len(self._text):
                del self._text[position]
                self._selection.collapse(position)
                return True
            return False

    def cut(self) -> str:
        if not self._selection.is_active:
            return ""
        with self._operation("cut"):
            cut_text = self.get_selected()
            self.delete_selected()
        return cut_text

    def select_all(self) -> bool:
        if not self._text:
            return False
        with self._operation("select_all"):
            self._selection.select(0, len(self._text))
        return True

    def move_cursor_to_beginning(self) -> None:
        with self._operation("move_cursor_to_beginning"):
            self._selection.collapse(0)

    def move_cursor_to_end(self) -> None:
        with self._operation("move_cursor_to_end"):
            self._selection.collapse(len(self._text))

    def move_cursor_forward(self) -> bool:
        selection = self._selection
        # An active selection collapses to its extent without moving further.
        if selection.is_active:
            selection.collapse(selection.extent)
            return True
        if selection.extent < len(self._text):
            selection.collapse(selection.extent + 1)
            return True
        return False

    def move_cursor_back(self) -> bool:
        selection = self._selection
        if selection.is_active:
            selection.collapse(selection.base)
            return True
        if selection.base > 0:
            selection.collapse(selection.base - 1)
            return True
        return False

    def move_select_forward(self) -> bool:
        selection = self._selection
        # Dragging the base end forward shrinks the selection from the front.
        if selection.is_active and selection.cursor == selection.base:
            selection.base += 1
            selection.cursor = selection.base
            return True
        if selection.extent < len(self._text):
            selection.extent += 1
            selection.cursor = selection.extent
            return True
        return False

    def move_select_back(self) -> bool:
        selection = self._selection
        if selection.is_active and selection.cursor == selection.extent:
            selection.extent -= 1
            selection.cursor = selection.extent
            return True
        if selection.base > 0:
            selection.base -= 1
            selection.cursor = selection.base
            return True
        return False

    def editing_state(self) -> EditingState:
        return EditingState(
            text=self.text,
            selection_base=self._selection.base,
            selection_extent=self._selection.extent,
        )

    def get_state(self) -> List[Any]:
        """Return ``[client_id, payload]`` in the host's editing-state schema."""

        return [self._client_id, self.editing_state().to_payload()]

    def _reject_state(self, base: int, extent: int, *, reason: str) -> None:
        telemetry.record_event(
            "text_input.state_rejected",
            level="warning",
            data={
                "client_id": self._client_id,
                "base": base,
                "extent": extent,
                "reason": reason,
            },
            logger_name=self._logger_name,
        )

    def _insert_run(self, run: List[str]) -> None:
        if self._selection.is_active:
            self.delete_selected()
        position = self._selection.extent
        self._text[position:position] = run
        self._selection.collapse(position + len(run))

    @contextmanager
    def _operation(self, label: str) -> Iterator[telemetry.SpanHandle]:
        with telemetry.span(
            f"text_input::{label}",
            logger_name=self._logger_name,
            component="text_input",
            metadata={"client_id": self._client_id},
        ) as handle:
            yield handle

    def __repr__(self) -> str:
        return (
            f"TextInputModel(client_id={self._client_id!r}, text={self.text!r}, "
            f"base={self._selection.base}, extent={self._selection.extent}, "
            f"cursor={self._selection.cursor})"
        )


__all__ = ["TextInputModel"]
