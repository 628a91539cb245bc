"""Boundary types exchanged with the host: the editing state record and errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Protocol

COMPOSING_BASE_KEY = "composingBase"
COMPOSING_EXTENT_KEY = "composingExtent"
SELECTION_AFFINITY_KEY = "selectionAffinity"
SELECTION_BASE_KEY = "selectionBase"
SELECTION_EXTENT_KEY = "selectionExtent"
SELECTION_IS_DIRECTIONAL_KEY = "selectionIsDirectional"
TEXT_KEY = "text"

AFFINITY_DOWNSTREAM = "TextAffinity.downstream"
NOT_COMPOSING = -1


class TextInputError(RuntimeError):
    """Base class for failures raised by the text input engine."""


class ConfigError(TextInputError):
    """Raised when a client configuration record is malformed."""


class CodepointError(ValueError):
    """Raised for values that are not a single Unicode scalar value."""


class CodepointDecodeError(CodepointError):
    """Raised when host bytes are not well-formed UTF-8."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


@dataclass(frozen=True, slots=True)
class EditingState:
    """Immutable snapshot of text + selection in the host's schema.

    Composition and directional selection are not modelled, so their fields
    always carry the "not composing" / downstream / ``False`` constants.
    """

    text: str
    selection_base: int
    selection_extent: int
    composing_base: int = NOT_COMPOSING
    composing_extent: int = NOT_COMPOSING
    selection_affinity: str = AFFINITY_DOWNSTREAM
    selection_is_directional: bool = False

    def encoded_text(self) -> bytes:
        return self.text.encode("utf-8")

    def to_payload(self) -> dict[str, Any]:
        return {
            COMPOSING_BASE_KEY: self.composing_base,
            COMPOSING_EXTENT_KEY: self.composing_extent,
            SELECTION_AFFINITY_KEY: self.selection_affinity,
            SELECTION_BASE_KEY: self.selection_base,
            SELECTION_EXTENT_KEY: self.selection_extent,
            SELECTION_IS_DIRECTIONAL_KEY: self.selection_is_directional,
            TEXT_KEY: self.text,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EditingState":
        """Build a state from a host payload; only text and selection are read."""

        try:
            text = payload[TEXT_KEY]
            base = payload[SELECTION_BASE_KEY]
            extent = payload[SELECTION_EXTENT_KEY]
        except KeyError as exc:
            raise TextInputError(f"Editing state missing field {exc}") from exc
        if not isinstance(text, str):
            raise TextInputError("Editing state text must be a string")
        if isinstance(base, bool) or isinstance(extent, bool):
            raise TextInputError("Selection offsets must be integers")
        if not isinstance(base, int) or not isinstance(extent, int):
            raise TextInputError("Selection offsets must be integers")
        return cls(text=text, selection_base=base, selection_extent=extent)


class EditingStateSink(Protocol):
    """Anything that accepts outbound ``[client_id, payload]`` records."""

    def __call__(self, record: List[Any]) -> None:
        ...


__all__ = [
    "AFFINITY_DOWNSTREAM",
    "NOT_COMPOSING",
    "CodepointDecodeError",
    "CodepointError",
    "ConfigError",
    "EditingState",
    "EditingStateSink",
    "TextInputError",
]
