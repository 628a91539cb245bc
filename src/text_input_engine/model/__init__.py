"""Text input state: codepoint buffer, selection, codec and host record."""

from .clipboard import Clipboard
from .codec import decode_utf8, ensure_codepoint, ensure_text
from .config import MULTILINE_INPUT_TYPE, TextInputConfig
from .state import SelectionState
from .sync import (
    AFFINITY_DOWNSTREAM,
    NOT_COMPOSING,
    CodepointDecodeError,
    CodepointError,
    ConfigError,
    EditingState,
    EditingStateSink,
    TextInputError,
)
from .text_model import TextInputModel

__all__ = [
    "AFFINITY_DOWNSTREAM",
    "NOT_COMPOSING",
    "MULTILINE_INPUT_TYPE",
    "Clipboard",
    "CodepointDecodeError",
    "CodepointError",
    "ConfigError",
    "EditingState",
    "EditingStateSink",
    "SelectionState",
    "TextInputConfig",
    "TextInputError",
    "TextInputModel",
    "decode_utf8",
    "ensure_codepoint",
    "ensure_text",
]
