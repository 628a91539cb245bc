"""Client configuration captured when an input session starts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .sync import ConfigError

INPUT_ACTION_KEY = "inputAction"
INPUT_TYPE_KEY = "inputType"
INPUT_TYPE_NAME_KEY = "name"

MULTILINE_INPUT_TYPE = "TextInputType.multiline"


def _as_string(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ConfigError(f"'{field_name}' must be a string, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class TextInputConfig:
    """Input action and input type name; passed through, never interpreted
    by the model itself."""

    input_action: str = ""
    input_type: str = ""

    @classmethod
    def from_mapping(cls, config: Optional[Mapping[str, Any]]) -> "TextInputConfig":
        if config is None:
            return cls()
        if not isinstance(config, Mapping):
            raise ConfigError("Client configuration must be a mapping")
        input_action = _as_string(config.get(INPUT_ACTION_KEY), INPUT_ACTION_KEY)
        type_info = config.get(INPUT_TYPE_KEY)
        if type_info is None:
            return cls(input_action=input_action)
        if not isinstance(type_info, Mapping):
            raise ConfigError(f"'{INPUT_TYPE_KEY}' must be a mapping")
        input_type = _as_string(
            type_info.get(INPUT_TYPE_NAME_KEY), f"{INPUT_TYPE_KEY}.{INPUT_TYPE_NAME_KEY}"
        )
        return cls(input_action=input_action, input_type=input_type)

    @property
    def is_multiline(self) -> bool:
        return self.input_type == MULTILINE_INPUT_TYPE


__all__ = ["MULTILINE_INPUT_TYPE", "TextInputConfig"]
