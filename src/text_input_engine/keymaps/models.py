"""Dataclasses describing key strokes, bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def _normalize_key(key: str) -> str:
    # Named keys are case-insensitive; printable keys keep their case.
    stripped = key.strip() if len(key) > 1 else key
    return stripped.upper() if len(stripped) > 1 else stripped


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press, e.g. ``shift+LEFT`` or ``ctrl+A``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        key = _normalize_key(self.key)
        modifiers = _normalize_modifiers(self.modifiers)
        if modifiers and len(key) == 1:
            key = key.upper()
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "modifiers", modifiers)

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"ctrl+shift+LEFT"``-style tokens; a bare ``+`` is a key."""

        if not token:
            raise ValueError("token cannot be empty")
        if token == "+" or "+" not in token:
            return cls(token)
        *modifiers, key = token.split("+")
        if not key:
            # "ctrl++" binds the plus key itself.
            modifiers = modifiers[:-1]
            key = "+"
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke with an action."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
]
