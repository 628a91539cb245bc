"""Shared types every action handler receives or returns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from text_input_engine.model import Clipboard, TextInputModel


@dataclass(slots=True)
class ActionResult:
    """Outcome of an action; ``changed`` drives host notification."""

    changed: bool
    status: str = "ok"
    message: Optional[str] = None


class SessionBus:
    """Minimal event bus carrying session signals to host adapters."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ActionContext:
    """Services available to an action while it runs."""

    model: TextInputModel
    clipboard: Clipboard
    bus: SessionBus


__all__ = ["ActionContext", "ActionResult", "SessionBus"]
