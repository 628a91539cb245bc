"""Textual-facing controller that feeds key events into a TextInputSession."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from text_input_engine.actions import ActionResult
from text_input_engine.model import EditingState
from text_input_engine.session import KeyInput, TextInputSession

_KEY_ALIASES = {
    "escape": "ESC",
    "return": "ENTER",
    "ctrl+h": "BACKSPACE",
}

_RELAYED_EVENTS = ("state.update", "input.action", "clipboard.cut", "clipboard.copy")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_state: Callable[[EditingState], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_textual_key(
    key: str, *, character: Optional[str] = None
) -> KeyInput:
    """Turn a Textual key name (``"shift+left"``, ``"a"``) into a KeyInput."""

    key = _KEY_ALIASES.get(key, key)
    modifiers: tuple[str, ...] = ()
    name = key
    if "+" in key and key != "+":
        *mods, name = key.split("+")
        modifiers = tuple(mods)
    text = character if character and character.isprintable() else None
    return KeyInput(key=_KEY_ALIASES.get(name, name), modifiers=modifiers, text=text)


class TextualInputAdapter:
    """Bridges a session's bus events to a Textual-friendly surface."""

    def __init__(self, session: TextInputSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        for event in _RELAYED_EVENTS:
            session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self._refresh_state()

    def handle_textual_key(
        self,
        key: str,
        *,
        character: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ActionResult:
        key_input = normalize_textual_key(key, character=character)
        extra = tuple(str(mod).lower() for mod in modifiers)
        if extra:
            key_input.modifiers = key_input.modifiers + extra
        self.hooks.log(f"key -> {key_input.token} text={key_input.text!r}")
        result = self.session.handle_key(key_input)
        self.hooks.update_status(result.message or result.status)
        self.hooks.log(
            f"result <- changed={result.changed} status={result.status} "
            f"state={self.session.state()!r}"
        )
        return result

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.handle_event(name, payload)
        if name == "state.update":
            self._refresh_state()

    def _refresh_state(self) -> None:
        self.hooks.update_state(self.session.model.editing_state())


__all__ = ["TextualInputAdapter", "TextualUIHooks", "normalize_textual_key"]
