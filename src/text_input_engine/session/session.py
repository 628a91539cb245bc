"""One input session: a model, its key bindings and host notifications."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from text_input_engine.actions import ActionContext, ActionResult, SessionBus
from text_input_engine.keymaps import KeymapRegistry, KeyStroke, load_default_keymaps
from text_input_engine.keymaps.registry import ResolutionMatch
from text_input_engine.model import (
    Clipboard,
    EditingState,
    EditingStateSink,
    TextInputConfig,
    TextInputModel,
)
from text_input_engine.runtime import telemetry

STATE_UPDATE_EVENT = "state.update"


@dataclass(slots=True)
class KeyInput:
    """Normalized key event handed over by a host adapter."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def token(self) -> str:
        return KeyStroke(self.key, self.modifiers).token


def _is_printable(text: str) -> bool:
    return all(unicodedata.category(char)[0] != "C" for char in text)


class TextInputSession:
    """Owns a ``TextInputModel`` for the lifetime of one client session.

    Key events are resolved against the keymap registry first; unbound keys
    carrying printable text are inserted. Whenever the visible state changes
    the session emits ``state.update`` on its bus with the
    ``[client_id, payload]`` record and forwards it to ``on_state``.
    """

    def __init__(
        self,
        client_id: Any,
        config: TextInputConfig | Mapping[str, Any] | None = None,
        *,
        registry: KeymapRegistry | None = None,
        clipboard: Clipboard | None = None,
        bus: SessionBus | None = None,
        on_state: EditingStateSink | None = None,
        logger_name: str | None = None,
    ) -> None:
        self.model = TextInputModel(client_id, config, logger_name=logger_name)
        if registry is None:
            registry = KeymapRegistry(logger_name=logger_name)
            load_default_keymaps(registry)
        self.registry = registry
        self.clipboard = clipboard or Clipboard()
        self.bus = bus or SessionBus()
        self._on_state = on_state
        self._logger_name = logger_name
        self.context = ActionContext(
            model=self.model, clipboard=self.clipboard, bus=self.bus
        )

    @property
    def client_id(self) -> Any:
        return self.model.client_id

    def handle_key(self, key: KeyInput) -> ActionResult:
        match = self.registry.resolve(key.token)
        if match is not None:
            result = self._execute_match(match)
        elif key.text and not _has_command_modifier(key) and _is_printable(key.text):
            result = self._insert_text(key.text)
        else:
            telemetry.record_event(
                "session.unbound_key",
                level="debug",
                data={"client_id": self.client_id, "token": key.token},
                logger_name=self._logger_name,
            )
            result = ActionResult(changed=False, status="unhandled")

        if result.changed:
            self._notify()
        return result

    def commit_text(self, text: str | bytes) -> ActionResult:
        """Insert text committed by an input method, replacing the selection."""

        result = self._insert_text(text)
        if result.changed:
            self._notify()
        return result

    def apply_host_state(self, payload: Mapping[str, Any]) -> bool:
        """Replace text and selection with a host-sent editing state."""

        incoming = EditingState.from_payload(payload)
        accepted = self.model.set_editing_state(
            incoming.selection_base, incoming.selection_extent, incoming.text
        )
        if accepted:
            self._notify()
        return accepted

    def state(self) -> List[Any]:
        return self.model.get_state()

    def _insert_text(self, text: str | bytes) -> ActionResult:
        if len(text) == 1 and isinstance(text, str):
            self.model.add_character(text)
            return ActionResult(changed=True, status="insert")
        changed = self.model.insert(text)
        return ActionResult(changed=changed, status="insert" if changed else "noop")

    def _execute_match(self, match: ResolutionMatch) -> ActionResult:
        with telemetry.span(
            "keymaps::execute",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ActionResult):
            return outcome
        return ActionResult(changed=bool(outcome))

    def _notify(self) -> None:
        record = self.model.get_state()
        self.bus.emit(STATE_UPDATE_EVENT, record)
        if self._on_state is not None:
            self._on_state(record)


def _has_command_modifier(key: KeyInput) -> bool:
    modifiers = {m.lower() for m in key.modifiers}
    return bool(modifiers & {"ctrl", "alt", "meta", "super"})


__all__ = ["KeyInput", "STATE_UPDATE_EVENT", "TextInputSession"]
