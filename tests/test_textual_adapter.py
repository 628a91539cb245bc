from __future__ import annotations

from typing import Any, List

from text_input_engine.adapters.textual import (
    TextualInputAdapter,
    TextualUIHooks,
    normalize_textual_key,
)
from text_input_engine.model import EditingState
from text_input_engine.session import TextInputSession


def make_session() -> TextInputSession:
    return TextInputSession(
        1, {"inputAction": "TextInputAction.search", "inputType": {"name": "text"}}
    )


def test_normalize_textual_key() -> None:
    shifted = normalize_textual_key("shift+left")
    assert shifted.token == "shift+LEFT"
    assert shifted.text is None

    letter = normalize_textual_key("a", character="a")
    assert letter.token == "a"
    assert letter.text == "a"

    assert normalize_textual_key("ctrl+h").token == "BACKSPACE"
    assert normalize_textual_key("ctrl+a", character="\x01").text is None


def test_adapter_updates_state_and_status() -> None:
    session = make_session()
    states: List[EditingState] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(update_state=states.append, update_status=statuses.append)
    adapter = TextualInputAdapter(session, hooks)

    adapter.handle_textual_key("h", character="h")
    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("backspace")

    assert states[0].text == ""
    assert states[-1].text == "h"
    assert statuses == ["insert", "insert", "backspace"]


def test_adapter_relays_input_action() -> None:
    session = make_session()
    events: List[tuple[str, Any]] = []
    hooks = TextualUIHooks(
        update_state=lambda state: None,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualInputAdapter(session, hooks)

    result = adapter.handle_textual_key("enter")

    assert result.message == "TextInputAction.search"
    assert ("input.action", {"client_id": 1, "action": "TextInputAction.search"}) in events


def test_adapter_selection_keys() -> None:
    session = make_session()
    hooks = TextualUIHooks(update_state=lambda state: None)
    adapter = TextualInputAdapter(session, hooks)
    for char in "abc":
        adapter.handle_textual_key(char, character=char)

    adapter.handle_textual_key("shift+left")
    adapter.handle_textual_key("shift+left")
    adapter.handle_textual_key("ctrl+x", character="\x18")

    assert session.model.text == "a"
    assert session.clipboard.get() == "bc"
