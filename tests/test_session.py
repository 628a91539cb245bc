from __future__ import annotations

from dataclasses import fields
from typing import Any, List

import pytest

from text_input_engine.actions import ActionResult
from text_input_engine.model import CodepointDecodeError, TextInputError
from text_input_engine.session import KeyInput, TextInputSession


def make_session(
    *, input_type: str = "TextInputType.text", records: List[Any] | None = None
) -> TextInputSession:
    config = {"inputAction": "TextInputAction.done", "inputType": {"name": input_type}}
    sink = records.append if records is not None else None
    return TextInputSession(3, config, on_state=sink)


def type_text(session: TextInputSession, text: str) -> None:
    for char in text:
        session.handle_key(KeyInput(key=char, text=char))


def test_typing_inserts_characters_and_notifies() -> None:
    records: List[Any] = []
    session = make_session(records=records)

    type_text(session, "hi")

    assert session.model.text == "hi"
    assert len(records) == 2
    assert records[-1][0] == 3
    assert records[-1][1]["text"] == "hi"
    assert records[-1][1]["selectionBase"] == 2


def test_noop_key_does_not_notify() -> None:
    records: List[Any] = []
    session = make_session(records=records)

    result = session.handle_key(KeyInput(key="BACKSPACE"))

    assert result.changed is False
    assert records == []


def test_shift_arrows_extend_selection() -> None:
    session = make_session()
    type_text(session, "abc")
    session.handle_key(KeyInput(key="LEFT"))
    session.handle_key(KeyInput(key="LEFT"))

    session.handle_key(KeyInput(key="RIGHT", modifiers=("shift",)))
    session.handle_key(KeyInput(key="RIGHT", modifiers=("shift",)))
    session.handle_key(KeyInput(key="LEFT", modifiers=("shift",)))

    assert session.model.get_selected() == "b"


def test_cut_and_paste_through_clipboard() -> None:
    session = make_session()
    type_text(session, "hello")
    session.handle_key(KeyInput(key="a", modifiers=("ctrl",)))

    cut = session.handle_key(KeyInput(key="x", modifiers=("ctrl",)))

    assert cut.changed is True
    assert session.model.text == ""
    assert session.clipboard.get() == "hello"

    session.handle_key(KeyInput(key="v", modifiers=("ctrl",)))
    session.handle_key(KeyInput(key="v", modifiers=("ctrl",)))

    assert session.model.text == "hellohello"


def test_copy_does_not_change_buffer() -> None:
    records: List[Any] = []
    session = make_session(records=records)
    type_text(session, "hey")
    session.handle_key(KeyInput(key="LEFT", modifiers=("shift",)))
    seen = len(records)

    result = session.handle_key(KeyInput(key="c", modifiers=("ctrl",)))

    assert result.changed is False
    assert session.clipboard.get() == "y"
    assert len(records) == seen


def test_paste_with_empty_clipboard_is_noop() -> None:
    session = make_session()

    result = session.handle_key(KeyInput(key="v", modifiers=("ctrl",)))

    assert result.changed is False
    assert result.status == "empty_clipboard"


def test_enter_on_single_line_fires_input_action() -> None:
    session = make_session()
    events: List[Any] = []
    session.bus.subscribe("input.action", events.append)

    result = session.handle_key(KeyInput(key="ENTER"))

    assert result.changed is False
    assert events == [{"client_id": 3, "action": "TextInputAction.done"}]
    assert session.model.text == ""


def test_enter_on_multiline_inserts_newline() -> None:
    session = make_session(input_type="TextInputType.multiline")
    type_text(session, "a")

    session.handle_key(KeyInput(key="ENTER"))

    assert session.model.text == "a\n"


def test_control_modified_text_is_not_inserted() -> None:
    session = make_session()

    result = session.handle_key(KeyInput(key="q", modifiers=("ctrl",), text="q"))

    assert result.status == "unhandled"
    assert session.model.text == ""


def test_commit_text_inserts_run() -> None:
    session = make_session()

    result = session.commit_text("😀ok".encode("utf-8"))

    assert result.changed is True
    assert session.model.text == "😀ok"
    assert session.model.selection_extent == 3


def test_commit_text_rejects_malformed_bytes() -> None:
    session = make_session()

    with pytest.raises(CodepointDecodeError):
        session.commit_text(b"\xe2\x82")


def test_apply_host_state() -> None:
    records: List[Any] = []
    session = make_session(records=records)

    accepted = session.apply_host_state(
        {"text": "hello", "selectionBase": 1, "selectionExtent": 4}
    )

    assert accepted is True
    assert session.model.get_selected() == "ell"
    assert records[-1] == session.state()


def test_apply_host_state_rejects_bad_selection() -> None:
    records: List[Any] = []
    session = make_session(records=records)

    accepted = session.apply_host_state(
        {"text": "hi", "selectionBase": 2, "selectionExtent": 1}
    )

    assert accepted is False
    assert records == []


def test_apply_host_state_requires_fields() -> None:
    session = make_session()

    with pytest.raises(TextInputError):
        session.apply_host_state({"text": "hi"})


def test_state_update_event_on_bus() -> None:
    session = make_session()
    updates: List[Any] = []
    session.bus.subscribe("state.update", updates.append)

    type_text(session, "x")

    assert updates == [session.state()]


def test_apply_host_state_rejects_non_scalar_text() -> None:
    records: List[Any] = []
    session = make_session(records=records)
    updates: List[Any] = []
    session.bus.subscribe("state.update", updates.append)

    accepted = session.apply_host_state(
        {"text": "a\ud800", "selectionBase": 0, "selectionExtent": 0}
    )

    assert accepted is False
    assert updates == []
    assert records == []
    assert session.model.text == ""


def test_action_result_fields() -> None:
    assert [field.name for field in fields(ActionResult)] == [
        "changed",
        "status",
        "message",
    ]
    assert ActionResult(changed=True) == ActionResult(True, "ok", None)
