"""Built-in bindings for the keys a soft keyboard or host forwards."""

from __future__ import annotations

from typing import Iterable, Optional

from text_input_engine.actions import editing as editing_actions
from text_input_engine.actions import navigation as navigation_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="editing.backspace",
        handler=editing_actions.backspace,
        description="Delete the selection or the codepoint before the caret",
    ),
    ActionRef(
        id="editing.delete",
        handler=editing_actions.delete_forward,
        description="Delete the selection or the codepoint after the caret",
    ),
    ActionRef(
        id="editing.submit",
        handler=editing_actions.submit,
        description="Insert a newline or perform the input action",
    ),
    ActionRef(
        id="editing.select_all",
        handler=editing_actions.select_all,
        description="Select the whole buffer",
    ),
    ActionRef(
        id="editing.cut",
        handler=editing_actions.cut_selection,
        description="Cut the selection to the clipboard",
    ),
    ActionRef(
        id="editing.copy",
        handler=editing_actions.copy_selection,
        description="Copy the selection to the clipboard",
    ),
    ActionRef(
        id="editing.paste",
        handler=editing_actions.paste,
        description="Insert the clipboard contents",
    ),
    ActionRef(
        id="navigation.move_forward",
        handler=navigation_actions.move_forward,
        description="Move the caret forward",
    ),
    ActionRef(
        id="navigation.move_back",
        handler=navigation_actions.move_back,
        description="Move the caret back",
    ),
    ActionRef(
        id="navigation.select_forward",
        handler=navigation_actions.select_forward,
        description="Extend the selection forward",
    ),
    ActionRef(
        id="navigation.select_back",
        handler=navigation_actions.select_back,
        description="Extend the selection back",
    ),
    ActionRef(
        id="navigation.move_to_beginning",
        handler=navigation_actions.move_to_beginning,
        description="Move the caret to the start of the buffer",
    ),
    ActionRef(
        id="navigation.move_to_end",
        handler=navigation_actions.move_to_end,
        description="Move the caret to the end of the buffer",
    ),
)


def _bind(binding_id: str, token: str, action_id: str) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(token), action_id=action_id)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("key.backspace", "BACKSPACE", "editing.backspace"),
    _bind("key.delete", "DELETE", "editing.delete"),
    _bind("key.enter", "ENTER", "editing.submit"),
    _bind("key.select_all", "ctrl+A", "editing.select_all"),
    _bind("key.cut", "ctrl+X", "editing.cut"),
    _bind("key.copy", "ctrl+C", "editing.copy"),
    _bind("key.paste", "ctrl+V", "editing.paste"),
    _bind("key.right", "RIGHT", "navigation.move_forward"),
    _bind("key.left", "LEFT", "navigation.move_back"),
    _bind("key.shift_right", "shift+RIGHT", "navigation.select_forward"),
    _bind("key.shift_left", "shift+LEFT", "navigation.select_back"),
    _bind("key.home", "HOME", "navigation.move_to_beginning"),
    _bind("key.end", "END", "navigation.move_to_end"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    include_actions: Optional[Iterable[str]] = None,
    include_bindings: Optional[Iterable[str]] = None,
) -> None:
    """Register the default actions and bindings, optionally filtered by id."""

    action_filter = set(include_actions) if include_actions is not None else None
    binding_filter = set(include_bindings) if include_bindings is not None else None

    for action in DEFAULT_ACTIONS:
        if action_filter is None or action.id in action_filter:
            registry.register_action(action, replace=True)

    for binding in DEFAULT_BINDINGS:
        if binding_filter is not None and binding.id not in binding_filter:
            continue
        if action_filter is not None and binding.action_id not in action_filter:
            continue
        registry.register_binding(binding, replace=True)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
