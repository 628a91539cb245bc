"""Actions that change the text: deletion, clipboard, select-all and submit."""

from __future__ import annotations

from .base import ActionContext, ActionResult


def _outcome(changed: bool, status: str) -> ActionResult:
    return ActionResult(changed=changed, status=status if changed else "noop")


def backspace(context: ActionContext, match) -> ActionResult:
    del match
    return _outcome(context.model.backspace(), "backspace")


def delete_forward(context: ActionContext, match) -> ActionResult:
    del match
    return _outcome(context.model.delete(), "delete")


def select_all(context: ActionContext, match) -> ActionResult:
    del match
    return _outcome(context.model.select_all(), "select_all")


def cut_selection(context: ActionContext, match) -> ActionResult:
    del match
    text = context.model.cut()
    if not text:
        return ActionResult(changed=False, status="no_selection")
    context.clipboard.set(text)
    context.bus.emit("clipboard.cut", text)
    return ActionResult(changed=True, status="cut", message=text)


def copy_selection(context: ActionContext, match) -> ActionResult:
    del match
    text = context.model.get_selected()
    if not text:
        return ActionResult(changed=False, status="no_selection")
    context.clipboard.set(text)
    context.bus.emit("clipboard.copy", text)
    return ActionResult(changed=False, status="copy", message=text)


def paste(context: ActionContext, match) -> ActionResult:
    del match
    text = context.clipboard.get()
    if not context.model.insert(text):
        return ActionResult(changed=False, status="empty_clipboard")
    return ActionResult(changed=True, status="paste")


def submit(context: ActionContext, match) -> ActionResult:
    """Newline for multiline inputs; otherwise fire the configured action."""

    del match
    model = context.model
    if model.config.is_multiline:
        model.add_character("\n")
        return ActionResult(changed=True, status="newline")
    context.bus.emit(
        "input.action", {"client_id": model.client_id, "action": model.input_action}
    )
    return ActionResult(changed=False, status="input_action", message=model.input_action)


__all__ = [
    "backspace",
    "copy_selection",
    "cut_selection",
    "delete_forward",
    "paste",
    "select_all",
    "submit",
]
