"""Caret movement and directional selection extension."""

from __future__ import annotations

from .base import ActionContext, ActionResult


def move_forward(context: ActionContext, match) -> ActionResult:
    del match
    changed = context.model.move_cursor_forward()
    return ActionResult(changed=changed, status="move" if changed else "noop")


def move_back(context: ActionContext, match) -> ActionResult:
    del match
    changed = context.model.move_cursor_back()
    return ActionResult(changed=changed, status="move" if changed else "noop")


def select_forward(context: ActionContext, match) -> ActionResult:
    del match
    changed = context.model.move_select_forward()
    return ActionResult(changed=changed, status="select" if changed else "noop")


def select_back(context: ActionContext, match) -> ActionResult:
    del match
    changed = context.model.move_select_back()
    return ActionResult(changed=changed, status="select" if changed else "noop")


def move_to_beginning(context: ActionContext, match) -> ActionResult:
    del match
    context.model.move_cursor_to_beginning()
    return ActionResult(changed=True, status="move")


def move_to_end(context: ActionContext, match) -> ActionResult:
    del match
    context.model.move_cursor_to_end()
    return ActionResult(changed=True, status="move")


__all__ = [
    "move_back",
    "move_forward",
    "move_to_beginning",
    "move_to_end",
    "select_back",
    "select_forward",
]
