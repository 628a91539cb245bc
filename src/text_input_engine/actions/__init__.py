"""Editing and navigation verbs bound to keys."""

from .base import ActionContext, ActionResult, SessionBus
from .editing import (
    backspace,
    copy_selection,
    cut_selection,
    delete_forward,
    paste,
    select_all,
    submit,
)
from .navigation import (
    move_back,
    move_forward,
    move_to_beginning,
    move_to_end,
    select_back,
    select_forward,
)

__all__ = [
    "ActionContext",
    "ActionResult",
    "SessionBus",
    "backspace",
    "copy_selection",
    "cut_selection",
    "delete_forward",
    "paste",
    "select_all",
    "submit",
    "move_back",
    "move_forward",
    "move_to_beginning",
    "move_to_end",
    "select_back",
    "select_forward",
]
