"""Per-client input sessions."""

from .session import STATE_UPDATE_EVENT, KeyInput, TextInputSession

__all__ = ["KeyInput", "STATE_UPDATE_EVENT", "TextInputSession"]
