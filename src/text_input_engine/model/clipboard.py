"""Clipboard storage for cut/copy/paste gestures."""

from __future__ import annotations


class Clipboard:
    """Holds the text most recently cut or copied within a session."""

    def __init__(self) -> None:
        self._text = ""

    def get(self) -> str:
        return self._text

    def set(self, text: str) -> None:
        self._text = text
