"""Textual adapter surface (controller + optional demo app)."""

from .controller import TextualInputAdapter, TextualUIHooks, normalize_textual_key

__all__ = ["TextualInputAdapter", "TextualUIHooks", "normalize_textual_key"]
