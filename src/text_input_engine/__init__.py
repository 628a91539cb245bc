"""Codepoint-accurate text input state for soft keyboard pipelines."""

__all__ = [
    "actions",
    "adapters",
    "keymaps",
    "model",
    "runtime",
    "session",
]

__version__ = "0.1.0"
