"""Executable Textual app that hosts one text input session."""

from __future__ import annotations

import argparse
import json
import os
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use text_input_engine.adapters.textual.app"
    ) from exc

from text_input_engine.model import EditingState, TextInputConfig
from text_input_engine.runtime import telemetry
from text_input_engine.session import TextInputSession

from .controller import TextualInputAdapter, TextualUIHooks

CARET = "│"


def render_editing_state(state: EditingState) -> str:
    """Plain-text rendering: ``[...]`` around a selection, a bar for the caret."""

    start = min(state.selection_base, state.selection_extent)
    end = max(state.selection_base, state.selection_extent)
    text = state.text
    if start == end:
        return f"{text[:start]}{CARET}{text[start:]}"
    return f"{text[:start]}[{text[start:end]}]{text[end:]}"


class TextInputApp(App[None]):
    """Minimal Textual UI that edits a single buffer through the engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
	}

	#state-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, client_id: int = 1, config: TextInputConfig) -> None:
        super().__init__()
        self.session = TextInputSession(client_id, config)
        self.adapter: TextualInputAdapter | None = None
        self._buffer_widget: Static | None = None
        self._state_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._buffer_widget = Static("", id="buffer-view", markup=False)
        self._state_widget = Static("", id="state-line", markup=False)
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._buffer_widget
        yield self._state_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_state=self._update_state,
            update_status=self._update_status,
            handle_event=self._handle_event,
        )
        self.adapter = TextualInputAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None or event.key == "ctrl+q":
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def _update_state(self, state: EditingState) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_editing_state(state))
        if self._state_widget:
            record = json.dumps(self.session.state(), ensure_ascii=False)
            self._state_widget.update(record)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "input.action":
            self._update_status(f"{name}: {payload}")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the text input Textual demo.")
    parser.add_argument(
        "--client-id",
        type=int,
        default=int(os.environ.get("TEXT_INPUT_ENGINE_CLIENT_ID", "1")),
        help="Client identifier reported in every state record (default: 1)",
    )
    parser.add_argument(
        "--input-action",
        default=os.environ.get(
            "TEXT_INPUT_ENGINE_INPUT_ACTION", "TextInputAction.done"
        ),
        help="Input action fired when ENTER is pressed on a single-line input",
    )
    parser.add_argument(
        "--input-type",
        default=os.environ.get("TEXT_INPUT_ENGINE_INPUT_TYPE", "TextInputType.text"),
        help="Input type name; TextInputType.multiline makes ENTER insert newlines",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="telelog preset to activate before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    config = TextInputConfig.from_mapping(
        {"inputAction": args.input_action, "inputType": {"name": args.input_type}}
    )
    TextInputApp(client_id=args.client_id, config=config).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
