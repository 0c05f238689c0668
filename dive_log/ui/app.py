"""Textual TUI application for the dive form.

The app is a thin shell: it turns Textual key events into key presses for the
session controller and redraws the whole form after every key.
"""
from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from ..commands import KeyPress
from ..navigation import SessionOutcome
from .controllers import FormSessionController
from .keys import NAVIGATION_KEYS

logger = logging.getLogger(__name__)


class DiveLogApp(App[SessionOutcome | None]):
    """Main Textual application for dive-log."""

    TITLE = "dive-log"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        align: left top;
    }

    #form {
        width: auto;
        padding: 1 2;
    }
    """

    # Navigation keys must win over Textual's own focus and quit bindings.
    BINDINGS = [
        Binding(key, f"navigate('{key}')", kind.value, show=False, priority=True)
        for key, kind in NAVIGATION_KEYS.items()
    ]

    def __init__(self, controller: FormSessionController | None = None):
        super().__init__()
        self.controller = controller or FormSessionController()
        self.last_frame = ""

    def compose(self) -> ComposeResult:
        yield Static(id="form")

    def on_mount(self) -> None:
        self._redraw()

    def _redraw(self) -> None:
        self.last_frame = self.controller.render()
        form = self.query_one("#form", Static)
        form.update(Text(self.last_frame))

    def _handle(self, key: KeyPress) -> None:
        outcome = self.controller.handle_key(key)
        if outcome is not None:
            logger.debug("Session finished: %s", outcome.kind.value)
            self.exit(outcome)
            return
        self._redraw()

    def action_navigate(self, key: str) -> None:
        """Handle a navigation key bound in BINDINGS."""
        self._handle(KeyPress(key))

    def on_key(self, event: events.Key) -> None:
        """Forward every other key to the focused field's editor."""
        event.prevent_default().stop()
        self._handle(KeyPress(event.key, event.character))
