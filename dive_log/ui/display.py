"""Display backends for headless form sessions."""
from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from ..navigation import OutcomeKind, SessionOutcome

FRAME_SEPARATOR = "-" * 40


def describe_outcome(outcome: SessionOutcome) -> str:
    if outcome.kind is OutcomeKind.CANCELLED:
        return "Cancelled"
    if outcome.kind is OutcomeKind.INCOMPLETE:
        return "Script ended before the form was submitted"
    if outcome.error is not None:
        return f"Submitted with error: {outcome.error}"
    return f"Submitted, gas remaining: {outcome.gas_remaining}"


class DisplayBackend(ABC):
    """Interface for rendering form frames outside the TUI."""

    def start(self) -> None:  # pragma: no cover - simple default
        return None

    def stop(self) -> None:  # pragma: no cover - simple default
        return None

    @abstractmethod
    def display_frame(self, frame: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def display_outcome(self, outcome: SessionOutcome) -> None:
        raise NotImplementedError


class HeadlessDisplayBackend(DisplayBackend):
    """Plain text renderer: every frame followed by a separator line."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stderr

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.write("\n")
        self.stream.flush()

    def display_frame(self, frame: str) -> None:
        self._write(frame)
        self._write(FRAME_SEPARATOR)

    def display_outcome(self, outcome: SessionOutcome) -> None:
        self._write(describe_outcome(outcome))


class RichDisplayBackend(DisplayBackend):
    """Rich-formatted renderer drawing each frame in a panel.

    When writing to a StringIO buffer, use force_terminal=True to keep the
    ANSI codes for later display in a terminal.
    """

    def __init__(self, stream: TextIO | None = None, force_terminal: bool = False):
        from rich.console import Console

        self.stream = stream or sys.stderr
        self.console = Console(
            file=self.stream,
            force_terminal=force_terminal,
            width=80,
        )

    def display_frame(self, frame: str) -> None:
        from rich.panel import Panel
        from rich.text import Text

        self.console.print(Panel(Text(frame), title="dive-log", expand=False))

    def display_outcome(self, outcome: SessionOutcome) -> None:
        failed = outcome.error is not None or outcome.kind is OutcomeKind.INCOMPLETE
        style = "red" if failed else "green"
        self.console.print(describe_outcome(outcome), style=style, markup=False)
