"""Helpers for running a form session with the TUI or headless."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..catalog import FieldCatalog
from ..commands import KeyPress
from ..navigation import OutcomeKind, SessionOutcome
from .controllers import FormSessionController
from .display import DisplayBackend, HeadlessDisplayBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunUiResult:
    """Result of a UI run."""

    outcome: SessionOutcome
    exit_code: int


def _make_controller(catalog: FieldCatalog | None) -> FormSessionController:
    if catalog is None:
        return FormSessionController()
    return FormSessionController(catalog=catalog)


def run_tui(*, catalog: FieldCatalog | None = None, mouse: bool = False) -> RunUiResult:
    """Run the form in the Textual TUI until it is cancelled or submitted."""
    from .app import DiveLogApp

    app = DiveLogApp(_make_controller(catalog))
    outcome = app.run(mouse=mouse)
    if outcome is None:
        # Closed through Textual itself rather than a form command.
        outcome = SessionOutcome(OutcomeKind.CANCELLED)
    return RunUiResult(outcome=outcome, exit_code=0)


def run_headless(
    keys: Iterable[KeyPress],
    *,
    catalog: FieldCatalog | None = None,
    backends: Sequence[DisplayBackend] | None = None,
) -> RunUiResult:
    """Replay ``keys`` against a fresh form, rendering a frame per key.

    Keys after the session ends are ignored. A script that never cancels or
    submits yields an INCOMPLETE outcome and exit code 1.
    """
    controller = _make_controller(catalog)
    if backends is None:
        backends = [HeadlessDisplayBackend(stream=sys.stderr)]

    for backend in backends:
        backend.start()
    try:
        for backend in backends:
            backend.display_frame(controller.render())
        for count, key in enumerate(keys, start=1):
            controller.handle_key(key)
            for backend in backends:
                backend.display_frame(controller.render())
            if controller.finished:
                logger.debug("Session finished after %d keys", count)
                break

        outcome = controller.outcome or SessionOutcome(OutcomeKind.INCOMPLETE)
        for backend in backends:
            backend.display_outcome(outcome)
    finally:
        for backend in backends:
            backend.stop()

    exit_code = 1 if outcome.kind is OutcomeKind.INCOMPLETE else 0
    return RunUiResult(outcome=outcome, exit_code=exit_code)
