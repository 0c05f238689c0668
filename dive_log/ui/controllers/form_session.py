"""Form session state holder (UI-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...catalog import FieldCatalog, dive_catalog
from ...commands import KeyPress
from ...navigation import Editor, SessionOutcome, dispatch
from ...state import FormState, initial_state
from ..keys import parse_key
from ..text_field import apply_edit
from ..view import render_form


@dataclass(slots=True)
class FormSessionController:
    """Owns the current FormState and feeds key presses through the state machine.

    Once the session has an outcome, further keys are ignored.
    """

    catalog: FieldCatalog = field(default_factory=dive_catalog)
    editor: Editor = apply_edit
    state: FormState = field(init=False)
    outcome: SessionOutcome | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.state = initial_state(self.catalog)

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    def handle_key(self, key: KeyPress) -> SessionOutcome | None:
        if self.outcome is not None:
            return self.outcome
        transition = dispatch(self.state, parse_key(key), self.catalog, self.editor)
        self.state = transition.state
        self.outcome = transition.outcome
        return self.outcome

    def render(self) -> str:
        return render_form(self.state, self.catalog)
