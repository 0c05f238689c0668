"""Paginated focus/navigation state machine for the dive form.

Every transition takes the current :class:`FormState` and returns a new one;
nothing here mutates state in place. :func:`dispatch` is the single entry
point used by the frontends: it maps each command kind to exactly one
transition and forwards anything else to the focused field's editor.

Focus is re-applied after every transition that can move it, so exactly one
field in the whole form is focused and it is always the field at
``(current_page, focus_index)``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from .catalog import FieldCatalog, FieldRole
from .commands import Command, CommandKind, KeyPress
from .errors import FormError, GasParseError, PageValidationError
from .gas import calculate_gas_remaining
from .state import FormState, apply_focus

logger = logging.getLogger(__name__)

Editor = Callable[[KeyPress, str], str]
PageTransition = Callable[[FormState, FieldCatalog], FormState]


class OutcomeKind(str, Enum):
    CANCELLED = "cancelled"
    SUBMITTED = "submitted"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True, slots=True)
class SessionOutcome:
    """How a form session ended."""

    kind: OutcomeKind
    gas_remaining: int | None = None
    error: FormError | None = None


@dataclass(frozen=True, slots=True)
class Transition:
    state: FormState
    outcome: SessionOutcome | None = None

    @property
    def finished(self) -> bool:
        return self.outcome is not None


def move_to_next_page(state: FormState, catalog: FieldCatalog) -> FormState:
    """Advance one page if every field on the current page has a value."""
    if state.current_page >= catalog.page_count - 1:
        return state
    page = catalog.page(state.current_page)
    empty = tuple(
        state.fields[i].spec.key for i in page.field_indices if state.fields[i].is_empty
    )
    if empty:
        logger.info("Page %d has empty fields: %s", state.current_page + 1, ", ".join(empty))
        return replace(state, error=PageValidationError(state.current_page, empty))
    return apply_focus(
        replace(state, current_page=state.current_page + 1, focus_index=0, error=None),
        catalog,
    )


def move_to_previous_page(state: FormState, catalog: FieldCatalog) -> FormState:
    """Go back one page without validating.

    The focus index is kept, clamped to the size of the page being entered.
    """
    if state.current_page == 0:
        return state
    page = state.current_page - 1
    focus = min(state.focus_index, catalog.page(page).last_index)
    return apply_focus(replace(state, current_page=page, focus_index=focus), catalog)


def focus_next(state: FormState, catalog: FieldCatalog) -> FormState:
    """Focus the next field, wrapping onto the next page without validation."""
    page = catalog.page(state.current_page)
    if state.focus_index < page.last_index:
        state = replace(state, focus_index=state.focus_index + 1)
    elif state.current_page < catalog.page_count - 1:
        state = replace(state, current_page=state.current_page + 1, focus_index=0)
    return apply_focus(state, catalog)


def focus_previous(state: FormState, catalog: FieldCatalog) -> FormState:
    """Focus the previous field, landing on the last field of the previous page."""
    if state.focus_index > 0:
        state = replace(state, focus_index=state.focus_index - 1)
    elif state.current_page > 0:
        page = state.current_page - 1
        state = replace(state, current_page=page, focus_index=catalog.page(page).last_index)
    return apply_focus(state, catalog)


def submit(state: FormState, catalog: FieldCatalog) -> Transition:
    """Compute the gas remaining and end the session, error or not."""
    start = state.value_of(catalog, FieldRole.GAS_START)
    end = state.value_of(catalog, FieldRole.GAS_END)
    try:
        remaining = calculate_gas_remaining(start, end)
    except GasParseError as exc:
        logger.warning("Submitted with unreadable gas values: %s", exc)
        return Transition(
            replace(state, error=exc),
            SessionOutcome(OutcomeKind.SUBMITTED, error=exc),
        )
    logger.info("Gas remaining: %d", remaining)
    return Transition(state, SessionOutcome(OutcomeKind.SUBMITTED, gas_remaining=remaining))


def advance_focus_or_submit(state: FormState, catalog: FieldCatalog) -> Transition:
    if catalog.is_final(state.current_page, state.focus_index):
        return submit(state, catalog)
    return Transition(focus_next(state, catalog))


def cancel(state: FormState) -> Transition:
    return Transition(state, SessionOutcome(OutcomeKind.CANCELLED))


def delegate_edit(
    state: FormState, catalog: FieldCatalog, key: KeyPress, editor: Editor
) -> FormState:
    """Run the focused field's editor and store the value it returns."""
    index = state.focused_index(catalog)
    current = state.fields[index].value
    updated = editor(key, current)
    if updated == current:
        return state
    return state.with_value(index, updated)


_FOCUS_TRANSITIONS: dict[CommandKind, PageTransition] = {
    CommandKind.NEXT_PAGE: move_to_next_page,
    CommandKind.PREVIOUS_PAGE: move_to_previous_page,
    CommandKind.FOCUS_NEXT: focus_next,
    CommandKind.FOCUS_PREVIOUS: focus_previous,
}


def dispatch(
    state: FormState, command: Command, catalog: FieldCatalog, editor: Editor
) -> Transition:
    """Apply one command to ``state``."""
    logger.debug(
        "%s at page=%d focus=%d", command.kind.value, state.current_page, state.focus_index
    )
    if command.kind is CommandKind.CONFIRM:
        return advance_focus_or_submit(state, catalog)
    if command.kind is CommandKind.CANCEL:
        return cancel(state)
    transition = _FOCUS_TRANSITIONS.get(command.kind)
    if transition is not None:
        return Transition(transition(state, catalog))
    if command.key is None:
        return Transition(state)
    return Transition(delegate_edit(state, catalog, command.key, editor))
