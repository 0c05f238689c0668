"""dive-log: a paginated terminal form for logging scuba dives.

Main entry points:
- dive-log CLI: fill in the form in a Textual TUI, or replay a key script
- navigation module: pure state transitions behind both frontends
"""
from __future__ import annotations

from .catalog import DIVE_FIELDS, DIVE_PAGE_SIZES, FieldCatalog, FieldRole, FieldSpec, dive_catalog
from .commands import Command, CommandKind, KeyPress
from .errors import FormError, GasParseError, PageValidationError
from .gas import calculate_gas_remaining, live_gas_remaining
from .navigation import OutcomeKind, SessionOutcome, Transition, dispatch
from .state import Field, FormState, initial_state

__all__ = [
    # Catalog
    "DIVE_FIELDS",
    "DIVE_PAGE_SIZES",
    "FieldCatalog",
    "FieldRole",
    "FieldSpec",
    "dive_catalog",
    # Commands
    "Command",
    "CommandKind",
    "KeyPress",
    # Errors
    "FormError",
    "GasParseError",
    "PageValidationError",
    # Gas
    "calculate_gas_remaining",
    "live_gas_remaining",
    # State machine
    "Field",
    "FormState",
    "OutcomeKind",
    "SessionOutcome",
    "Transition",
    "dispatch",
    "initial_state",
]
