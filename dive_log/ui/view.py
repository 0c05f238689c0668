"""Render the form as a single text block."""
from __future__ import annotations

from ..catalog import FieldCatalog, FieldRole
from ..gas import live_gas_remaining
from ..state import FormState
from .text_field import render_field

HEADER = "Enter your dive details"
FOOTER = "(Press Enter to submit, Tab to switch fields, Esc to quit)"


def render_form(state: FormState, catalog: FieldCatalog) -> str:
    lines = [HEADER, ""]
    lines.extend(render_field(field) for field in state.page_fields(catalog))
    lines.extend(["", f"Page {state.current_page + 1} of {catalog.page_count}"])

    remaining = live_gas_remaining(
        state.value_of(catalog, FieldRole.GAS_START),
        state.value_of(catalog, FieldRole.GAS_END),
    )
    if remaining is not None:
        lines.extend(["", f"Gas remaining: {remaining}"])
    if state.error is not None:
        lines.extend(["", f"Error: {state.error}"])

    lines.extend(["", FOOTER])
    return "\n".join(lines)
