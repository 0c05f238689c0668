"""Immutable form state threaded through every navigation transition."""
from __future__ import annotations

from dataclasses import dataclass, replace

from .catalog import FieldCatalog, FieldRole, FieldSpec
from .errors import FormError


@dataclass(frozen=True, slots=True)
class Field:
    spec: FieldSpec
    value: str = ""
    focused: bool = False

    @property
    def is_empty(self) -> bool:
        return self.value == ""


@dataclass(frozen=True, slots=True)
class FormState:
    """Current page, focus position, field values and the last error."""

    fields: tuple[Field, ...]
    current_page: int = 0
    focus_index: int = 0
    error: FormError | None = None

    def value_of(self, catalog: FieldCatalog, role: FieldRole) -> str:
        return self.fields[catalog.role_index(role)].value

    def focused_index(self, catalog: FieldCatalog) -> int:
        """Global index of the field at (current_page, focus_index)."""
        return catalog.global_index(self.current_page, self.focus_index)

    def page_fields(self, catalog: FieldCatalog) -> tuple[Field, ...]:
        page = catalog.page(self.current_page)
        return tuple(self.fields[i] for i in page.field_indices)

    def with_value(self, index: int, value: str) -> FormState:
        fields = list(self.fields)
        fields[index] = replace(fields[index], value=value)
        return replace(self, fields=tuple(fields))


def apply_focus(state: FormState, catalog: FieldCatalog) -> FormState:
    """Focus the field at (current_page, focus_index) and blur every other field."""
    target = state.focused_index(catalog)
    fields = tuple(
        field if field.focused == (i == target) else replace(field, focused=i == target)
        for i, field in enumerate(state.fields)
    )
    return replace(state, fields=fields)


def initial_state(catalog: FieldCatalog) -> FormState:
    """Fresh state: first page, first field focused, all values empty."""
    state = FormState(fields=tuple(Field(spec) for spec in catalog.fields))
    return apply_focus(state, catalog)
