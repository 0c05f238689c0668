"""Static catalog of the dive form's fields and their page partition.

The catalog is the only place that knows which fields exist, in what order,
and where the page boundaries fall. Fields that feed the gas calculation are
tagged with a role instead of being looked up by position.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

DEFAULT_FIELD_WIDTH = 40


class FieldRole(str, Enum):
    GAS_START = "gas_start"
    GAS_END = "gas_end"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Descriptor for one editable entry."""

    key: str
    placeholder: str
    width: int = DEFAULT_FIELD_WIDTH
    role: FieldRole | None = None


@dataclass(frozen=True, slots=True)
class Page:
    """A contiguous slice of the field sequence."""

    index: int
    field_indices: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.field_indices)

    @property
    def last_index(self) -> int:
        return len(self.field_indices) - 1


class FieldCatalog:
    """Ordered field descriptors partitioned into pages.

    Page boundaries are fixed at construction. Raises ``ValueError`` when the
    page sizes do not partition the fields exactly, when keys repeat, when a
    field is narrower than two columns, or when a role is attached to more
    than one field.
    """

    def __init__(self, fields: Sequence[FieldSpec], page_sizes: Sequence[int]) -> None:
        if not fields:
            raise ValueError("catalog needs at least one field")
        if not page_sizes or any(size <= 0 for size in page_sizes):
            raise ValueError(f"page sizes must be positive: {list(page_sizes)}")
        if sum(page_sizes) != len(fields):
            raise ValueError(
                f"page sizes {list(page_sizes)} cover {sum(page_sizes)} fields, "
                f"catalog has {len(fields)}"
            )

        seen_keys: set[str] = set()
        roles: dict[FieldRole, int] = {}
        for index, spec in enumerate(fields):
            if spec.key in seen_keys:
                raise ValueError(f"duplicate field key: {spec.key!r}")
            seen_keys.add(spec.key)
            if spec.width < 2:
                raise ValueError(f"field {spec.key!r} is narrower than 2 columns")
            if spec.role is not None:
                if spec.role in roles:
                    raise ValueError(f"role {spec.role.value!r} assigned twice")
                roles[spec.role] = index

        self._fields = tuple(fields)
        self._roles = roles
        pages: list[Page] = []
        start = 0
        for page_index, size in enumerate(page_sizes):
            pages.append(Page(page_index, tuple(range(start, start + size))))
            start += size
        self._pages = tuple(pages)

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self._fields

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._pages

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def page(self, index: int) -> Page:
        return self._pages[index]

    def global_index(self, page: int, focus: int) -> int:
        """Map a (page, focus) position to an index into ``fields``."""
        return self._pages[page].field_indices[focus]

    def role_index(self, role: FieldRole) -> int:
        try:
            return self._roles[role]
        except KeyError:
            raise KeyError(f"no field has role {role.value!r}") from None

    def is_final(self, page: int, focus: int) -> bool:
        """True for the last field of the last page."""
        return page == self.page_count - 1 and focus == self._pages[page].last_index


DIVE_FIELDS: tuple[FieldSpec, ...] = (
    # Title, site and date
    FieldSpec("dive_title", "Name your dive"),
    FieldSpec("dive_site", "Where did you dive?"),
    FieldSpec("dive_date", "When did you dive?"),
    # Conditions, depth and time
    FieldSpec("dive_type", "Enter your dive type e.g. boat"),
    FieldSpec("water_body", "What type of water were you diving in?"),
    FieldSpec("bottom_time", "Enter your bottom time"),
    FieldSpec("max_depth", "Enter your max depth"),
    FieldSpec("surface_temp", "Enter the surface temp"),
    # Gear and gas
    FieldSpec("bottom_temp", "Enter the bottom temp"),
    FieldSpec("weight", "Enter your weight"),
    FieldSpec("suit_type", "Enter your suit type e.g. wetsuit"),
    FieldSpec("start_gas", "Enter your start gas", role=FieldRole.GAS_START),
    FieldSpec("end_gas", "Enter your end gas", role=FieldRole.GAS_END),
)

DIVE_PAGE_SIZES: tuple[int, ...] = (3, 5, 5)


def dive_catalog() -> FieldCatalog:
    """Build the canonical 13-field, three-page dive catalog."""
    return FieldCatalog(DIVE_FIELDS, DIVE_PAGE_SIZES)
