"""Shared fixtures for the dive-log test suite."""
import pytest

from dive_log.catalog import FieldCatalog, FieldRole, FieldSpec, dive_catalog
from dive_log.state import initial_state


@pytest.fixture
def catalog() -> FieldCatalog:
    """The canonical 13-field catalog (pages of 3, 5 and 5 fields)."""
    return dive_catalog()


@pytest.fixture
def fresh_state(catalog):
    return initial_state(catalog)


@pytest.fixture
def small_catalog() -> FieldCatalog:
    """A tiny catalog with uneven pages: [a, b, c, start] and [end]."""
    return FieldCatalog(
        [
            FieldSpec("a", "A"),
            FieldSpec("b", "B"),
            FieldSpec("c", "C"),
            FieldSpec("start", "Start", role=FieldRole.GAS_START),
            FieldSpec("end", "End", role=FieldRole.GAS_END),
        ],
        [4, 1],
    )


@pytest.fixture
def anyio_backend() -> str:
    """Textual apps run on asyncio only."""
    return "asyncio"
