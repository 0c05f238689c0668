from __future__ import annotations

from dataclasses import replace

from dive_log.errors import GasParseError
from dive_log.state import apply_focus
from dive_log.ui.view import FOOTER, HEADER, render_form


def test_render_first_page(catalog, fresh_state) -> None:
    text = render_form(fresh_state, catalog)
    lines = text.splitlines()

    assert lines[0] == HEADER
    assert lines[2] == "> █Name your dive"
    assert lines[3] == "> Where did you dive?"
    assert lines[4] == "> When did you dive?"
    assert "Page 1 of 3" in lines
    assert lines[-1] == FOOTER
    assert "Gas remaining" not in text
    assert "Error" not in text


def test_render_shows_only_current_page_fields(catalog, fresh_state) -> None:
    state = apply_focus(replace(fresh_state, current_page=2), catalog)
    text = render_form(state, catalog)
    assert "Enter your start gas" in text
    assert "Name your dive" not in text
    assert "Page 3 of 3" in text


def test_render_live_gas_remaining_when_computable(catalog, fresh_state) -> None:
    state = fresh_state.with_value(11, "200").with_value(12, "70")
    assert "Gas remaining: 130" in render_form(state, catalog)


def test_render_hides_gas_line_when_not_computable(catalog, fresh_state) -> None:
    state = fresh_state.with_value(11, "200").with_value(12, "lots")
    assert "Gas remaining" not in render_form(state, catalog)
    assert render_form(state, catalog) == render_form(state, catalog)


def test_render_shows_pending_error(catalog, fresh_state) -> None:
    state = replace(fresh_state, error=GasParseError("abc"))
    assert "Error: invalid gas value 'abc'" in render_form(state, catalog)
