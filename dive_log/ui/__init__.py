"""UI components for the dive-log CLI."""
from .display import DisplayBackend, HeadlessDisplayBackend, RichDisplayBackend
from .keys import NAVIGATION_KEYS, parse_key, parse_script
from .runner import RunUiResult, run_headless, run_tui
from .view import render_form

__all__ = [
    # Display backends
    "DisplayBackend",
    "HeadlessDisplayBackend",
    "RichDisplayBackend",
    # Key parsing
    "NAVIGATION_KEYS",
    "parse_key",
    "parse_script",
    # Runners
    "RunUiResult",
    "run_headless",
    "run_tui",
    # Rendering
    "render_form",
]
