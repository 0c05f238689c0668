"""UI-agnostic controllers for the dive form frontends.

These components hold the session state without depending on Textual, so
they can be unit tested and driven by the headless runner as well as the TUI.
"""

from .form_session import FormSessionController

__all__ = [
    "FormSessionController",
]
