"""Single-line text editing and rendering for one form field."""
from __future__ import annotations

from ..commands import KeyPress
from ..state import Field

PROMPT = "> "
CURSOR = "█"


def _delete_word(value: str) -> str:
    trimmed = value.rstrip()
    cut = trimmed.rfind(" ")
    return trimmed[: cut + 1] if cut >= 0 else ""


def apply_edit(key: KeyPress, value: str) -> str:
    """Return ``value`` after applying one key; unknown keys leave it as is."""
    if key.key == "backspace":
        return value[:-1]
    if key.key == "ctrl+u":
        return ""
    if key.key == "ctrl+w":
        return _delete_word(value)
    if key.is_printable:
        return value + key.character
    return value


def render_field(field: Field) -> str:
    """Prompt, then the value (or placeholder), fitted to the field width.

    A focused field keeps the end of its value and the cursor visible.
    """
    width = field.spec.width
    if field.value:
        if field.focused:
            return PROMPT + field.value[-(width - 1):] + CURSOR
        return PROMPT + field.value[:width]
    if field.focused:
        return PROMPT + CURSOR + field.spec.placeholder[: width - 1]
    return PROMPT + field.spec.placeholder[:width]
