"""Key parser: the one place where raw key names become form commands.

Frontends hand every key event to :func:`parse_key`; the navigation state
machine never looks at key names itself.
"""
from __future__ import annotations

from typing import Iterable

from ..commands import Command, CommandKind, KeyPress

NAVIGATION_KEYS: dict[str, CommandKind] = {
    "right": CommandKind.NEXT_PAGE,
    "left": CommandKind.PREVIOUS_PAGE,
    "enter": CommandKind.CONFIRM,
    "tab": CommandKind.FOCUS_NEXT,
    "shift+tab": CommandKind.FOCUS_PREVIOUS,
    "escape": CommandKind.CANCEL,
    "ctrl+c": CommandKind.CANCEL,
    "ctrl+d": CommandKind.CANCEL,
}

# Named keys a headless script may use besides the navigation keys.
EDITING_KEYS: dict[str, str | None] = {
    "backspace": None,
    "ctrl+u": None,
    "ctrl+w": None,
    "space": " ",
}

TYPE_PREFIX = "type "


def parse_key(key: KeyPress) -> Command:
    """Classify a key press; anything unrecognised is an edit."""
    kind = NAVIGATION_KEYS.get(key.key)
    if kind is None:
        return Command(CommandKind.EDIT, key)
    return Command(kind, key)


def key_for_character(char: str) -> KeyPress:
    return KeyPress("space" if char == " " else char, char)


def parse_script(lines: Iterable[str]) -> list[KeyPress]:
    """Parse a headless key script.

    Each line is a key name (``tab``, ``enter``, ``backspace``...) or
    ``type <text>``, which types the text one character at a time. Blank
    lines and ``#`` comments are skipped.
    """
    keys: list[KeyPress] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.lower() == TYPE_PREFIX.strip():
            raise ValueError(f"line {lineno}: 'type' needs text to type")
        if line.lstrip().startswith(TYPE_PREFIX):
            text = line.lstrip()[len(TYPE_PREFIX):]
            keys.extend(key_for_character(char) for char in text)
            continue
        name = stripped.lower()
        if name in NAVIGATION_KEYS:
            keys.append(KeyPress(name))
        elif name in EDITING_KEYS:
            keys.append(KeyPress(name, EDITING_KEYS[name]))
        else:
            raise ValueError(f"line {lineno}: unknown key {stripped!r}")
    return keys
