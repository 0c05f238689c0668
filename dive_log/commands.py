"""Navigation commands understood by the form state machine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommandKind(str, Enum):
    NEXT_PAGE = "next_page"
    PREVIOUS_PAGE = "previous_page"
    CONFIRM = "confirm"
    FOCUS_NEXT = "focus_next"
    FOCUS_PREVIOUS = "focus_previous"
    CANCEL = "cancel"
    EDIT = "edit"


@dataclass(frozen=True, slots=True)
class KeyPress:
    """A key event independent of the terminal toolkit.

    ``key`` uses Textual's key names (``"tab"``, ``"shift+tab"``,
    ``"backspace"``, ``"a"``); ``character`` is the printable character the
    key produces, if any.
    """

    key: str
    character: str | None = None

    @property
    def is_printable(self) -> bool:
        char = self.character
        return char is not None and len(char) == 1 and char.isprintable()


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    key: KeyPress | None = None
