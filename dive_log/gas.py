"""Remaining-gas calculation from the start and end gas readings."""
from __future__ import annotations

import re

from .errors import GasParseError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_reading(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise GasParseError(value)
    return int(value)


def calculate_gas_remaining(start: str, end: str) -> int:
    """Return ``start - end``; raise GasParseError if either is not an integer.

    Negative results are allowed (end reading above the start reading).
    """
    return _parse_reading(start) - _parse_reading(end)


def live_gas_remaining(start: str, end: str) -> int | None:
    """Gas remaining for live display, or ``None`` while not computable."""
    if not start or not end:
        return None
    try:
        return calculate_gas_remaining(start, end)
    except GasParseError:
        return None
