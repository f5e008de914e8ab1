"""Exceptions raised by the combat simulator."""
from __future__ import annotations
from typing import Optional


class SkirmishError(Exception):
    """Base class for simulator errors."""


class MapParseError(SkirmishError, ValueError):
    """Map text is not a rectangular block of known characters."""

    def __init__(self, message: str, row: Optional[int] = None, column: Optional[int] = None):
        self.row = row
        self.column = column
        if row is not None:
            location = f"row {row}" if column is None else f"row {row}, column {column}"
            message = f"{message} ({location})"
        super().__init__(message)


MapError = MapParseError


class CombatAlreadyDecided(SkirmishError):
    """A turn was attempted after the acting unit's enemies were all killed.

    Used by the round loop to stop early; never escapes run_combat.
    """


class StalemateError(SkirmishError):
    """A full round passed in which no unit moved or attacked.

    Nothing can change in later rounds either, so combat would never end.
    """

    def __init__(self, rounds: int):
        self.rounds = rounds
        super().__init__(f"Combat stalled after {rounds} completed rounds")
