"""
Custom exceptions shared across layers.

NOTE: None of these derive from ValueError, so pydantic validators can raise them without having them wrapped into a ValidationError.
"""

from typing import Any


class HanoiError(Exception):
    """Top-level exception. Catch this one if the specific failure is somebody else's responsibility."""


# --- DOMAIN ERRORS ---
class InvalidDiskError(HanoiError):
    """Disks are sized by a positive integer."""


class OversizedDiskError(HanoiError):
    """Attempted to place a disk on top of a smaller (or equally sized) disk."""

    def __init__(self, message: str, disk: Any = None) -> None:
        super().__init__(message)
        # the rejected disk is handed back to the caller
        self.disk = disk


class PegIndexError(HanoiError):
    """Peg index outside of the pegs available on the board."""


class MissingDiskError(HanoiError):
    """Expected a disk on a peg, but the peg is empty."""


class IllegalMoveError(HanoiError):
    """A player could not complete the move it proposed."""


class SessionStateError(HanoiError):
    """The session is over: no more turns can be played."""


# --- BOUNDARY ERRORS ---
class InvalidRequestError(HanoiError):
    """Request data did not pass validation."""
