"""
What a session reports back to whoever is watching: one event per turn.

Only PlayerMovedDisk keeps the session going. Every other event ends it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from src.core.exceptions import PegIndexError
from src.core.shared_types import SessionStatus


class PegName(Enum):
    """Peg indices on the board, by name"""

    SOURCE = 0
    MIDDLE = 1
    DESTINATION = 2

    @classmethod
    def from_index(cls, peg_index: int) -> Self:
        # the Board already checks its bounds, so failing here means a bug somewhere upstream
        try:
            return cls(peg_index)
        except ValueError as err:
            raise PegIndexError(f"No peg with index {peg_index}") from err

    def __str__(self) -> str:
        return self.name.capitalize()


# --- SESSION EVENTS ---
@dataclass(frozen=True)
class PlayerMovedDisk:
    from_peg: PegName
    to_peg: PegName


@dataclass(frozen=True)
class PlayerWins:
    """Player is done and all disks are on the destination peg"""


@dataclass(frozen=True)
class PlayerGaveUp:
    """Player declared to be done, but the board is not finished"""


@dataclass(frozen=True)
class PlayerCheated:
    """Player attempted a move that is not allowed"""

    message: str


SessionEvent = PlayerMovedDisk | PlayerWins | PlayerGaveUp | PlayerCheated

EVENT_STATUS: dict[type, SessionStatus] = {
    PlayerMovedDisk: SessionStatus.IN_PROGRESS,
    PlayerWins: SessionStatus.WON,
    PlayerGaveUp: SessionStatus.GAVE_UP,
    PlayerCheated: SessionStatus.CHEATED,
}


def is_terminal(event: SessionEvent) -> bool:
    return not isinstance(event, PlayerMovedDisk)


def event_status(event: SessionEvent) -> SessionStatus:
    """Status of the session right after the event"""
    return EVENT_STATUS[type(event)]


def render_event(index: int, event: SessionEvent) -> str:
    """
    One human-readable line per event
    ----

    examples:
    * "0: PlayerMovedDisk(from=Source, to=Destination)"
    * "7: PlayerWins"
    * "2: PlayerCheated('cannot move from 0 to 1: disk is too big: Disk(2)')"
    """
    kind = type(event).__name__
    if isinstance(event, PlayerMovedDisk):
        return f"{index}: {kind}(from={event.from_peg}, to={event.to_peg})"
    if isinstance(event, PlayerCheated):
        return f"{index}: {kind}({event.message!r})"
    return f"{index}: {kind}"
