"""
The Session is the entrypoint into the domain layer for the service layer.
It pairs one player with one board, plays the turns, and translates what the player did into session events.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Self

from src.core.exceptions import HanoiError, SessionStateError
from src.core.models import SessionModel
from src.core.shared_types import SessionStatus
from src.hanoi.board import Board
from src.hanoi.events import (
    PegName,
    PlayerCheated,
    PlayerGaveUp,
    PlayerMovedDisk,
    PlayerWins,
    SessionEvent,
    event_status,
    is_terminal,
)
from src.hanoi.player import Finished, Moved, OptimalPlayer, PlayerAction, PlaysTowers

logger = logging.getLogger(__name__)


@dataclass
class Session:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    player: PlaysTowers
    board: Board
    moves_made: int = field(default=0, init=False)
    final_event: Optional[SessionEvent] = field(default=None, init=False)

    @classmethod
    def with_initial_disks(cls, player: PlaysTowers, num_disks: int) -> Self:
        """Fresh board with all disks on the source peg"""
        return cls(player, Board.with_initial_disks(num_disks))

    @property
    def is_over(self) -> bool:
        return self.final_event is not None

    @property
    def status(self) -> SessionStatus:
        if self.final_event is None:
            return SessionStatus.IN_PROGRESS
        return event_status(self.final_event)

    def next_turn(self) -> SessionEvent:
        """
        Let the player play a single turn
        ----

        * player moved a disk --> PlayerMovedDisk
        * player is finished and so is the board --> PlayerWins
        * player is finished, but the board is not --> PlayerGaveUp
        * player failed to move --> PlayerCheated

        Any event other than PlayerMovedDisk ends the session. Turns requested after that are refused.
        """
        if self.is_over:
            raise SessionStateError(
                f"Session is over ({self.status}). No more turns for {self.player.name}."
            )

        event = self._play_turn()
        if is_terminal(event):
            self._end_session(event)
        else:
            self.moves_made += 1
        return event

    def events(self) -> Iterator[SessionEvent]:
        """
        Lazy, single-pass sequence of events: every pull plays exactly one turn.

        The terminal event is still yielded, after that the sequence is exhausted.
        Iterating again over a session that is over yields nothing.
        """
        while not self.is_over:
            yield self.next_turn()

    def __iter__(self) -> Iterator[SessionEvent]:
        return self.events()

    def to_model(self) -> SessionModel:
        """Snapshot in a format the Service layer uses"""
        return SessionModel(
            player_name=self.player.name,
            num_disks=self.board.num_disks(),
            pegs=self.board.to_lists(),
            moves_made=self.moves_made,
            status=str(self.status),
        )

    # -- PRIVATE HELPERS ---
    def _play_turn(self) -> SessionEvent:
        try:
            action = self.player.next_turn(self.board)
        except HanoiError as err:
            return PlayerCheated(str(err))
        return self._to_event(action)

    def _to_event(self, action: PlayerAction) -> SessionEvent:
        if isinstance(action, Moved):
            return PlayerMovedDisk(
                from_peg=PegName.from_index(action.from_peg),
                to_peg=PegName.from_index(action.to_peg),
            )
        if isinstance(action, Finished):
            return PlayerWins() if self.board.is_finished() else PlayerGaveUp()
        raise TypeError(f"Unknown player action: {action!r}")

    def _end_session(self, event: SessionEvent) -> None:
        self.final_event = event
        if isinstance(event, PlayerWins):
            logger.info(
                "%s solved the puzzle in %d moves", self.player.name, self.moves_made
            )
        elif isinstance(event, PlayerCheated):
            logger.warning("%s cheated: %s", self.player.name, event.message)
        else:
            logger.warning(
                "%s gave up after %d moves", self.player.name, self.moves_made
            )


def create_session(initial_disk_count: int, player_name: str) -> Session:
    """New session of the optimal player against a fresh board"""
    logger.info(
        "Starting session for %s with %d disks", player_name, initial_disk_count
    )
    return Session.with_initial_disks(OptimalPlayer(player_name), initial_disk_count)
