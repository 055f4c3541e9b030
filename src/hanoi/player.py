"""
Players: anything that, given the board, proposes and executes exactly one move per turn.

Key idea: the Session only knows about the PlaysTowers protocol. Other strategies (human input, random moves, ...)
are separate implementations of the same protocol.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from src.core.exceptions import HanoiError, IllegalMoveError, MissingDiskError
from src.hanoi.board import Board
from src.hanoi.solver import next_move

logger = logging.getLogger(__name__)


# --- PLAYER ACTIONS ---
@dataclass(frozen=True)
class Moved:
    """The top disk of from_peg now sits on top of to_peg"""

    from_peg: int
    to_peg: int


@dataclass(frozen=True)
class Finished:
    """The player declares it is done (whether or not the board agrees)"""


PlayerAction = Moved | Finished


class PlaysTowers(Protocol):
    """Contract for player strategies"""

    @property
    def name(self) -> str: ...

    def next_turn(self, board: Board) -> PlayerAction:
        """Make exactly one move on the board (or declare to be finished). Raises a HanoiError if the move fails."""
        ...


# --- REFERENCE STRATEGY ---
@dataclass
class OptimalPlayer:
    """Always plays the next move of the optimal solution, as computed by the iterative solver."""

    name: str
    # number of the next move to play. Only advances after a successful move.
    move_number: int = 1

    def next_turn(self, board: Board) -> PlayerAction:
        """
        Ask the solver for the next move and play it.
        ----

        1. No move available? --> report Finished. Board and move counter stay as they are.
        2. Take the disk from the source peg (must be there)
        3. Put it on the destination peg (the board may reject it)
        4. Only then advance the move counter
        """
        move = next_move(self.move_number, board)
        if move is None:
            return Finished()

        from_peg, to_peg = move
        try:
            self._move_disk(board, from_peg, to_peg)
        except HanoiError as err:
            raise IllegalMoveError(
                f"cannot move from {from_peg} to {to_peg}: {err}"
            ) from err

        logger.debug(
            "%s: move %d from peg %d to peg %d",
            self.name,
            self.move_number,
            from_peg,
            to_peg,
        )
        self.move_number += 1
        return Moved(from_peg, to_peg)

    def _move_disk(self, board: Board, from_peg: int, to_peg: int) -> None:
        disk = board.take(from_peg)
        if disk is None:
            raise MissingDiskError(f"no disk on peg {from_peg}")
        try:
            board.put(disk, to_peg)
        except HanoiError:
            # disks are never dropped: return it to where it came from
            board.put(disk, from_peg)
            raise
