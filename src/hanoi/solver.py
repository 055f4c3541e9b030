"""
Iterative Towers of Hanoi solver
----

Key idea: in the optimal solution the moves cycle through three pairs of pegs.
For an odd number of disks:  (source, destination), (source, middle), (middle, destination), repeat.
For an even number of disks the roles of middle and destination are swapped.
Between the two pegs of a pair only one move is legal: the smaller top disk goes onto the other peg.

So the next move only depends on the move number and the top disks currently on the board.
No recursion and no precomputed list of 2^N - 1 moves: O(1) per move.
"""

from typing import Optional, Protocol

from src.hanoi.board import PEG_COUNT
from src.hanoi.disk import Disk

PegPair = tuple[int, int]


class Peg(Protocol):
    def peek(self) -> Optional[Disk]: ...


class Board(Protocol):
    """Just the parts the solver needs"""

    def is_finished(self) -> bool: ...
    def num_disks(self) -> int: ...
    def peg(self, peg_index: int) -> Peg: ...


def next_move(move_number: int, board: Board) -> Optional[PegPair]:
    """
    The (from_index, to_index) of the move with number `move_number` (counting from 1) in the optimal solution.

    None if the board is finished or no legal move exists between the pegs that are up this turn.
    Pure: the board is only inspected, never changed.
    """
    if board.is_finished():
        return None
    return _calculate_next(move_number, board)


def _calculate_next(move_number: int, board: Board) -> Optional[PegPair]:
    aux_peg, dest_peg = (1, 2) if board.num_disks() % 2 == 1 else (2, 1)

    remainder = move_number % 3
    if remainder == 1:
        return _legal_move_between(0, dest_peg, board)
    if remainder == 2:
        return _legal_move_between(0, aux_peg, board)
    return _legal_move_between(aux_peg, dest_peg, board)


def _legal_move_between(a: int, b: int, board: Board) -> Optional[PegPair]:
    """Only one direction is allowed: never put a larger disk on a smaller one."""
    if not (0 <= a < PEG_COUNT and 0 <= b < PEG_COUNT):
        return None

    disk_a = board.peg(a).peek()
    disk_b = board.peg(b).peek()

    if disk_a is None and disk_b is None:
        return None
    if disk_b is None:
        return (a, b)
    if disk_a is None:
        return (b, a)
    return (b, a) if disk_a > disk_b else (a, b)
