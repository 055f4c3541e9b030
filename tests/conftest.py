"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.hanoi.board import Board
from src.hanoi.disk import Disk


@pytest.fixture
def board_from_lists() -> Callable[[list[list[int]]], Board]:
    """Call the inner function with the disk sizes per peg (bottom to top) to build any board position."""

    def _create_board(pegs: list[list[int]]) -> Board:
        board = Board()
        for peg_index, sizes in enumerate(pegs):
            for size in sizes:
                board.put(Disk(size), peg_index)
        return board

    return _create_board
