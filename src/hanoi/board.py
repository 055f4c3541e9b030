"""The game board: always three pegs. Bounds checks on peg indices live here, the ordering rule lives on the Peg."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import InvalidDiskError, PegIndexError
from src.hanoi.disk import Disk
from src.hanoi.peg import Peg

# Classic Towers of Hanoi. Index 0: source, 1: middle (auxiliary), 2: destination
PEG_COUNT = 3


@dataclass
class Board:
    pegs: tuple[Peg, Peg, Peg] = field(default_factory=lambda: (Peg(), Peg(), Peg()))

    @classmethod
    def with_initial_disks(cls, num_disks: int) -> Self:
        """Starting position: all disks stacked on the source peg, the other two pegs empty."""
        if num_disks < 0:
            raise InvalidDiskError(f"Cannot create a board with {num_disks} disks.")
        return cls(pegs=(Peg.with_disks(num_disks), Peg(), Peg()))

    def put(self, disk: Disk, peg_index: int) -> None:
        """Place the disk on the addressed peg (the Peg itself rejects oversized disks)"""
        self.peg(peg_index).put(disk)

    def take(self, peg_index: int) -> Optional[Disk]:
        """Take the top disk of the addressed peg. None if that peg is empty."""
        return self.peg(peg_index).take()

    def peg(self, peg_index: int) -> Peg:
        self._assert_within_bounds(peg_index)
        return self.pegs[peg_index]

    def is_finished(self) -> bool:
        """All disks have been moved to the destination peg (trivially true for a board without disks)"""
        return self.pegs[0].is_empty() and self.pegs[1].is_empty()

    def num_disks(self) -> int:
        """Disks are never created or destroyed after setup, so this should not change during a session."""
        return sum(peg.count() for peg in self.pegs)

    def to_lists(self) -> list[list[int]]:
        """Snapshot of the disk sizes on every peg, bottom to top"""
        return [peg.sizes() for peg in self.pegs]

    def _assert_within_bounds(self, peg_index: int) -> None:
        # NOTE: check explicitly, negative indices would silently address a peg from the back of the tuple
        if not 0 <= peg_index < PEG_COUNT:
            raise PegIndexError(f"peg_index out of bounds: {peg_index}")
