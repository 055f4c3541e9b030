"""
A peg: a stack of disks.

The peg guards the one rule of the game: a disk can never be placed on top of a smaller disk.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import OversizedDiskError
from src.hanoi.disk import Disk


@dataclass
class Peg:
    # bottom (largest) to top (smallest)
    disks: list[Disk] = field(default_factory=list)

    @classmethod
    def with_disks(cls, num_disks: int) -> Self:
        """Peg loaded with disks of size num_disks, ..., 1. Largest disk goes in first."""
        peg = cls()
        for size in range(num_disks, 0, -1):
            peg.put(Disk(size))
        return peg

    def put(self, disk: Disk) -> None:
        """
        Push a disk on top of the peg.
        ----

        Rejected if the current top disk is not strictly larger than the new disk.
        The peg is not touched when the disk gets rejected.
        """
        top_disk = self.peek()
        if top_disk is not None and top_disk <= disk:
            raise OversizedDiskError(f"disk is too big: {disk}", disk=disk)
        self.disks.append(disk)

    def take(self) -> Optional[Disk]:
        """Remove the top disk. None if there is nothing to take."""
        if self.is_empty():
            return None
        return self.disks.pop()

    def peek(self) -> Optional[Disk]:
        """Look at the top disk without removing it"""
        return self.disks[-1] if self.disks else None

    def is_empty(self) -> bool:
        return not self.disks

    def count(self) -> int:
        return len(self.disks)

    def contains_smallest(self) -> bool:
        return any(disk.size == 1 for disk in self.disks)

    def sizes(self) -> list[int]:
        """Disk sizes from bottom to top"""
        return [disk.size for disk in self.disks]
