"""A single disk. The thing that gets moved around."""

from dataclasses import dataclass

from src.core.exceptions import InvalidDiskError


@dataclass(frozen=True, order=True)
class Disk:
    """Disks compare (and sort) by size only: 1 is the smallest disk."""

    size: int

    def __post_init__(self) -> None:
        # NOTE: bool is a subclass of int, but Disk(True) is nonsense
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise InvalidDiskError(f"Disk size must be an integer, got {self.size!r}")
        if self.size < 1:
            raise InvalidDiskError(f"Disk size must be positive, got {self.size}")

    def __str__(self) -> str:
        return f"Disk({self.size})"
