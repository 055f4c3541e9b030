"""Unit tests for /src/hanoi/disk.py"""

import pytest

from src.core.exceptions import HanoiError, InvalidDiskError
from src.hanoi.disk import Disk


def test_disk_exposes_size() -> None:
    assert Disk(4).size == 4


def test_disks_are_ordered_by_size() -> None:
    """Sorting a bunch of disks should put the smallest one first"""
    disks = [Disk(3), Disk(1), Disk(2)]
    assert sorted(disks) == [Disk(1), Disk(2), Disk(3)]
    assert Disk(1) < Disk(2)
    assert Disk(2) <= Disk(2)
    assert Disk(5) > Disk(4)


def test_disks_with_same_size_are_equal() -> None:
    assert Disk(2) == Disk(2)
    assert len({Disk(2), Disk(2)}) == 1


def test_disk_is_immutable() -> None:
    disk = Disk(1)
    with pytest.raises(AttributeError):
        disk.size = 2  # type: ignore[misc]


@pytest.mark.parametrize("size", [0, -1, -10])
def test_non_positive_size_is_rejected(size: int) -> None:
    with pytest.raises(InvalidDiskError):
        _ = Disk(size)


@pytest.mark.parametrize("size", [1.5, "3", True, None])
def test_non_integer_size_is_rejected(size: object) -> None:
    """Any top-level HanoiError is fine, but it should not slip through as a valid disk"""
    with pytest.raises(HanoiError):
        _ = Disk(size)  # type: ignore[arg-type]


def test_disk_description() -> None:
    assert str(Disk(3)) == "Disk(3)"
