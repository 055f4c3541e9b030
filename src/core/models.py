"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The domain layer (lower) exports a snapshot of a session into the model defined here, the service/API layer (higher) builds its responses from it.
(Decouples the domain objects (Disk, Peg, Board, ...) from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make SessionModel easier to read
DiskSize = int
PlayerName = str


@dataclass
class SessionModel:
    """Transport-safe representation of a Towers of Hanoi session."""

    player_name: PlayerName
    num_disks: int
    pegs: list[list[DiskSize]]  # bottom to top, one list per peg
    moves_made: int
    status: str
