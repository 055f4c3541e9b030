"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import SessionStatus

# 2^20 - 1 moves is already a long session
MAX_DISKS = 20
DEFAULT_PLAYER_NAME = "Joe"

DiskSize = int
PegLabel = str


# --- REQUEST MODELS ---
class PlaySessionRequest(BaseModel):
    num_disks: int
    player_name: str = DEFAULT_PLAYER_NAME
    skip: int = 0
    take: Optional[int] = None  # None: no limit

    @field_validator("num_disks")
    @classmethod
    def validate_num_disks(cls, value: int) -> int:
        if not 0 <= value <= MAX_DISKS:
            raise InvalidRequestError(
                f"Number of disks must be between 0 and {MAX_DISKS}, got {value}."
            )
        return value

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be blank.")
        return value

    @field_validator(*["skip", "take"])
    @classmethod
    def validate_window(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise InvalidRequestError(f"skip/take cannot be negative, got {value}.")
        return value


# --- RESPONSE MODELS ---
class EventResponse(BaseModel):
    index: int
    kind: str
    from_peg: Optional[PegLabel] = None
    to_peg: Optional[PegLabel] = None
    message: Optional[str] = None
    line: str


class PlaySessionResponse(BaseModel):
    player_name: str
    num_disks: int
    status: SessionStatus
    moves_made: int
    pegs: list[list[DiskSize]]
    events: list[EventResponse]
