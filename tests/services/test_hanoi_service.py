"""Unit tests for src/services/hanoi_service.py"""

import pytest

from src.core.shared_types import SessionStatus
from src.services.hanoi_service import (
    EventResponse,
    HanoiService,
    PlaySessionRequest,
    PlaySessionResponse,
)


@pytest.fixture
def service() -> HanoiService:
    return HanoiService()


# --- SERVICE - FULL SESSION ----
def test_play_full_session(service: HanoiService) -> None:
    """No window: the whole session is played and every event is in the response."""
    request = PlaySessionRequest(num_disks=2, player_name="Joe")
    response = service.play_session(request)

    # Check response structure
    assert isinstance(response, PlaySessionResponse)
    assert all(isinstance(event, EventResponse) for event in response.events)

    # Check response data
    assert response.player_name == "Joe"
    assert response.num_disks == 2
    assert response.status == SessionStatus.WON
    assert response.moves_made == 3
    assert response.pegs == [[], [], [2, 1]]
    assert [event.line for event in response.events] == [
        "0: PlayerMovedDisk(from=Source, to=Middle)",
        "1: PlayerMovedDisk(from=Source, to=Destination)",
        "2: PlayerMovedDisk(from=Middle, to=Destination)",
        "3: PlayerWins",
    ]


def test_event_details(service: HanoiService) -> None:
    response = service.play_session(PlaySessionRequest(num_disks=1))
    move, win = response.events

    assert move == EventResponse(
        index=0,
        kind="PlayerMovedDisk",
        from_peg="Source",
        to_peg="Destination",
        message=None,
        line="0: PlayerMovedDisk(from=Source, to=Destination)",
    )
    assert win.kind == "PlayerWins"
    assert win.from_peg is None
    assert win.to_peg is None


def test_no_disks(service: HanoiService) -> None:
    response = service.play_session(PlaySessionRequest(num_disks=0))
    assert [event.line for event in response.events] == ["0: PlayerWins"]
    assert response.status == SessionStatus.WON
    assert response.moves_made == 0


@pytest.mark.parametrize("num_disks", [3, 6, 9])
def test_minimal_number_of_moves(service: HanoiService, num_disks: int) -> None:
    response = service.play_session(PlaySessionRequest(num_disks=num_disks))
    assert response.moves_made == 2**num_disks - 1
    assert len(response.events) == 2**num_disks
    assert response.events[-1].kind == "PlayerWins"


# --- SERVICE - WINDOWS ----
def test_skip_keeps_original_indices(service: HanoiService) -> None:
    response = service.play_session(PlaySessionRequest(num_disks=2, skip=2))
    assert [event.index for event in response.events] == [2, 3]
    assert response.status == SessionStatus.WON


def test_take_stops_the_session_early(service: HanoiService) -> None:
    """Once enough events are collected, no further turns are played."""
    response = service.play_session(PlaySessionRequest(num_disks=3, skip=1, take=2))

    assert [event.index for event in response.events] == [1, 2]
    assert response.moves_made == 3
    assert response.status == SessionStatus.IN_PROGRESS
    assert response.pegs == [[3], [2, 1], []]


def test_take_zero_plays_nothing(service: HanoiService) -> None:
    response = service.play_session(PlaySessionRequest(num_disks=3, take=0))
    assert response.events == []
    assert response.moves_made == 0
    assert response.pegs == [[3, 2, 1], [], []]


def test_skip_beyond_the_end(service: HanoiService) -> None:
    response = service.play_session(PlaySessionRequest(num_disks=2, skip=10))
    assert response.events == []
    assert response.status == SessionStatus.WON
