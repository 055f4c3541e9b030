"""Orchestration of communication from the API models to the domain layer (and the reverse direction)."""

import logging
from itertools import islice

from src.api.models import EventResponse, PlaySessionRequest, PlaySessionResponse
from src.core.models import SessionModel
from src.core.shared_types import SessionStatus
from src.hanoi.events import (
    PlayerCheated,
    PlayerMovedDisk,
    SessionEvent,
    render_event,
)
from src.hanoi.session import create_session

logger = logging.getLogger(__name__)


class HanoiService:
    """Orchestration of layers for a Towers of Hanoi session."""

    # -- API logic ---
    def play_session(self, request: PlaySessionRequest) -> PlaySessionResponse:
        """
        Play a session for the requested player and number of disks.
        ----

        The skip/take window is applied lazily: events are numbered from 0 before skipping,
        and once `take` events have been collected no further turns are played.
        (So a limited window can leave the session in progress.)
        """

        # Create the session with the reference player
        session = create_session(request.num_disks, request.player_name)

        # Pull events through the window
        stop = None if request.take is None else request.skip + request.take
        window = islice(enumerate(session.events()), request.skip, stop)
        events = [self._create_event_response(index, event) for index, event in window]

        # Capture the state of the session after the last event pulled
        model = session.to_model()
        logger.info(
            "Session for %s stopped after %d moves (%s)",
            model.player_name,
            model.moves_made,
            model.status,
        )

        # Return a PlaySessionResponse
        return self._create_session_response(model, events)

    # -- Internal helpers --
    def _create_event_response(self, index: int, event: SessionEvent) -> EventResponse:
        """Convert a single domain event into an EventResponse (incl. the rendered line)."""
        from_peg = to_peg = message = None
        if isinstance(event, PlayerMovedDisk):
            from_peg, to_peg = str(event.from_peg), str(event.to_peg)
        elif isinstance(event, PlayerCheated):
            message = event.message

        return EventResponse(
            index=index,
            kind=type(event).__name__,
            from_peg=from_peg,
            to_peg=to_peg,
            message=message,
            line=render_event(index, event),
        )

    def _create_session_response(
        self, model: SessionModel, events: list[EventResponse]
    ) -> PlaySessionResponse:
        """Convert info in SessionModel to a PlaySessionResponse."""
        return PlaySessionResponse(
            player_name=model.player_name,
            num_disks=model.num_disks,
            status=SessionStatus(model.status),
            moves_made=model.moves_made,
            pegs=model.pegs,
            events=events,
        )
