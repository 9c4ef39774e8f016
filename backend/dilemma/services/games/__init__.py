"""Game domain services: payoffs, room storage and the match referee.

This package contains pure domain logic that is driven by the socket
handlers, keeping transport concerns separated from core game mechanics.
"""

from .payoff import Choice, payoff
from .referee import (
    MATCH_ROUNDS,
    AlreadyInRoom,
    ChoiceSubmission,
    Departure,
    JoinError,
    Referee,
    RoomFull,
    RoomNotFound,
    RoundResult,
)
from .rooms import Room, RoomStore, generate_room_code, normalize_room_code
