import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .payoff import Choice, payoff
from .rooms import Room, RoomStore, normalize_room_code

MATCH_ROUNDS = 5


class JoinError(Exception):
    """A join-room request was rejected. Reported to the requester only."""

    message = 'Unable to join room'

    def __init__(self, room_code: str):
        super().__init__(self.message)
        self.room_code = room_code


class RoomNotFound(JoinError):
    message = 'Room not found'


class RoomFull(JoinError):
    message = 'Room is full'


class AlreadyInRoom(JoinError):
    message = 'Already in this room'


@dataclass(frozen=True)
class ChoiceSubmission:
    room_code: str
    player_id: str
    choice: Choice

    @classmethod
    def from_payload(cls, data: Any, default_player_id: Optional[str] = None) -> Optional['ChoiceSubmission']:
        """Validate a player-choice payload; None when it is malformed.

        Expected shape: {'roomId': str, 'playerId': str, 'choice': 'C' | 'D'}.
        'sessionId' is accepted in place of 'roomId', and the sender's sid is
        used when 'playerId' is missing.
        """
        if not isinstance(data, dict):
            return None
        room_code = normalize_room_code(data.get('roomId') or data.get('sessionId'))
        player_id = data.get('playerId') or default_player_id
        choice = Choice.parse(data.get('choice'))
        if not room_code or not isinstance(player_id, str) or choice is None:
            return None
        return cls(room_code=room_code, player_id=player_id, choice=choice)


@dataclass
class RoundResult:
    room_code: str
    round: int
    choices: Dict[str, Choice]
    scores: Dict[str, int]
    game_over: bool = False

    def to_dict(self):
        return {
            'choices': {sid: c.value for sid, c in self.choices.items()},
            'scores': dict(self.scores),
            'round': self.round,
        }


@dataclass
class Departure:
    room_code: str
    player_id: str
    remaining: List[str] = field(default_factory=list)

    @property
    def room_closed(self) -> bool:
        return not self.remaining


class Referee:
    """Runs every room's match: admission, the choice barrier and scoring.

    All transitions hold one re-entrant lock, so each create/join/choice/
    disconnect is atomic with respect to the others even when the socket
    server dispatches events from several threads.
    """

    def __init__(self, store: Optional[RoomStore] = None, total_rounds: int = MATCH_ROUNDS) -> None:
        self.store = store if store is not None else RoomStore()
        self.total_rounds = total_rounds
        self._lock = threading.RLock()

    def get_room(self, room_code) -> Optional[Room]:
        with self._lock:
            return self.store.get(room_code)

    def create_room(self, sid: str) -> Room:
        with self._lock:
            return self.store.create(sid)

    def join_room(self, room_code, sid: str) -> Room:
        code = normalize_room_code(room_code)
        with self._lock:
            room = self.store.get(code)
            if room is None:
                raise RoomNotFound(code)
            if room.is_full:
                raise RoomFull(code)
            if sid in room.players:
                raise AlreadyInRoom(code)
            room.add_player(sid)
            return room

    def submit_choice(self, submission: ChoiceSubmission) -> Optional[RoundResult]:
        """Record a choice; resolve the round once both players have chosen.

        Returns the RoundResult when this submission completed the round,
        otherwise None. Unknown rooms and non-participants are ignored.
        """
        with self._lock:
            room = self.store.get(submission.room_code)
            if room is None or submission.player_id not in room.players:
                return None
            room.choices[submission.player_id] = submission.choice
            if len(room.choices) < 2:
                return None
            return self._resolve_round(room)

    def _resolve_round(self, room: Room) -> RoundResult:
        p1, p2 = room.players
        c1, c2 = room.choices[p1], room.choices[p2]
        pts1, pts2 = payoff(c1, c2)
        room.scores[p1] += pts1
        room.scores[p2] += pts2

        result = RoundResult(
            room_code=room.code,
            round=room.round,
            choices={p1: c1, p2: c2},
            scores=dict(room.scores),
        )
        room.choices = {}
        room.round += 1
        if room.round > self.total_rounds:
            result.game_over = True
            self.store.delete(room.code)
        return result

    def disconnect(self, sid: str) -> List[Departure]:
        """Drop sid from every room it plays in.

        Empty rooms are deleted. A room left with one player stays alive
        until that player disconnects too.
        """
        departures = []
        with self._lock:
            for room in self.store.rooms_for(sid):
                room.remove_player(sid)
                if not room.players:
                    self.store.delete(room.code)
                departures.append(Departure(room_code=room.code, player_id=sid, remaining=list(room.players)))
        return departures
