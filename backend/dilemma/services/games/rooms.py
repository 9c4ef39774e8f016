import random
import string
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .payoff import Choice

ROOM_CODE_LENGTH = 6
ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits


def normalize_room_code(raw) -> str:
    """Trim and upper-case a user-typed room code."""
    if raw is None:
        return ''
    return str(raw).strip().upper()


def generate_room_code(length: int = ROOM_CODE_LENGTH) -> str:
    return ''.join(random.choices(ROOM_CODE_ALPHABET, k=length))


@dataclass
class Room:
    code: str
    players: List[str] = field(default_factory=list)  # join order: index 0 is player 1
    choices: Dict[str, Choice] = field(default_factory=dict)  # current round only
    scores: Dict[str, int] = field(default_factory=dict)
    round: int = 1

    @property
    def is_full(self) -> bool:
        return len(self.players) >= 2

    @property
    def status(self) -> str:
        return 'playing' if self.is_full else 'waiting'

    def add_player(self, sid: str) -> None:
        self.players.append(sid)
        self.scores[sid] = 0

    def remove_player(self, sid: str) -> None:
        self.players = [p for p in self.players if p != sid]
        self.scores.pop(sid, None)
        self.choices.pop(sid, None)

    def to_dict(self):
        return {
            'code': self.code,
            'players': list(self.players),
            'scores': dict(self.scores),
            'round': self.round,
            'status': self.status,
        }


class RoomStore:
    """In-memory rooms keyed by code, scoped to the process lifetime."""

    def __init__(self, code_length: int = ROOM_CODE_LENGTH) -> None:
        self.code_length = code_length
        self._rooms: Dict[str, Room] = {}

    def create(self, sid: str) -> Room:
        code = generate_room_code(self.code_length)
        while code in self._rooms:
            code = generate_room_code(self.code_length)
        room = Room(code=code)
        room.add_player(sid)
        self._rooms[code] = room
        return room

    def get(self, code) -> Optional[Room]:
        return self._rooms.get(normalize_room_code(code))

    def delete(self, code) -> None:
        self._rooms.pop(normalize_room_code(code), None)

    def rooms_for(self, sid: str) -> List[Room]:
        return [room for room in self._rooms.values() if sid in room.players]

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, code) -> bool:
        return normalize_room_code(code) in self._rooms
