import logging
import random
import string
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional, Set

from bingo.errors import NotFound
from bingo.models import Board, Player, Room
from bingo.services.board import generate_board
from bingo.services.rules import ensure_joinable

logger = logging.getLogger(__name__)


class RoomRegistry:
    """In-memory rooms for the lifetime of the process.

    Lock order is always room lock first, then the registry lock. Handlers
    that read and mutate a room do it inside ``locked(code)`` so each action
    runs to completion before the next one touches the same room.
    """

    def __init__(
        self,
        code_length: int = 6,
        alphabet: str = string.ascii_lowercase + string.digits,
        board_factory: Callable[[], Board] = generate_board,
    ) -> None:
        self._rooms: Dict[str, Room] = {}
        self._actor_rooms: Dict[str, Set[str]] = {}  # actor id -> room codes
        self._lock = threading.RLock()
        self._code_length = code_length
        self._alphabet = alphabet
        self._board_factory = board_factory

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, code) -> bool:
        return code in self._rooms

    def rooms(self) -> List[Room]:
        with self._lock:
            return list(self._rooms.values())

    def rooms_for(self, actor_id: str) -> Set[str]:
        with self._lock:
            return set(self._actor_rooms.get(actor_id, ()))

    def _generate_code(self) -> str:
        return ''.join(random.choices(self._alphabet, k=self._code_length))

    def create_room(self, host_id: str, host_name: str) -> Room:
        """Register a lobby room with the host as its only player."""
        host = Player(id=host_id, name=host_name, board=self._board_factory())
        with self._lock:
            code = self._generate_code()
            while code in self._rooms:
                logger.warning(f"[room-create] code collision on {code}, regenerating")
                code = self._generate_code()
            room = Room(id=code, host_id=host_id, players={host_id: host})
            self._rooms[code] = room
            self._actor_rooms.setdefault(host_id, set()).add(code)
        logger.info(f"[room-create] room={code} host={host_id}")
        return room

    def get(self, code: Optional[str]) -> Room:
        with self._lock:
            room = self._rooms.get(code) if isinstance(code, str) else None
        if room is None:
            raise NotFound('Room not found')
        return room

    @contextmanager
    def locked(self, code: Optional[str]) -> Iterator[Room]:
        """Hold the room's lock for the duration of the block.

        Raises NotFound if the room is missing, or was deleted while waiting
        for the lock.
        """
        room = self.get(code)
        with room.lock:
            with self._lock:
                if self._rooms.get(code) is not room:
                    raise NotFound('Room not found')
            yield room

    def join_room(self, code: Optional[str], actor_id: str, name: str) -> Room:
        """Add a player with a fresh board. Re-joining replaces the old entry."""
        with self.locked(code) as room:
            ensure_joinable(room)
            room.players[actor_id] = Player(id=actor_id, name=name, board=self._board_factory())
            with self._lock:
                self._actor_rooms.setdefault(actor_id, set()).add(room.id)
            logger.info(f"[room-join] room={room.id} player={actor_id} players={len(room.players)}")
            return room

    def remove_player(self, code: Optional[str], actor_id: str) -> Room:
        """Drop a player, deleting the room once nobody is left.

        The host id is left untouched when the host leaves.
        """
        with self.locked(code) as room:
            if room.players.pop(actor_id, None) is None:
                raise NotFound('Not in game')
            with self._lock:
                codes = self._actor_rooms.get(actor_id)
                if codes is not None:
                    codes.discard(room.id)
                    if not codes:
                        del self._actor_rooms[actor_id]
                if room.is_empty:
                    del self._rooms[room.id]
            logger.info(f"[room-leave] room={room.id} player={actor_id} remaining={len(room.players)}")
            if room.is_empty:
                logger.info(f"[room-delete] room={room.id}")
            return room

    def disconnect(self, actor_id: str) -> List[Room]:
        """Remove the actor from every room they joined; returns those rooms."""
        left = []
        for code in self.rooms_for(actor_id):
            try:
                left.append(self.remove_player(code, actor_id))
            except NotFound:
                # Room went away, or the actor left it, before we got its lock
                continue
        return left

    def clear(self) -> None:
        with self._lock:
            self._rooms.clear()
            self._actor_rooms.clear()
