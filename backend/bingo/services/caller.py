import logging
import random

from bingo.errors import Exhausted, Forbidden
from bingo.models import Room
from bingo.services.board import BOARD_SIZE, COLUMN_SPAN

MAX_NUMBER = BOARD_SIZE * COLUMN_SPAN

logger = logging.getLogger(__name__)


def call_next(room: Room, actor_id: str, rng=None) -> int:
    """Draw a number the room has not called yet and record it.

    Only the host may call. Raises Exhausted once all 75 numbers are out.
    """
    if actor_id != room.host_id:
        raise Forbidden('Only host can call numbers')
    called = set(room.called_numbers)
    available = [n for n in range(1, MAX_NUMBER + 1) if n not in called]
    if not available:
        raise Exhausted()
    number = (rng or random).choice(available)
    room.called_numbers.append(number)
    logger.info(f"[call] room={room.id} number={number} count={len(room.called_numbers)}")
    return number
