"""Room state machine: which actions are legal, and what they change.

Rooms go lobby -> in_progress -> finished. Only joining is gated on the
phase; calls, marks and claims stay open after a winner is recorded, and a
later verified claim replaces ``winner_id``.
"""
import logging

from bingo.errors import AlreadyStarted, Forbidden, InvalidCell, InvalidClaim, NotFound
from bingo.models import Cell, Player, Room
from bingo.services.board import BOARD_SIZE
from bingo.services.win import check_win

logger = logging.getLogger(__name__)


def ensure_joinable(room: Room) -> None:
    if room.started:
        raise AlreadyStarted()


def start_game(room: Room, actor_id: str) -> None:
    """Host-only. Moves the room out of the lobby and resets the call history."""
    if actor_id != room.host_id:
        raise Forbidden('Only host can start')
    room.started = True
    room.called_numbers.clear()
    logger.info(f"[start] room={room.id} players={len(room.players)}")


def get_player(room: Room, actor_id: str) -> Player:
    player = room.players.get(actor_id)
    if player is None:
        raise NotFound('Not in game')
    return player


def _on_board(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < BOARD_SIZE


def toggle_mark(room: Room, actor_id: str, row, col) -> Cell:
    """Flip the actor's mark on one of their own cells.

    Marks are not checked against the called numbers. The free cell never
    changes.
    """
    player = get_player(room, actor_id)
    if not (_on_board(row) and _on_board(col)):
        raise InvalidCell()
    cell = player.board.cell(row, col)
    if cell.is_free:
        return cell
    cell.marked_by = None if cell.marked_by == actor_id else actor_id
    return cell


def claim_bingo(room: Room, actor_id: str) -> Player:
    """Verify the actor's board and record them as the winner."""
    player = get_player(room, actor_id)
    if not check_win(player.board, actor_id):
        logger.info(f"[claim-rejected] room={room.id} player={actor_id}")
        raise InvalidClaim()
    if room.winner_id is not None and room.winner_id != actor_id:
        logger.warning(f"[claim] room={room.id} winner {room.winner_id} replaced by {actor_id}")
    room.winner_id = actor_id
    logger.info(f"[claim] room={room.id} winner={actor_id}")
    return player
