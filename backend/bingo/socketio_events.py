"""Socket.IO gateway: turns client actions into room operations.

Each handler resolves the room, runs one operation from ``bingo.services``
under the room's lock, broadcasts the result to the room and returns the
acknowledgement for the caller. Failures come back as
``{'ok': False, 'error': ..., 'kind': ...}``.
"""
from functools import wraps
from typing import Any, Dict

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from bingo import get_registry, socketio
from bingo.errors import BingoError
from bingo.services.caller import call_next
from bingo.services.registry import RoomRegistry
from bingo.services.rules import claim_bingo, start_game, toggle_mark


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _registry() -> RoomRegistry:
    return get_registry(current_app)


def _ok(**fields) -> Dict[str, Any]:
    return {'ok': True, **fields}


def _action(name):
    """Wrap a handler so a BingoError becomes a failure acknowledgement."""
    def decorator(handler):
        @wraps(handler)
        def wrapper(data=None):
            try:
                return handler(data if isinstance(data, dict) else {})
            except BingoError as exc:
                current_app.logger.info(f"[rejected] action={name} sid={_get_sid()} kind={exc.kind}")
                return exc.to_dict()
        return wrapper
    return decorator


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")
    emit('connected', {'id': _get_sid()})


def handle_disconnect(reason=None):
    sid = _get_sid()
    for room in _registry().disconnect(sid):
        emit('player-left', {'playerId': sid}, to=room.id)
    current_app.logger.info(f"[disconnect] sid={sid}")


@_action('create-room')
def handle_create_room(data):
    sid = _get_sid()
    registry = _registry()
    room = registry.create_room(sid, data.get('name', ''))
    with registry.locked(room.id):
        join_room(room.id)
        emit('player-list-updated', room.player_list(), to=room.id)
        return _ok(roomId=room.id, playerId=sid, room=room.to_dict())


@_action('join-room')
def handle_join_room(data):
    sid = _get_sid()
    code = data.get('roomId')
    registry = _registry()
    with registry.locked(code) as room:
        registry.join_room(code, sid, data.get('name', ''))
        join_room(room.id)
        emit('player-list-updated', room.player_list(), to=room.id)
        return _ok(roomId=room.id, playerId=sid, room=room.to_dict())


@_action('leave-room')
def handle_leave_room(data):
    sid = _get_sid()
    code = data.get('roomId')
    registry = _registry()
    with registry.locked(code) as room:
        registry.remove_player(code, sid)
        leave_room(room.id)
        emit('player-left', {'playerId': sid}, to=room.id)
        return _ok()


@_action('start-game')
def handle_start_game(data):
    with _registry().locked(data.get('roomId')) as room:
        start_game(room, _get_sid())
        emit('game-started', {'roomId': room.id}, to=room.id)
        return _ok()


@_action('call-number')
def handle_call_number(data):
    with _registry().locked(data.get('roomId')) as room:
        number = call_next(room, _get_sid())
        emit('number-called', {'number': number, 'calledNumbers': list(room.called_numbers)}, to=room.id)
        return _ok(number=number)


@_action('mark-cell')
def handle_mark_cell(data):
    sid = _get_sid()
    row, col = data.get('row'), data.get('col')
    with _registry().locked(data.get('roomId')) as room:
        cell = toggle_mark(room, sid, row, col)
        emit('cell-marked', {
            'playerId': sid,
            'row': row,
            'col': col,
            'marked': cell.marked_by is not None,
        }, to=room.id)
        return _ok(marked=cell.marked_by is not None)


@_action('claim-bingo')
def handle_claim_bingo(data):
    sid = _get_sid()
    with _registry().locked(data.get('roomId')) as room:
        player = claim_bingo(room, sid)
        emit('bingo-claimed', {'winnerId': sid, 'name': player.name}, to=room.id)
        return _ok()


def handle_ping(data=None):
    emit('pong', data or {})


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('create-room', handle_create_room, namespace=namespace)
    socketio.on_event('join-room', handle_join_room, namespace=namespace)
    socketio.on_event('leave-room', handle_leave_room, namespace=namespace)
    socketio.on_event('start-game', handle_start_game, namespace=namespace)
    socketio.on_event('call-number', handle_call_number, namespace=namespace)
    socketio.on_event('mark-cell', handle_mark_cell, namespace=namespace)
    socketio.on_event('claim-bingo', handle_claim_bingo, namespace=namespace)
    socketio.on_event('ping', handle_ping, namespace=namespace)
