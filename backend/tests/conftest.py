import os
import random
import sys
import pytest

# Ensure the backend root (containing the `bingo` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from bingo import create_app, get_registry, socketio
from bingo.services.board import generate_board
from bingo.services.registry import RoomRegistry
from bingo.services.rules import start_game


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    CORS_ALLOWED_ORIGINS = '*'
    ROOM_CODE_LENGTH = 6
    ROOM_CODE_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    yield application
    get_registry(application).clear()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def registry(flask_app):
    return get_registry(flask_app)


@pytest.fixture()
def connect(flask_app):
    """Open Socket.IO test clients; each one is a separate player."""
    clients = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        test_client.get_received()  # flush the 'connected' greeting
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        if test_client.is_connected():
            test_client.disconnect()


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def room(rng):
    """A started two-player room: 'host' and 'guest'."""
    local_registry = RoomRegistry(board_factory=lambda: generate_board(rng))
    new_room = local_registry.create_room('host', 'Alice')
    local_registry.join_room(new_room.id, 'guest', 'Bob')
    start_game(new_room, 'host')
    return new_room
