from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

from bingo.services.registry import RoomRegistry

socketio = SocketIO(async_mode=None)


def get_registry(flask_app) -> RoomRegistry:
    return flask_app.extensions['bingo_registry']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS', '*')
    CORS(flask_app, origins=allowed_origins)

    # Rooms live as long as this app object does
    flask_app.extensions['bingo_registry'] = RoomRegistry(
        code_length=flask_app.config.get('ROOM_CODE_LENGTH', 6),
        alphabet=flask_app.config.get('ROOM_CODE_ALPHABET', Config.ROOM_CODE_ALPHABET),
    )

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from bingo.routes import main
    flask_app.register_blueprint(main)

    from bingo.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Importing here binds the handlers to the initialized socketio instance
    from bingo.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
