from flask import Blueprint, current_app, jsonify

from bingo import get_registry
from bingo.errors import NotFound

rooms = Blueprint('rooms', __name__)


@rooms.route('/<string:room_code>', methods=['GET'])
def get_room_state(room_code):
    """
    Returns the public snapshot of a live room.
    """
    try:
        with get_registry(current_app).locked(room_code) as room:
            snapshot = room.to_dict()
    except NotFound as exc:
        return jsonify({'error': exc.message}), 404
    return jsonify(snapshot), 200
