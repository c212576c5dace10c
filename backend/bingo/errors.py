"""Errors raised by room actions.

Every action failure is a ``BingoError``; the Socket.IO gateway turns them
into ``{'ok': False, 'error': ..., 'kind': ...}`` acknowledgements so no
failure ever escapes a handler.
"""


class BingoError(Exception):
    """Base class for all room action failures."""
    kind = 'error'
    default_message = 'Action failed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'ok': False, 'error': self.message, 'kind': self.kind}


class NotFound(BingoError):
    """Room or player reference is invalid."""
    kind = 'not_found'
    default_message = 'Room not found'


class Forbidden(BingoError):
    """Actor lacks the host role the action needs."""
    kind = 'forbidden'
    default_message = 'Only host can do that'


class AlreadyStarted(BingoError):
    """Join attempted after the room left the lobby."""
    kind = 'already_started'
    default_message = 'Game already started'


class InvalidCell(BingoError):
    kind = 'invalid_cell'
    default_message = 'Invalid cell'


class Exhausted(BingoError):
    kind = 'exhausted'
    default_message = 'All numbers called'


class InvalidClaim(BingoError):
    kind = 'invalid_claim'
    default_message = 'Not a valid bingo'
