import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

FREE = 'free'

LOBBY = 'lobby'
IN_PROGRESS = 'in_progress'
FINISHED = 'finished'


@dataclass
class Cell:
    number: Optional[int]
    # Actor id, FREE for the center cell, or None when unmarked
    marked_by: Optional[str] = None

    @property
    def is_free(self) -> bool:
        return self.marked_by == FREE

    def to_dict(self):
        return {'number': self.number, 'markedBy': self.marked_by}


@dataclass
class Board:
    rows: List[List[Cell]]

    def cell(self, row: int, col: int) -> Cell:
        return self.rows[row][col]

    def column(self, col: int) -> List[Cell]:
        return [row[col] for row in self.rows]

    def to_list(self):
        return [[cell.to_dict() for cell in row] for row in self.rows]


@dataclass
class Player:
    id: str
    name: str
    board: Board

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'board': self.board.to_list(),
        }


@dataclass
class Room:
    id: str
    host_id: str
    players: Dict[str, Player] = field(default_factory=dict)
    called_numbers: List[int] = field(default_factory=list)
    started: bool = False
    winner_id: Optional[str] = None
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def phase(self) -> str:
        # A recorded winner is what finishes a game
        if self.winner_id is not None:
            return FINISHED
        return IN_PROGRESS if self.started else LOBBY

    @property
    def is_empty(self) -> bool:
        return not self.players

    def player_list(self):
        return [player.to_dict() for player in self.players.values()]

    def to_dict(self):
        return {
            'id': self.id,
            'hostId': self.host_id,
            'players': self.player_list(),
            'calledNumbers': list(self.called_numbers),
            'started': self.started,
            'phase': self.phase,
            'winnerId': self.winner_id,
        }
