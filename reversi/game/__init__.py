from .board import Board, BoardSizeError, Stone, EMPTY, BLACK, WHITE
from .history import FlipOp, PlaceOp, UndoRecord
from .moves import MoveCandidate, MoveList
from .position import Position, PositionVector, DIRECTIONS
from .rules import Rules
from .state import GameState

__all__ = ['Board', 'BoardSizeError', 'Stone', 'EMPTY', 'BLACK', 'WHITE',
           'FlipOp', 'PlaceOp', 'UndoRecord', 'MoveCandidate', 'MoveList',
           'Position', 'PositionVector', 'DIRECTIONS', 'Rules', 'GameState']
