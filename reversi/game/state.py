"""
Game state management for Reversi.
Owns the stone board, the per-color stone counts and the cached number
of legal moves per color used to detect the end of the game.
"""

import logging

from .board import Board, Stone, BLACK, WHITE, EMPTY
from .history import FlipOp, Operation, PlaceOp, UndoRecord
from .moves import MoveCandidate, MoveList
from .position import Position
from .rules import Rules

logger = logging.getLogger(__name__)

UNKNOWN_MOVES = -1


class GameState:
    """
    Manages the complete state of a Reversi game.

    The state is mutated in place: moves are applied and taken back
    through UndoRecords, both for real play and during search.
    """

    def __init__(self, size: int = 8):
        self.board: Board[Stone] = Board(size, EMPTY)
        self.size = size
        self.stones = {BLACK: 0, WHITE: 0}
        # Number of legal moves seen by the last enumerate_moves per color
        self.move_counts = {BLACK: UNKNOWN_MOVES, WHITE: UNKNOWN_MOVES}
        self._setup_start_position()

    def _setup_start_position(self):
        # Initial layout around the center:
        #   . . . .
        #   . B W .
        #   . W B .
        #   . . . .
        low, high = self.size // 2 - 1, self.size // 2
        self.place(Position(low, low), BLACK)
        self.place(Position(high, high), BLACK)
        self.place(Position(low, high), WHITE)
        self.place(Position(high, low), WHITE)

    # ==================== QUERIES ====================

    @property
    def cell_count(self) -> int:
        return self.board.cell_count

    @property
    def black_count(self) -> int:
        return self.stones[BLACK]

    @property
    def white_count(self) -> int:
        return self.stones[WHITE]

    @property
    def empty_count(self) -> int:
        return self.cell_count - self.stones[BLACK] - self.stones[WHITE]

    def count(self, color: Stone) -> int:
        """Number of stones of color on the board."""
        if color == EMPTY:
            return self.empty_count
        return self.stones[color]

    def stone_at(self, pos: Position) -> Stone:
        return self.board.get(pos)

    def score_delta(self, color: Stone) -> int:
        """Own stones minus opponent stones."""
        return self.stones[color] - self.stones[self.other_color(color)]

    @staticmethod
    def other_color(color: Stone) -> Stone:
        return Rules.opposite(color)

    def game_over(self) -> bool:
        """
        True if the last enumeration for both colors found no move.
        This is a cached check; call enumerate_moves for both colors after
        the last change to get an accurate answer.
        """
        return self.move_counts[BLACK] == 0 and self.move_counts[WHITE] == 0

    # ==================== MUTATION ====================

    def place(self, pos: Position, color: Stone):
        """Put a stone on an empty cell."""
        self.board.set(pos, color)
        self.stones[color] += 1

    def remove(self, pos: Position):
        """Clear a cell, used to take back a placement."""
        stone = self.board.get(pos)
        self.board.set(pos, EMPTY)
        if stone != EMPTY:
            self.stones[stone] -= 1

    def flip(self, pos: Position):
        """Turn a stone to the other color."""
        stone = self.board.get(pos)
        if stone == EMPTY:
            raise ValueError(f"cannot flip empty cell {pos}")
        other = self.other_color(stone)
        self.board.set(pos, other)
        self.stones[stone] -= 1
        self.stones[other] += 1

    def enumerate_moves(self, color: Stone) -> MoveList:
        """
        Get every legal move for color at the current state.
        Also records the number of moves found for game_over().
        """
        moves = Rules.get_valid_moves(self.board, color)
        self.move_counts[color] = len(moves)
        return moves

    # ==================== OPERATIONS ====================

    def apply(self, op: Operation):
        if isinstance(op, PlaceOp):
            self.place(op.position, op.color)
        else:
            for pos in op.positions:
                self.flip(pos)

    def revert(self, op: Operation):
        if isinstance(op, PlaceOp):
            self.remove(op.position)
        else:
            for pos in op.positions:
                self.flip(pos)

    def apply_move(self, candidate: MoveCandidate, color: Stone) -> UndoRecord:
        """Place color at the candidate and flip its captures."""
        record = UndoRecord([
            PlaceOp(candidate.position, color),
            FlipOp(tuple(candidate.captures)),
        ])
        for op in record.ops:
            self.apply(op)
        return record

    def undo(self, record: UndoRecord):
        """Exactly reverse a record returned by apply_move."""
        for op in reversed(record.ops):
            self.revert(op)

    def __str__(self) -> str:
        """String representation of the board, one line per x."""
        symbols = {EMPTY: '.', BLACK: 'X', WHITE: 'O'}
        lines = []
        for x in range(self.size):
            lines.append(' '.join(symbols[self.board.get(Position(x, y))]
                                  for y in range(self.size)))
        lines.append(f"Black: {self.black_count}  White: {self.white_count}")
        return '\n'.join(lines)
