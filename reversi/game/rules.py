"""
Reversi game rules implementation.
A move is legal on an empty cell when, in at least one of the eight
directions, a run of opponent stones is closed by a stone of the mover.
"""

from .board import Board, Stone, EMPTY, BLACK, WHITE
from .moves import MoveCandidate, MoveList
from .position import Position, DIRECTIONS


class Rules:
    """Capture rules for Reversi."""

    @staticmethod
    def opposite(color: Stone) -> Stone:
        """Get the opposite color. EMPTY stays EMPTY."""
        if color == EMPTY:
            return EMPTY
        return WHITE if color == BLACK else BLACK

    @staticmethod
    def check_direction(board: Board[Stone], pos: Position,
                        direction: Position, color: Stone) -> list:
        """
        Walk from pos in direction collecting opponent stones.

        Returns the collected positions if the run ends on a stone of
        `color`, otherwise an empty list (run ends on an empty cell or
        leaves the board).
        """
        opp_color = Rules.opposite(color)
        run = []
        current = pos + direction

        while board.is_valid_pos(current):
            stone = board.get(current)
            if stone == opp_color:
                run.append(current)
            elif stone == EMPTY:
                return []
            else:
                return run
            current = current + direction

        # Border reached without closing stone
        return []

    @staticmethod
    def get_captured_positions(board: Board[Stone], pos: Position, color: Stone) -> list:
        """All stones flipped if `color` played at pos, in direction order."""
        captured = []
        for direction in DIRECTIONS:
            captured.extend(Rules.check_direction(board, pos, direction, color))
        return captured

    @staticmethod
    def is_valid_move(board: Board[Stone], pos: Position, color: Stone) -> bool:
        if not board.is_valid_pos(pos) or board.get(pos) != EMPTY:
            return False
        return any(Rules.check_direction(board, pos, d, color) for d in DIRECTIONS)

    @staticmethod
    def get_valid_moves(board: Board[Stone], color: Stone) -> MoveList:
        """Every legal move for color, in board traversal order."""
        moves = MoveList()
        for pos, stone in board.cells():
            if stone != EMPTY:
                continue
            candidate = MoveCandidate(pos)
            for direction in DIRECTIONS:
                run = Rules.check_direction(board, pos, direction, color)
                if run:
                    candidate.add_captures(run)
            if candidate.value > 0:
                moves.append(candidate)
        return moves
