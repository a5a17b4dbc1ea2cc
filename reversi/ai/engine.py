"""
AI Engine for Reversi.
Implements depth-limited Minimax with Alpha-Beta Pruning.

The search works directly on the shared GameState: every move is applied
and taken back through an UndoRecord, no board is ever copied. A
threading.Event handed in by the caller lets another thread stop the
search early.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Optional

from ..game.board import Stone
from ..game.position import Position
from ..game.state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveChoice:
    """Chosen move: its position and its index in the root MoveList."""
    position: Optional[Position]
    index: int

    @property
    def found(self) -> bool:
        return self.index >= 0


NO_MOVE = MoveChoice(None, -1)


@dataclass
class SearchStats:
    """Statistics from the last search."""
    depth: int = 0
    nodes_evaluated: int = 0
    cutoffs: int = 0
    best_score: Optional[int] = None
    thinking_time: float = 0.0
    cancelled: bool = False


class SearchEngine:
    """
    Reversi AI using Minimax with Alpha-Beta Pruning.

    Max nodes move for the root color, min nodes for its opponent; plies
    strictly alternate. Leaves are scored as root stones minus opponent
    stones. A side without a legal move passes at the same depth.
    """

    def __init__(self, cancel_event: Optional[threading.Event] = None):
        self.cancel_event = cancel_event if cancel_event is not None else threading.Event()
        self.stats = SearchStats()

    def cancel(self):
        """Ask a running search to stop as soon as possible."""
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def compute_best_move(self, state: GameState, color: Stone, depth: int,
                          clear_cancel: bool = True) -> MoveChoice:
        """
        Get the best move for color, looking depth plies ahead.

        Args:
            state: Game state, mutated during search and restored afterwards
            color: Color to play
            depth: Number of plies to search
            clear_cancel: Reset the cancel flag first. Callers that reset it
                themselves before handing the search to another thread pass False.

        Returns:
            MoveChoice for the best move, or NO_MOVE if color cannot move
        """
        if clear_cancel:
            self.cancel_event.clear()
        self.stats = SearchStats(depth=depth)
        start_time = time.time()

        moves = state.enumerate_moves(color)
        if not moves:
            return NO_MOVE

        opp_color = state.other_color(color)
        alpha = -state.cell_count
        beta = state.cell_count
        best_index = None
        best_score = -state.cell_count - 1

        for idx, candidate in enumerate(moves):
            if self.cancelled:
                break

            record = state.apply_move(candidate, color)
            score = self._min_score(state, opp_color, depth - 1, alpha, beta)
            state.undo(record)

            # An interrupted subtree does not count
            if self.cancelled:
                break

            if score > best_score:
                best_score = score
                best_index = idx

            alpha = max(alpha, score)
            if alpha >= beta:
                self.stats.cutoffs += 1
                break

        if best_index is None:
            # Cancelled before any subtree finished: fall back to most captures
            best_index = moves.best_index()
        else:
            self.stats.best_score = best_score

        self.stats.cancelled = self.cancelled
        self.stats.thinking_time = time.time() - start_time
        logger.debug("search %s depth=%d: move %s score=%s nodes=%d cutoffs=%d "
                     "cancelled=%s in %.3fs", color.name, depth,
                     moves[best_index].position, self.stats.best_score,
                     self.stats.nodes_evaluated, self.stats.cutoffs,
                     self.stats.cancelled, self.stats.thinking_time)

        return MoveChoice(moves[best_index].position, best_index)

    def _max_score(self, state: GameState, color: Stone, depth: int,
                   alpha: int, beta: int) -> int:
        """Score of a node where the root color (color) is to move."""
        self.stats.nodes_evaluated += 1

        if self.cancelled or depth <= 0:
            return self._evaluate(state, color)

        opp_color = state.other_color(color)
        moves = state.enumerate_moves(color)
        if not moves:
            # Both counts are fresh here, so the cached check is exact
            state.enumerate_moves(opp_color)
            if state.game_over():
                return self._evaluate(state, color)
            # Pass: opponent moves again at the same depth
            return self._min_score(state, opp_color, depth, alpha, beta)

        best_score = -state.cell_count
        for candidate in moves:
            if self.cancelled:
                break

            record = state.apply_move(candidate, color)
            score = self._min_score(state, opp_color, depth - 1, alpha, beta)
            state.undo(record)

            best_score = max(best_score, score)
            alpha = max(alpha, best_score)
            if alpha >= beta:
                self.stats.cutoffs += 1
                break

        return best_score

    def _min_score(self, state: GameState, color: Stone, depth: int,
                   alpha: int, beta: int) -> int:
        """Score of a node where the opponent of the root color is to move."""
        self.stats.nodes_evaluated += 1
        root_color = state.other_color(color)

        if self.cancelled or depth <= 0:
            return self._evaluate(state, root_color)

        moves = state.enumerate_moves(color)
        if not moves:
            state.enumerate_moves(root_color)
            if state.game_over():
                return self._evaluate(state, root_color)
            return self._max_score(state, root_color, depth, alpha, beta)

        best_score = state.cell_count
        for candidate in moves:
            if self.cancelled:
                break

            record = state.apply_move(candidate, color)
            score = self._max_score(state, root_color, depth - 1, alpha, beta)
            state.undo(record)

            best_score = min(best_score, score)
            beta = min(beta, best_score)
            if alpha >= beta:
                self.stats.cutoffs += 1
                break

        return best_score

    @staticmethod
    def _evaluate(state: GameState, color: Stone) -> int:
        """Material score: own stones minus opponent stones."""
        return state.score_delta(color)

    def get_debug_info(self) -> dict:
        """Get debug information as dictionary."""
        return {
            'thinking_time': self.stats.thinking_time,
            'search_depth': self.stats.depth,
            'nodes_evaluated': self.stats.nodes_evaluated,
            'cutoffs': self.stats.cutoffs,
            'best_score': self.stats.best_score,
            'cancelled': self.stats.cancelled,
        }
