"""
Game controller for Reversi.
Ties the game state, the search engine and the display together for one
human-vs-computer session and keeps the undo history.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from .ai.engine import SearchEngine, MoveChoice
from .game.board import Stone, WHITE
from .game.history import UndoRecord
from .game.moves import MoveList
from .game.position import Position
from .game.rules import Rules
from .game.state import GameState
from .ui.display import DisplaySurface, stone_to_char

logger = logging.getLogger(__name__)


class GameController:
    """
    Drives move selection, application and undo on a shared GameState.

    The current MoveList and highlighted index always belong to the color
    passed to the last prepare_turn call.
    """

    def __init__(self, state: GameState, display: Optional[DisplaySurface] = None,
                 engine: Optional[SearchEngine] = None):
        self.state = state
        self.display = display
        self.engine = engine or SearchEngine()
        self.moves = MoveList()
        self.selected: Optional[int] = None
        self.history: list[UndoRecord] = []
        self._executor: Optional[ThreadPoolExecutor] = None

        if self.display is not None:
            for pos, stone in self.state.board.cells():
                self.display.set_char(pos, stone_to_char(stone))

    @staticmethod
    def _reverse(color: Stone) -> bool:
        return color == WHITE

    def _view(self, view: bool) -> bool:
        return view and self.display is not None

    # ==================== QUERIES ====================

    @property
    def black_count(self) -> int:
        return self.state.black_count

    @property
    def white_count(self) -> int:
        return self.state.white_count

    @property
    def selected_position(self) -> Optional[Position]:
        if self.selected is None:
            return None
        return self.moves[self.selected].position

    def is_game_over(self) -> bool:
        return self.state.game_over()

    def possible_flips(self) -> int:
        """Captures of the best current candidate, 0 without moves."""
        best = self.moves.best()
        return best.value if best is not None else 0

    def current_score_delta(self, color: Stone) -> int:
        return self.state.score_delta(color)

    def is_legal_move(self, pos: Position, color: Stone) -> bool:
        """True if color may play at pos. Off-board cells are never legal."""
        return Rules.is_valid_move(self.state.board, pos, color)

    def index_of(self, pos: Position) -> Optional[int]:
        """Index of the candidate at pos in the current list, if any."""
        for idx, candidate in enumerate(self.moves):
            if candidate.position == pos:
                return idx
        return None

    # ==================== SELECTION ====================

    def prepare_turn(self, color: Stone, view: bool = True) -> bool:
        """
        Compute the legal moves for color and preselect the one with the
        most captures. Returns True if any move is possible.
        """
        reverse = self._reverse(color)
        if self._view(view):
            self.display.unmark_cells(self.moves)

        self.moves = self.state.enumerate_moves(color)
        self.selected = self.moves.best_index()

        if self._view(view):
            self.display.mark_cells(self.moves, reverse)
            if self.selected is not None:
                self.display.mark_cell(self.selected_position, reverse)
            self.display.redraw()

        return self.selected is not None

    def cycle_selection(self, color: Stone, view: bool = True):
        """Move the highlight to the next candidate, wrapping around."""
        if not self.moves:
            return
        reverse = self._reverse(color)
        if self._view(view):
            self.display.unmark_cell(self.selected_position, reverse)

        self.selected = (self.selected + 1) % len(self.moves)

        if self._view(view):
            self.display.mark_cell(self.selected_position, reverse)

    def select_candidate(self, color: Stone, index: int, view: bool = True):
        """Highlight the candidate at index, e.g. the computed move."""
        if not 0 <= index < len(self.moves):
            raise IndexError(f"no candidate {index} in a list of {len(self.moves)}")
        reverse = self._reverse(color)
        if self._view(view) and self.selected is not None:
            self.display.unmark_cell(self.selected_position, reverse)

        self.selected = index

        if self._view(view):
            self.display.mark_cell(self.selected_position, reverse)

    # ==================== MOVES ====================

    def apply_selected_move(self, color: Stone, view: bool = True) -> UndoRecord:
        """Play the highlighted candidate for color and record it for undo."""
        if self.selected is None:
            raise LookupError("no move selected")
        candidate = self.moves[self.selected]

        if self._view(view):
            self.display.unmark_cells(self.moves)

        record = self.state.apply_move(candidate, color)
        self.history.append(record)

        if self._view(view):
            self.display.set_char(candidate.position, stone_to_char(color))
            for pos in candidate.captures:
                self.display.set_char(pos, stone_to_char(self.state.stone_at(pos)))

        logger.info("%s plays %s flipping %d", color.name, candidate.position, candidate.value)

        self.moves = MoveList()
        self.selected = None
        return record

    def undo_last_move(self, view: bool = True) -> bool:
        """Take back the last applied move. False if there is nothing to undo."""
        if not self.history:
            logger.info("nothing to undo")
            return False

        if self._view(view):
            self.display.unmark_cells(self.moves)

        record = self.history.pop()
        self.state.undo(record)

        if self._view(view):
            for pos in record.flipped:
                self.display.set_char(pos, stone_to_char(self.state.stone_at(pos)))
            self.display.set_char(record.placed, stone_to_char(self.state.stone_at(record.placed)))

        logger.info("undo move at %s", record.placed)

        self.moves = MoveList()
        self.selected = None
        return True

    # ==================== COMPUTER MOVE ====================

    def request_computed_move(self, color: Stone, depth: int, view: bool = True) -> MoveChoice:
        """
        Search for the best move for color and highlight it, ready for
        apply_selected_move.
        """
        choice = self.engine.compute_best_move(self.state, color, depth)
        self.finish_computed_move(color, choice, view)
        return choice

    def start_computed_move(self, color: Stone, depth: int) -> Future:
        """
        Run the search on a worker thread. The state must not be touched
        until the returned future is done; only cancel_search may be called.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="search")
        # Cleared here so a cancel issued right after this call is not lost
        self.engine.cancel_event.clear()
        return self._executor.submit(self.engine.compute_best_move, self.state, color, depth,
                                     clear_cancel=False)

    def finish_computed_move(self, color: Stone, choice: MoveChoice, view: bool = True):
        """Resynchronize the move list after a search and select its result."""
        # The search left the cached move counts of deeper plies behind
        self.prepare_turn(color, view)
        if choice.found:
            self.select_candidate(color, choice.index, view)

    def cancel_search(self):
        self.engine.cancel()

    def shutdown(self):
        if self._executor is not None:
            self.engine.cancel()
            self._executor.shutdown(wait=True)
            self._executor = None
