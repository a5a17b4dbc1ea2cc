#!/usr/bin/env python3
"""
Reversi - Human vs Computer Board Game
Main entry point for the game.
"""

import logging
import sys
from enum import Enum
from typing import Optional

from reversi.config import GameConfig, parse_args, configure_logging
from reversi.controller import GameController
from reversi.game.board import Stone, BLACK
from reversi.game.state import GameState
from reversi.ui.display import CellGrid
from reversi.ui.renderer import Renderer, HELP_TEXT
from reversi.ui.input import InputHandler, InputAction

logger = logging.getLogger("reversi.main")


class TurnPhase(Enum):
    """What the game loop is waiting for."""
    HUMAN = "human"          # Human selects and plays a move
    THINKING = "thinking"    # Computer search running in the background
    PASS = "pass"            # Current color cannot move, waiting for ENTER
    GAME_OVER = "game_over"


class ReversiGame:
    """One pygame session: human against the computer."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.renderer = Renderer(config.board_size)
        self.input_handler = InputHandler(self.renderer)

        self.controller: Optional[GameController] = None
        self.search = None
        self.running = True
        self._new_game()

    def _new_game(self):
        """Start a new game."""
        if self.controller is not None:
            self.controller.shutdown()

        self.grid = CellGrid(self.config.board_size)
        self.grid.attach(self.renderer)
        self.state = GameState(self.config.board_size)
        self.controller = GameController(self.state, self.grid)
        self.turn: Stone = self.config.starting_color
        self.search = None
        self._start_turn()

    def run(self):
        """Main game loop."""
        while self.running:
            self._handle_input()

            if self.phase == TurnPhase.THINKING and self.search.done():
                self._finish_search()

            self.grid.redraw()
            self.renderer.tick(30)

        self.controller.shutdown()
        self.renderer.quit()

    def _status(self, text: str):
        self.grid.show_status(
            f"W={self.controller.white_count:2d} B={self.controller.black_count:2d} "
            f"V={self.controller.possible_flips():2d} - {text}"
        )

    def _start_turn(self):
        """Compute the moves of the color to play and decide what to wait for."""
        can_move = self.controller.prepare_turn(self.turn)
        name = self.turn.name

        if self.controller.is_game_over():
            self.phase = TurnPhase.GAME_OVER
            self._status(f"Game Over! {self._result()}")
            logger.info("game over: %s", self._result())
        elif not can_move:
            self.phase = TurnPhase.PASS
            self._status(f"{name} No Move press ENTER")
            logger.info("%s has no move and passes", name)
        elif self.turn == self.config.computer_color:
            self.phase = TurnPhase.THINKING
            self._status("Calculating... press C to abort")
            self.search = self.controller.start_computed_move(self.turn, self.config.depth)
        else:
            self.phase = TurnPhase.HUMAN
            self._status(f"Move for {name}...")

    def _result(self) -> str:
        delta = self.controller.current_score_delta(BLACK)
        if delta > 0:
            return "BLACK wins"
        if delta < 0:
            return "WHITE wins"
        return "Draw"

    def _finish_search(self):
        """Play the move found by the background search."""
        choice = self.search.result()
        self.search = None
        self.controller.finish_computed_move(self.turn, choice)
        if choice.found:
            self.grid.show_info(self._search_summary(choice))
            self.controller.apply_selected_move(self.turn)
        self._next_turn()

    def _search_summary(self, choice) -> str:
        """' -- (x, y)' for the computer's move, followed by the search stats."""
        info = self.controller.engine.get_debug_info()
        text = (f" -- {choice.position}  nodes {info['nodes_evaluated']:,}"
                f"  cutoffs {info['cutoffs']:,}  {info['thinking_time']:.2f}s")
        if info['cancelled']:
            text += "  (aborted)"
        return text

    def _select_cell(self, pos):
        """Highlight the clicked cell if the human may play there."""
        if not self.controller.is_legal_move(pos, self.turn):
            self._status(f"{pos} is not a legal move")
            return
        self.controller.select_candidate(self.turn, self.controller.index_of(pos))
        self._status(f"Move for {self.turn.name}...")

    def _next_turn(self):
        self.turn = GameState.other_color(self.turn)
        self._start_turn()

    def _handle_input(self):
        """Dispatch the pending commands for the current phase."""
        for command in self.input_handler.poll():
            if command.action == InputAction.QUIT:
                if self.grid.help_lines:
                    self.grid.hide_help()
                else:
                    self.controller.cancel_search()
                    self.running = False

            elif command.action == InputAction.TOGGLE_HELP:
                if self.grid.help_lines:
                    self.grid.hide_help()
                else:
                    self.grid.show_help(HELP_TEXT)

            elif self.grid.help_lines:
                if command.action == InputAction.PLAY_MOVE:
                    self.grid.hide_help()

            elif command.action == InputAction.CANCEL_SEARCH:
                if self.phase == TurnPhase.THINKING:
                    self.controller.cancel_search()

            elif self.phase == TurnPhase.THINKING:
                # The state belongs to the search until it finishes
                continue

            elif command.action == InputAction.NEW_GAME:
                self._new_game()

            elif command.action == InputAction.UNDO:
                self._undo()

            elif command.action == InputAction.NEXT_MOVE:
                if self.phase == TurnPhase.HUMAN:
                    self.controller.cycle_selection(self.turn)

            elif command.action == InputAction.SELECT_CELL:
                if self.phase == TurnPhase.HUMAN:
                    self._select_cell(command.position)

            elif command.action == InputAction.PLAY_MOVE:
                if self.phase == TurnPhase.HUMAN:
                    self.controller.apply_selected_move(self.turn)
                    self._next_turn()
                elif self.phase == TurnPhase.PASS:
                    self._next_turn()

    def _undo(self):
        """Undo moves back to the human's last move."""
        human = self.config.human_color
        if not self.controller.history:
            return

        color = None
        while self.controller.history and color != human:
            color = self.controller.history[-1].color
            self.controller.undo_last_move()

        self.turn = human if color == human else self.config.starting_color
        self.grid.show_info("")
        self._start_turn()


def main():
    """Entry point."""
    # Exits with a usage message on bad arguments
    config = parse_args()
    configure_logging(config.log_level)
    try:
        game = ReversiGame(config)
        game.run()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        sys.exit(0)
    except Exception as e:
        logger.exception("unexpected error")
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
