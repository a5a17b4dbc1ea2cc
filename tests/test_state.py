"""Tests for Reversi rules and game state."""

import sys
sys.path.insert(0, '.')

import pytest

from conftest import state_from_rows, snapshot
from reversi.game.board import BLACK, WHITE, EMPTY
from reversi.game.history import FlipOp, PlaceOp
from reversi.game.moves import MoveCandidate, MoveList
from reversi.game.position import Position
from reversi.game.rules import Rules
from reversi.game.state import GameState


def assert_conserved(state: GameState):
    assert state.black_count + state.white_count + state.empty_count == state.size ** 2
    cells = snapshot(state)
    assert cells.count(BLACK) == state.black_count
    assert cells.count(WHITE) == state.white_count
    assert cells.count(EMPTY) == state.empty_count


class TestInitialState:
    """Starting position."""

    @pytest.mark.parametrize("size", [4, 6, 8, 10])
    def test_four_center_stones(self, size):
        """Two stones of each color on the center diagonals."""
        state = GameState(size)
        low, high = size // 2 - 1, size // 2

        assert state.black_count == 2
        assert state.white_count == 2
        assert state.empty_count == size * size - 4
        assert state.stone_at(Position(low, low)) == BLACK
        assert state.stone_at(Position(high, high)) == BLACK
        assert state.stone_at(Position(low, high)) == WHITE
        assert state.stone_at(Position(high, low)) == WHITE
        for pos, stone in state.board.cells():
            if pos.x not in (low, high) or pos.y not in (low, high):
                assert stone == EMPTY
        assert_conserved(state)

    def test_fresh_game_not_over(self):
        """Move counts are unknown until moves are enumerated."""
        assert not GameState(8).game_over()


class TestMutation:
    """place / remove / flip bookkeeping."""

    def test_place_and_remove(self):
        """Placing and removing keep the counts in step."""
        state = GameState(4)
        state.place(Position(0, 0), BLACK)
        assert state.stone_at(Position(0, 0)) == BLACK
        assert state.black_count == 3
        state.remove(Position(0, 0))
        assert state.stone_at(Position(0, 0)) == EMPTY
        assert state.black_count == 2
        assert_conserved(state)

    def test_remove_empty_is_noop(self):
        """Removing from an empty cell changes nothing."""
        state = GameState(4)
        state.remove(Position(0, 0))
        assert state.black_count == 2 and state.white_count == 2

    def test_flip(self):
        """Flip moves one stone between the color counts."""
        state = GameState(4)
        state.flip(Position(1, 1))
        assert state.stone_at(Position(1, 1)) == WHITE
        assert state.black_count == 1
        assert state.white_count == 3
        state.flip(Position(1, 1))
        assert state.stone_at(Position(1, 1)) == BLACK
        assert_conserved(state)

    def test_flip_empty_rejected(self):
        """An empty cell cannot be flipped."""
        state = GameState(4)
        with pytest.raises(ValueError):
            state.flip(Position(0, 0))

    def test_other_color(self):
        """Opposite colors; EMPTY stays EMPTY."""
        assert GameState.other_color(BLACK) == WHITE
        assert GameState.other_color(WHITE) == BLACK
        assert GameState.other_color(EMPTY) == EMPTY

    def test_score_delta(self):
        """Own stones minus opponent stones."""
        state = GameState(4)
        state.flip(Position(1, 1))
        assert state.score_delta(WHITE) == 2
        assert state.score_delta(BLACK) == -2


class TestCaptureRules:
    """Directional capture sweep."""

    def test_single_direction(self):
        """A run closed by an own stone is captured."""
        state = state_from_rows([
            "....",
            ".OX.",
            "....",
            "....",
        ])
        captured = Rules.get_captured_positions(state.board, Position(1, 0), BLACK)
        assert captured == [Position(1, 1)]

    def test_run_ending_on_empty_discarded(self):
        """A run ending on an empty cell captures nothing."""
        state = state_from_rows([
            "....",
            ".OO.",
            "....",
            "....",
        ])
        assert Rules.get_captured_positions(state.board, Position(1, 0), BLACK) == []

    def test_run_reaching_border_discarded(self):
        """A run running off the board captures nothing."""
        state = state_from_rows([
            "....",
            ".OOO",
            "....",
            "....",
        ])
        assert Rules.get_captured_positions(state.board, Position(1, 0), BLACK) == []

    def test_long_run(self):
        """Every stone of a long run is captured."""
        state = state_from_rows([
            "......",
            ".OOOOX",
            "......",
            "......",
            "......",
            "......",
        ])
        captured = Rules.get_captured_positions(state.board, Position(1, 0), BLACK)
        assert captured == [Position(1, 1), Position(1, 2), Position(1, 3), Position(1, 4)]

    def test_multiple_directions_summed(self):
        """Captures from all directions are combined."""
        state = state_from_rows([
            "X.X.",
            "OO..",
            "....",
            "....",
        ])
        # From (2, 0): direction (-1, 0) takes (1, 0), direction (-1, 1) takes (1, 1)
        captured = Rules.get_captured_positions(state.board, Position(2, 0), BLACK)
        assert sorted(captured) == [Position(1, 0), Position(1, 1)]

    def test_is_valid_move(self):
        """Valid only on an empty on-board cell that captures."""
        state = GameState(8)
        assert Rules.is_valid_move(state.board, Position(2, 3), WHITE)
        assert not Rules.is_valid_move(state.board, Position(3, 3), WHITE)  # occupied
        assert not Rules.is_valid_move(state.board, Position(0, 0), WHITE)
        assert not Rules.is_valid_move(state.board, Position(8, 0), WHITE)


class TestEnumerateMoves:
    """Legal move enumeration."""

    def test_initial_white_moves(self):
        """White has four single-capture moves at the start."""
        state = GameState(8)
        moves = state.enumerate_moves(WHITE)
        assert moves.positions() == [Position(2, 3), Position(3, 2),
                                     Position(4, 5), Position(5, 4)]
        assert all(c.value == 1 for c in moves)

    def test_initial_black_moves(self):
        """Black's opening moves, in traversal order."""
        state = GameState(8)
        moves = state.enumerate_moves(BLACK)
        assert moves.positions() == [Position(2, 4), Position(3, 5),
                                     Position(4, 2), Position(5, 3)]

    @pytest.mark.parametrize("size", [4, 6, 8, 10])
    def test_candidates_are_empty_and_capture(self, size):
        """Every candidate is empty and captures opponent stones only."""
        state = GameState(size)
        color = WHITE
        for _ in range(6):
            moves = state.enumerate_moves(color)
            if not moves:
                break
            for candidate in moves:
                assert state.stone_at(candidate.position) == EMPTY
                assert candidate.value >= 1
                for pos in candidate.captures:
                    assert state.stone_at(pos) == GameState.other_color(color)
            state.apply_move(moves[0], color)
            color = GameState.other_color(color)

    def test_deterministic_order(self):
        """The same state always gives the same list."""
        state = GameState(6)
        state.apply_move(state.enumerate_moves(WHITE)[0], WHITE)
        first = state.enumerate_moves(BLACK)
        second = state.enumerate_moves(BLACK)
        assert [(c.position, c.captures) for c in first] == \
               [(c.position, c.captures) for c in second]

    def test_move_counts_cached(self):
        """Enumeration records the count for that color only."""
        state = GameState(8)
        state.enumerate_moves(WHITE)
        assert state.move_counts[WHITE] == 4
        assert state.move_counts[BLACK] == -1


class TestGameOver:
    """Cached game-over detection."""

    def test_no_moves_for_either_color(self):
        """Over only after both colors were enumerated without moves."""
        state = state_from_rows([
            ".OOO",
            "OOOO",
            "OOOO",
            "OOXO",
        ])
        assert not state.enumerate_moves(BLACK)
        assert not state.game_over()  # white still unknown
        assert not state.enumerate_moves(WHITE)
        assert state.game_over()
        assert_conserved(state)

    def test_single_color_board(self):
        """A board of one color with a hole is over."""
        state = state_from_rows([
            "XXXX",
            "XXXX",
            "XX.X",
            "XXXX",
        ])
        state.enumerate_moves(WHITE)
        state.enumerate_moves(BLACK)
        assert state.game_over()

    def test_not_over_while_one_side_can_move(self):
        """Not over at the start."""
        state = GameState(8)
        state.enumerate_moves(WHITE)
        state.enumerate_moves(BLACK)
        assert not state.game_over()


class TestApplyUndo:
    """Reversible move application."""

    def test_record_contents(self):
        """The record holds the placement and the flips."""
        state = GameState(8)
        candidate = state.enumerate_moves(WHITE)[0]
        record = state.apply_move(candidate, WHITE)
        assert record.ops == [PlaceOp(Position(2, 3), WHITE), FlipOp((Position(3, 3),))]
        assert record.placed == Position(2, 3)
        assert record.flipped == [Position(3, 3)]
        assert record.color == WHITE

    def test_apply_then_undo_every_candidate(self):
        """Undo restores cells and counts for every candidate."""
        state = GameState(8)
        color = WHITE
        for _ in range(12):
            moves = state.enumerate_moves(color)
            if not moves:
                color = GameState.other_color(color)
                continue
            before = snapshot(state)
            counts = (state.black_count, state.white_count)
            for candidate in moves:
                record = state.apply_move(candidate, color)
                assert_conserved(state)
                state.undo(record)
                assert snapshot(state) == before
                assert (state.black_count, state.white_count) == counts
            state.apply_move(moves[moves.best_index()], color)
            color = GameState.other_color(color)

    def test_end_to_end_first_white_move(self):
        """White's first move on 8x8 leaves Black 1, White 4."""
        state = GameState(8)
        moves = state.enumerate_moves(WHITE)
        assert len(moves) == 4
        state.apply_move(moves[0], WHITE)
        assert state.black_count == 1
        assert state.white_count == 4
        assert state.stone_at(Position(2, 3)) == WHITE
        assert state.stone_at(Position(3, 3)) == WHITE


class TestMoveList:
    """MoveList best lookup."""

    def test_empty(self):
        """An empty list has no best move."""
        moves = MoveList()
        assert not moves
        assert moves.best_index() is None
        assert moves.best() is None

    def test_first_maximum_wins(self):
        """Ties go to the earliest candidate."""
        p = Position
        moves = MoveList([
            MoveCandidate(p(0, 0), [p(0, 1)]),
            MoveCandidate(p(1, 0), [p(1, 1), p(1, 2)]),
            MoveCandidate(p(2, 0), [p(2, 1), p(2, 2)]),
        ])
        assert moves.best_index() == 1
        assert moves.best().position == p(1, 0)
        assert len(moves) == 3
        assert moves[2].value == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
