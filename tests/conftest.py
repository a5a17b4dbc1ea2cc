"""Shared helpers for the Reversi tests."""

import sys
sys.path.insert(0, '.')

import pytest

from reversi.game.board import BLACK, WHITE, EMPTY
from reversi.game.position import Position
from reversi.game.state import GameState

SYMBOLS = {'X': BLACK, 'O': WHITE, '.': EMPTY}


def state_from_rows(rows: list) -> GameState:
    """
    Build a GameState from a picture: rows[x][y] is 'X' (black),
    'O' (white) or '.' (empty).
    """
    state = GameState(len(rows))
    for pos, _ in list(state.board.cells()):
        state.remove(pos)
    for x, row in enumerate(rows):
        for y, char in enumerate(row):
            if SYMBOLS[char] != EMPTY:
                state.place(Position(x, y), SYMBOLS[char])
    return state


def snapshot(state: GameState) -> list:
    """Every cell in traversal order."""
    return [stone for _, stone in state.board.cells()]


@pytest.fixture
def build_state():
    return state_from_rows
