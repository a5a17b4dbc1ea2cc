"""
Display surface for Reversi.
The controller only talks to the DisplaySurface protocol; CellGrid is the
in-memory implementation that renderers draw from.
"""

from typing import Iterable, Optional, Protocol

from ..game.board import Board, Stone, BLACK, WHITE, EMPTY
from ..game.moves import MoveCandidate
from ..game.position import Position

STONE_CHARS = {BLACK: 'X', WHITE: 'O', EMPTY: '.'}


def stone_to_char(stone: Stone) -> str:
    """Get the display character for a stone."""
    return STONE_CHARS[stone]


def value_label(value: int) -> str:
    """Label for a candidate: its capture count, '+' above nine."""
    return str(value) if value <= 9 else '+'


class DisplaySurface(Protocol):
    """What the game core needs from a display."""

    def show_status(self, text: str) -> None: ...

    def mark_cell(self, pos: Position, reverse: bool) -> None: ...

    def unmark_cell(self, pos: Position, reverse: bool) -> None: ...

    def mark_cells(self, candidates: Iterable[MoveCandidate], reverse: bool) -> None: ...

    def unmark_cells(self, candidates: Iterable[MoveCandidate]) -> None: ...

    def set_char(self, pos: Position, char: str) -> None: ...

    def redraw(self) -> None: ...


class Renderable(Protocol):
    """Anything that can draw a CellGrid."""

    def draw(self, grid: 'CellGrid') -> None: ...


class CellGrid:
    """
    Character grid implementing DisplaySurface.

    Keeps the character of each cell, the label of every marked candidate,
    the highlighted cell and a status line. Attached renderables are asked
    to draw the grid on redraw().
    """

    def __init__(self, size: int):
        self.size = size
        self.chars: Board[str] = Board(size, STONE_CHARS[EMPTY])
        self.labels: dict[Position, str] = {}
        self.highlight: Optional[Position] = None
        # Reverse highlighting is used while White is to move
        self.reverse = False
        self.status = ""
        # Second text line under the board, e.g. the last search result
        self.info = ""
        self.help_lines: list[str] = []
        self._renderables: list[Renderable] = []

    def attach(self, renderable: Renderable):
        self._renderables.append(renderable)

    def show_status(self, text: str) -> None:
        self.status = text

    def show_info(self, text: str):
        self.info = text

    def show_help(self, lines: list[str]):
        self.help_lines = list(lines)

    def hide_help(self):
        self.help_lines = []

    def mark_cell(self, pos: Position, reverse: bool) -> None:
        self.highlight = pos
        self.reverse = reverse

    def unmark_cell(self, pos: Position, reverse: bool) -> None:
        if self.highlight == pos:
            self.highlight = None

    def mark_cells(self, candidates: Iterable[MoveCandidate], reverse: bool) -> None:
        self.reverse = reverse
        for candidate in candidates:
            self.labels[candidate.position] = value_label(candidate.value)

    def unmark_cells(self, candidates: Iterable[MoveCandidate]) -> None:
        for candidate in candidates:
            self.labels.pop(candidate.position, None)
        self.highlight = None

    def set_char(self, pos: Position, char: str) -> None:
        self.chars.set(pos, char)

    def char_at(self, pos: Position) -> str:
        return self.chars.get(pos)

    def redraw(self) -> None:
        for renderable in self._renderables:
            renderable.draw(self)

    def render_text(self) -> str:
        """
        Plain text picture of the grid.
        Marked candidates show their label, the highlighted one is bracketed.
        Rows are printed with y descending so y grows upwards.
        """
        lines = [self.status] if self.status else []
        header = '   ' + ''.join(f'{x:^3d}' for x in range(self.size))
        lines.append(header)
        for y in reversed(range(self.size)):
            row = f'{y:2d} '
            for x in range(self.size):
                pos = Position(x, y)
                char = self.labels.get(pos, self.chars.get(pos))
                row += f'[{char}]' if pos == self.highlight else f' {char} '
            lines.append(row.rstrip())
        if self.info:
            lines.append(self.info)
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render_text()
