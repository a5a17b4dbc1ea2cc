"""
Square board container for Reversi.
A generic N x N grid used both for the stones of the game and for the
character grid of the display.
"""

from enum import IntEnum
from typing import Generic, Iterator, TypeVar

from .position import Position

T = TypeVar('T')

MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 10


class Stone(IntEnum):
    """Content of a board cell. EMPTY means no stone has been placed."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2


EMPTY = Stone.EMPTY
BLACK = Stone.BLACK
WHITE = Stone.WHITE


class BoardSizeError(ValueError):
    """Raised when a board is constructed with an unsupported size."""


def check_board_size(size: int) -> None:
    """Raise BoardSizeError unless size is even and within the allowed range."""
    if size % 2:
        raise BoardSizeError("Board size must be even")
    if size < MIN_BOARD_SIZE:
        raise BoardSizeError(f"Board size must be at least {MIN_BOARD_SIZE}")
    if size > MAX_BOARD_SIZE:
        raise BoardSizeError(f"Board size must be at most {MAX_BOARD_SIZE}")


class Board(Generic[T]):
    """
    N x N grid of cells holding values of type T.

    Cells are addressed by Position(x, y) with 0 <= x, y < N. Iteration
    yields (position, value) pairs with y varying fastest, so the order is
    (0, 0), (0, 1), ..., (0, N-1), (1, 0), ... and never changes.
    """

    def __init__(self, size: int, fill: T):
        check_board_size(size)
        self.size = size
        self._cells: list[list[T]] = [[fill] * size for _ in range(size)]

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def is_valid_pos(self, pos: Position) -> bool:
        """Check if position is within board bounds."""
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def get(self, pos: Position) -> T:
        """Get the value at position. Raises IndexError when off the board."""
        if not self.is_valid_pos(pos):
            raise IndexError(f"position {pos} is off the {self.size}x{self.size} board")
        return self._cells[pos.x][pos.y]

    def set(self, pos: Position, value: T) -> None:
        """Set the value at position. Raises IndexError when off the board."""
        if not self.is_valid_pos(pos):
            raise IndexError(f"position {pos} is off the {self.size}x{self.size} board")
        self._cells[pos.x][pos.y] = value

    def positions(self) -> Iterator[Position]:
        """All positions in traversal order."""
        for x in range(self.size):
            for y in range(self.size):
                yield Position(x, y)

    def cells(self) -> Iterator[tuple[Position, T]]:
        """All (position, value) pairs in traversal order."""
        for pos in self.positions():
            yield pos, self._cells[pos.x][pos.y]

    def __iter__(self) -> Iterator[tuple[Position, T]]:
        return self.cells()

    def __len__(self) -> int:
        return self.cell_count

    def __repr__(self) -> str:
        return f'Board(size={self.size})'
