"""
Position / direction vector on the board.
The same type is used for a cell coordinate and for a unit step
when walking the board in one of the eight directions.
"""

from typing import NamedTuple


class Position(NamedTuple):
    """Immutable (x, y) pair supporting vector addition and subtraction."""
    x: int
    y: int

    def __add__(self, other: 'Position') -> 'Position':
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Position') -> 'Position':
        return Position(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


# Alias matching the name used in the game documentation
PositionVector = Position

# The eight principal directions, clockwise starting north
#
#   (-1, 1)  (0, 1)  (1, 1)
#   (-1, 0)    x     (1, 0)
#   (-1,-1)  (0,-1)  (1,-1)
DIRECTIONS = (
    Position(0, 1), Position(1, 1), Position(1, 0), Position(1, -1),
    Position(0, -1), Position(-1, -1), Position(-1, 0), Position(-1, 1),
)
