"""
Reversible board operations.
Applying a move is recorded as a short list of operations; undoing it
reverts them in reverse order. The controller's undo stack and the
search's backtracking both go through these records.
"""

from dataclasses import dataclass, field
from typing import Union

from .board import Stone
from .position import Position


@dataclass(frozen=True)
class PlaceOp:
    """A stone of `color` placed on an empty cell. Reverted by clearing it."""
    position: Position
    color: Stone


@dataclass(frozen=True)
class FlipOp:
    """Stones that changed color. Reverted by flipping them again."""
    positions: tuple[Position, ...]


Operation = Union[PlaceOp, FlipOp]


@dataclass
class UndoRecord:
    """Everything needed to take back one applied move."""
    ops: list[Operation] = field(default_factory=list)

    def _placement(self) -> PlaceOp:
        for op in self.ops:
            if isinstance(op, PlaceOp):
                return op
        raise LookupError("record has no placement")

    @property
    def placed(self) -> Position:
        return self._placement().position

    @property
    def color(self) -> Stone:
        """Color that made the move."""
        return self._placement().color

    @property
    def flipped(self) -> list[Position]:
        flipped = []
        for op in self.ops:
            if isinstance(op, FlipOp):
                flipped.extend(op.positions)
        return flipped
