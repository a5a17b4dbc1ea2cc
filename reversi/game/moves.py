"""
Move candidates for Reversi.
A candidate is an empty cell together with every opponent stone that
placing there would flip.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .position import Position


@dataclass
class MoveCandidate:
    """A legal target cell and the positions it captures."""
    position: Position
    captures: list[Position] = field(default_factory=list)

    @property
    def value(self) -> int:
        """Number of stones this move flips."""
        return len(self.captures)

    def add_captures(self, positions: list[Position]):
        self.captures.extend(positions)


class MoveList:
    """
    Ordered candidates for one color at one board state.
    The order follows board traversal so indices are stable for a given
    position and can be used to reselect a candidate later.
    """

    def __init__(self, candidates: Optional[list[MoveCandidate]] = None):
        self._candidates: list[MoveCandidate] = list(candidates or [])

    def append(self, candidate: MoveCandidate):
        self._candidates.append(candidate)

    def best_index(self) -> Optional[int]:
        """Index of the first candidate with the most captures, None if empty."""
        best = None
        best_value = -1
        for idx, candidate in enumerate(self._candidates):
            if candidate.value > best_value:
                best = idx
                best_value = candidate.value
        return best

    def best(self) -> Optional[MoveCandidate]:
        idx = self.best_index()
        return None if idx is None else self._candidates[idx]

    def positions(self) -> list[Position]:
        return [c.position for c in self._candidates]

    def __getitem__(self, idx: int) -> MoveCandidate:
        return self._candidates[idx]

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[MoveCandidate]:
        return iter(self._candidates)

    def __repr__(self) -> str:
        return f'MoveList({[(str(c.position), c.value) for c in self._candidates]})'
