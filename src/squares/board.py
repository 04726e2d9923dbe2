"""The Board holds all per-level state: which level we are on, how many squares there are, and who sits where."""

from dataclasses import dataclass, field
from typing import Self

from src.core.shared_types import PlayerId, SquareIndex

# Level 1 starts with this many squares (unless configured otherwise)
DEFAULT_SQUARE_COUNT = 4


@dataclass
class Board:
    level: int
    square_count: int
    occupancy: dict[SquareIndex, PlayerId] = field(default_factory=dict)

    @classmethod
    def new_board(cls, square_count: int = DEFAULT_SQUARE_COUNT) -> Self:
        if square_count < 1:
            raise ValueError(f"A board needs at least one square, got {square_count=}")
        return cls(level=1, square_count=square_count)

    def is_within_bounds(self, square: SquareIndex) -> bool:
        return 0 <= square < self.square_count

    def holder(self, square: SquareIndex) -> PlayerId | None:
        return self.occupancy.get(square)

    def is_free(self, square: SquareIndex) -> bool:
        return square not in self.occupancy

    def is_full(self) -> bool:
        """Every square on the board is held by someone."""
        return len(self.occupancy) == self.square_count

    def occupy(self, square: SquareIndex, player_id: PlayerId) -> None:
        """Assign the square. Rule checks are the Game's job, this only guards the data."""
        if not self.is_within_bounds(square) or not self.is_free(square):
            raise ValueError(f"Cannot occupy square {square} on {self!r}")
        self.occupancy[square] = player_id

    def vacate(self, square: SquareIndex) -> PlayerId | None:
        return self.occupancy.pop(square, None)

    def advance(self) -> None:
        """Move to the next level: one level up, twice the squares, nobody seated."""
        self.level += 1
        self.square_count *= 2
        self.occupancy.clear()
