"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

from src.core.shared_types import PlayerId, SquareIndex


@dataclass
class PlayerModel:
    """Durable profile of a registered player, as stored in the player directory."""

    id: PlayerId
    display_name: str
    region: str
    email: str
    levels_completed: int = 0


@dataclass(frozen=True)
class PlayerSnapshot:
    """Point-in-time view of one online player."""

    id: PlayerId
    display_name: str
    region: str
    levels_completed: int
    held_square: SquareIndex | None


@dataclass(frozen=True)
class BoardSnapshot:
    """Point-in-time view of the board and everybody online.

    Never shares mutable state with the live game: `occupancy` is a copy.
    """

    level: int
    square_count: int
    occupancy: dict[SquareIndex, PlayerId]
    players: tuple[PlayerSnapshot, ...] = field(default_factory=tuple)
    revision: int = 0


@dataclass(frozen=True)
class HoldResult:
    """Outcome of a successful hold. `board` is the post-transition board if the level completed."""

    board: BoardSnapshot
    level_completed: bool
