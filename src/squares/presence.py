"""
Players that are online in the current process.

Nobody ever leaves: an entry is created on the first join and lives until the process restarts.
"""

from dataclasses import dataclass
from typing import Iterator, Self

from src.core.models import PlayerModel, PlayerSnapshot
from src.core.shared_types import PlayerId, SquareIndex


@dataclass
class OnlinePlayer:
    id: PlayerId
    display_name: str
    region: str
    levels_completed: int
    held_square: SquareIndex | None = None

    @classmethod
    def from_model(cls, model: PlayerModel) -> Self:
        """Take a transient copy of the durable profile"""
        return cls(
            id=model.id,
            display_name=model.display_name,
            region=model.region,
            levels_completed=model.levels_completed,
        )

    def is_holding(self) -> bool:
        return self.held_square is not None

    def to_snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            id=self.id,
            display_name=self.display_name,
            region=self.region,
            levels_completed=self.levels_completed,
            held_square=self.held_square,
        )


class PresenceSet:
    """Online players by id, in join order."""

    def __init__(self) -> None:
        self._players: dict[PlayerId, OnlinePlayer] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __iter__(self) -> Iterator[OnlinePlayer]:
        return iter(self._players.values())

    def get(self, player_id: PlayerId) -> OnlinePlayer | None:
        return self._players.get(player_id)

    def add(self, player: OnlinePlayer) -> OnlinePlayer:
        """Insert the player unless already online. Returns the entry that is online afterwards."""
        return self._players.setdefault(player.id, player)

    def holders(self) -> list[OnlinePlayer]:
        return [player for player in self._players.values() if player.is_holding()]
