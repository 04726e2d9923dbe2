"""Protocol repository for the player directory (implemented with SQLAlchemy in sql_repository.py)"""

from typing import Protocol

from src.core.models import PlayerModel
from src.core.shared_types import PlayerId


class PlayerRepository(Protocol):
    """Persistence layer orchestration"""

    def get_player(self, player_id: PlayerId) -> PlayerModel | None:
        """Get player by ID, if record exists."""
        ...

    def get_player_by_email(self, email: str) -> PlayerModel | None:
        """Case-insensitive lookup by email address."""
        ...

    def create_player(self, player: PlayerModel) -> PlayerModel:
        """Store a newly registered player and return the stored data."""
        ...

    def credit_level_completion(self, player_id: PlayerId) -> PlayerModel | None:
        """Durably add one completed level to the player's counter. Must be committed before returning."""
        ...

    def credit_level_completions(self, player_ids: list[PlayerId]) -> list[PlayerModel]:
        """Credit one completed level to every listed player in a single transaction: all of them or none.

        Unknown ids are skipped. Returns the credited players.
        """
        ...

    def list_players(self, region: str | None = None) -> list[PlayerModel]:
        """All players, or only those from the given region (case-insensitive)."""
        ...
