"""Implementation of (Player)Repository using SQLAlchemy"""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import PlayerModel
from src.core.shared_types import PlayerId
from src.db.schema import DBPlayer


class SQLPlayerRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_player(self, player_id: PlayerId) -> PlayerModel | None:
        """Get player by ID, if record exists."""
        player_db = self._fetch_player(player_id)
        if player_db:
            return self._to_model(player_db)
        return None

    def get_player_by_email(self, email: str) -> PlayerModel | None:
        """Case-insensitive lookup by email address."""
        query = (
            select(DBPlayer)
            .where(func.lower(DBPlayer.email) == email.lower())
            .execution_options(populate_existing=True)
        )
        player_db = self.db.scalar(query)
        if player_db:
            return self._to_model(player_db)
        return None

    def create_player(self, player: PlayerModel) -> PlayerModel:
        """Store a newly registered player and return the stored data."""
        player_db = DBPlayer(
            id=player.id,
            display_name=player.display_name,
            region=player.region,
            email=player.email,
            levels_completed=player.levels_completed,
        )
        self.db.add(player_db)
        self._commit()
        self.db.refresh(player_db)
        return self._to_model(player_db)

    def credit_level_completion(self, player_id: PlayerId) -> PlayerModel | None:
        """Durably add one completed level to the player's counter."""
        credited = self.credit_level_completions([player_id])
        return credited[0] if credited else None

    def credit_level_completions(self, player_ids: list[PlayerId]) -> list[PlayerModel]:
        """Credit every listed player and commit once. On failure nothing is credited."""
        query = (
            select(DBPlayer)
            .where(DBPlayer.id.in_(player_ids))
            .execution_options(populate_existing=True)
        )
        players_db = list(self.db.scalars(query))
        for player_db in players_db:
            player_db.levels_completed += 1
        self._commit()
        for player_db in players_db:
            self.db.refresh(player_db)
        return [self._to_model(player_db) for player_db in players_db]

    def list_players(self, region: str | None = None) -> list[PlayerModel]:
        """All players, or only those from the given region (case-insensitive)."""
        query = select(DBPlayer).execution_options(populate_existing=True)
        if region is not None:
            query = query.where(func.lower(DBPlayer.region) == region.lower())
        return [self._to_model(player_db) for player_db in self.db.scalars(query)]

    def _fetch_player(self, player_id: PlayerId) -> DBPlayer | None:
        # another session may have credited levels since this one loaded the row
        query = (
            select(DBPlayer)
            .where(DBPlayer.id == player_id)
            .execution_options(populate_existing=True)
        )
        return self.db.scalar(query)

    def _commit(self) -> None:
        """Commit, or roll back and raise a RepositoryError so callers only deal with GameError types."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not persist player data: {exc}") from exc

    def _to_model(self, player_db: DBPlayer) -> PlayerModel:
        """Convert SQLAlchemy model to data transfer model."""
        return PlayerModel(
            id=player_db.id,
            display_name=player_db.display_name,
            region=player_db.region,
            email=player_db.email,
            levels_completed=player_db.levels_completed,
        )
