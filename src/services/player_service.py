"""Registration and leaderboard: the parts of the player directory that do not touch the shared board."""

import logging
from uuid import uuid4

from src.api.models import (
    LeaderboardRequest,
    LeaderboardResponse,
    PlayerResponse,
    RegisterRequest,
)
from src.core.exceptions import DuplicatePlayerError, UnknownPlayerError
from src.core.models import PlayerModel
from src.core.shared_types import PlayerId
from src.db.repository import PlayerRepository

logger = logging.getLogger(__name__)


def generate_player_id() -> PlayerId:
    return f"p_{uuid4().hex}"


class PlayerService:
    def __init__(self, repository: PlayerRepository) -> None:
        self.repo = repository

    def register(self, request: RegisterRequest) -> PlayerResponse:
        """Create a new profile. Email addresses are unique regardless of case."""
        if self.repo.get_player_by_email(request.email) is not None:
            raise DuplicatePlayerError(f"Email {request.email!r} is already registered.")

        new_player = PlayerModel(
            id=generate_player_id(),
            display_name=request.display_name,
            region=request.region,
            email=request.email,
            levels_completed=0,
        )
        stored = self.repo.create_player(new_player)
        logger.info("Registered player %s (%s)", stored.id, stored.region)
        return PlayerResponse.from_model(stored)

    def get_player(self, player_id: PlayerId) -> PlayerResponse:
        player = self.repo.get_player(player_id)
        if player is None:
            raise UnknownPlayerError(f"Player with {player_id=} not found.")
        return PlayerResponse.from_model(player)

    def leaderboard(self, request: LeaderboardRequest) -> LeaderboardResponse:
        """Most levels completed first; ties broken alphabetically on display name."""
        players = self.repo.list_players(request.region)
        ranked = sorted(
            players, key=lambda p: (-p.levels_completed, p.display_name.lower())
        )
        return LeaderboardResponse(
            players=[PlayerResponse.from_model(p) for p in ranked]
        )
