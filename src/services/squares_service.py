"""Orchestration of communication from API router to the shared game and the player directory (and the reverse direction)."""

import logging
from threading import Lock

from src.api.models import (
    BoardResponse,
    HoldRequest,
    HoldResponse,
    JoinRequest,
    ReleaseRequest,
)
from src.core.config import INITIAL_SQUARE_COUNT
from src.core.exceptions import GameError, RepositoryError, UnknownPlayerError
from src.core.models import HoldResult, PlayerModel
from src.core.shared_types import PlayerId
from src.db.repository import PlayerRepository
from src.squares.game import Game

logger = logging.getLogger(__name__)


class GameCoordinator:
    """
    Single owner of the shared board and the set of online players.

    Every operation runs its whole check-then-mutate sequence under one lock, so operations are linearizable:
    two players grabbing the same square at the same instant never both succeed.
    Callers only ever receive snapshots, never the live Game.
    """

    def __init__(
        self,
        repository: PlayerRepository,
        square_count: int = INITIAL_SQUARE_COUNT,
    ) -> None:
        self.repo = repository
        self._game = Game.new_game(square_count)
        self._lock = Lock()

    # -- API routes logic ---
    def join(self, request: JoinRequest) -> BoardResponse:
        """Player comes online. Joining again is a no-op."""
        with self._lock:
            profile = self._fetch_player(request.player_id)
            if self._game.join(profile):
                logger.info(
                    "Player %s joined (%d online, %d squares)",
                    profile.id,
                    len(self._game.presence),
                    self._game.board.square_count,
                )
            return BoardResponse.from_snapshot(self._game.to_snapshot())

    def hold(self, request: HoldRequest) -> HoldResponse:
        """Occupy a square. Completes the level if this was the last free square and everybody is on the board."""
        with self._lock:
            try:
                board_complete = self._game.hold(request.player_id, request.square_index)
            except GameError as exc:
                logger.debug(
                    "Hold of square %d by %s rejected: %s",
                    request.square_index,
                    request.player_id,
                    exc.code,
                )
                raise

            logger.debug("Player %s holds square %d", request.player_id, request.square_index)
            if board_complete:
                try:
                    self._complete_level()
                except RepositoryError:
                    # a failed hold leaves no trace, so the caller can simply retry it
                    self._game.release(request.player_id)
                    logger.warning(
                        "Could not credit level %d, hold of square %d by %s withdrawn",
                        self._game.board.level,
                        request.square_index,
                        request.player_id,
                    )
                    raise

            result = HoldResult(self._game.to_snapshot(), level_completed=board_complete)
            return HoldResponse.from_result(result)

    def release(self, request: ReleaseRequest) -> BoardResponse:
        """
        Vacate the player's square.
        ----
        Releasing without holding anything is tolerated (a client may have lost the response to its hold).
        """
        with self._lock:
            if self._game.release(request.player_id):
                logger.debug("Player %s released their square", request.player_id)
            return BoardResponse.from_snapshot(self._game.to_snapshot())

    def get_board(self) -> BoardResponse:
        """
        Retrieve current board state.
        ----
        Used in "polling" loop by frontend. Taken under the lock so a half-applied operation is never visible.
        """
        with self._lock:
            return BoardResponse.from_snapshot(self._game.to_snapshot())

    # -- Internal helpers --
    def _complete_level(self) -> None:
        """
        Durably credit every holder, then advance the board. Caller must hold the lock.

        All credits go out in one transaction, and the board only advances once it is committed.
        If persisting fails nobody is credited, the board is untouched and the error propagates.
        """
        holders = self._game.level_holders()
        credited = {player.id for player in self.repo.credit_level_completions(holders)}
        for player_id in holders:
            if player_id not in credited:
                logger.warning("Player %s vanished from the directory, no credit stored", player_id)

        completed_level = self._game.board.level
        self._game.complete_level()
        logger.info(
            "Level %d completed by %s. Next level has %d squares",
            completed_level,
            ", ".join(holders),
            self._game.board.square_count,
        )

    def _fetch_player(self, player_id: PlayerId) -> PlayerModel:
        """Attempt to find the player in the repository and raise error if it fails."""
        player = self.repo.get_player(player_id)
        if player is None:
            raise UnknownPlayerError(f"Player with {player_id=} not found.")
        return player
