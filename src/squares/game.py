"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns the Board and the PresenceSet and enforces every rule about who may hold which square,
and when a level counts as completed -->
the service layer adds locking and persistence on top, and passes snapshots onwards to the API layer.
"""

from dataclasses import dataclass, field
from typing import Self

from src.core.exceptions import (
    AdmissionClosedError,
    AlreadyHoldingError,
    InvalidSquareError,
    NotOnlineError,
    SquareTakenError,
)
from src.core.models import BoardSnapshot, PlayerModel
from src.core.shared_types import PlayerId, SquareIndex
from src.squares.board import DEFAULT_SQUARE_COUNT, Board
from src.squares.presence import OnlinePlayer, PresenceSet


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    presence: PresenceSet = field(default_factory=PresenceSet)
    revision: int = 0

    @classmethod
    def new_game(cls, square_count: int = DEFAULT_SQUARE_COUNT) -> Self:
        return cls(board=Board.new_board(square_count))

    def join(self, profile: PlayerModel) -> bool:
        """Put the player online. Returns False if they already were (nothing changes in that case)."""
        if profile.id in self.presence:
            return False
        self.presence.add(OnlinePlayer.from_model(profile))
        self.revision += 1
        return True

    def hold(self, player_id: PlayerId, square: SquareIndex) -> bool:
        """
        Let the player occupy a square.

        Preconditions are checked in a fixed order, so a caller always learns about the most fundamental problem first.
        Returns whether the board is now complete. Completing the level is a separate step (`complete_level`),
        which allows the service to persist credits in between.
        """
        player = self._online_player(player_id)

        if not self.board.is_within_bounds(square):
            raise InvalidSquareError(
                f"Square {square} does not exist. Board has {self.board.square_count} squares."
            )

        if len(self.presence) != self.board.square_count:
            raise AdmissionClosedError(
                f"{len(self.presence)} players online for {self.board.square_count} squares. Holding needs exactly as many players as squares."
            )

        if player.is_holding():
            raise AlreadyHoldingError(
                f"Player {player_id!r} already holds square {player.held_square}."
            )

        if not self.board.is_free(square):
            raise SquareTakenError(
                f"Square {square} is held by {self.board.holder(square)!r}."
            )

        self.board.occupy(square, player_id)
        player.held_square = square
        self.revision += 1
        return self.is_level_complete()

    def release(self, player_id: PlayerId) -> bool:
        """Vacate whatever square the player holds. Returns False if there was nothing to release."""
        player = self._online_player(player_id)
        if player.held_square is None:
            return False

        self.board.vacate(player.held_square)
        player.held_square = None
        self.revision += 1
        return True

    def is_level_complete(self) -> bool:
        """
        All squares held AND exactly as many players online as there are squares.

        ---
        NOTE on the hold path the headcount half is already guaranteed by the admission check in `hold`.
        It is kept so this method states the whole rule on its own, independent of how the board got full.
        """
        return self.board.is_full() and len(self.presence) == self.board.square_count

    def level_holders(self) -> list[PlayerId]:
        """Players that would be credited if the level completed right now."""
        return [player.id for player in self.presence.holders()]

    def complete_level(self) -> list[PlayerId]:
        """Credit every holder, then advance the board and clear everybody's square."""
        credited = self.level_holders()
        for player in self.presence:
            if player.is_holding():
                player.levels_completed += 1
            player.held_square = None
        self.board.advance()
        self.revision += 1
        return credited

    def to_snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            level=self.board.level,
            square_count=self.board.square_count,
            occupancy=dict(self.board.occupancy),
            players=tuple(player.to_snapshot() for player in self.presence),
            revision=self.revision,
        )

    # -- Internal helpers --
    def _online_player(self, player_id: PlayerId) -> OnlinePlayer:
        player = self.presence.get(player_id)
        if player is None:
            raise NotOnlineError(f"Player {player_id!r} has not joined the game.")
        return player
