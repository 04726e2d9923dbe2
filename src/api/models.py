"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import GameError, InvalidRequestError
from src.core.models import BoardSnapshot, HoldResult, PlayerModel, PlayerSnapshot
from src.core.shared_types import ErrorCode, PlayerId, SquareIndex


# --- REQUEST MODELS ---
class JoinRequest(BaseModel):
    player_id: PlayerId


class HoldRequest(BaseModel):
    player_id: PlayerId
    square_index: SquareIndex


class ReleaseRequest(BaseModel):
    player_id: PlayerId


class RegisterRequest(BaseModel):
    display_name: str
    email: str
    region: str

    @field_validator(*["display_name", "email", "region"])
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidRequestError("Display name, email and region are all required.")
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        local, _, domain = value.partition("@")
        if not local or not domain:
            raise InvalidRequestError(f"Cannot interpret {value!r} as an email address.")
        return value


class LeaderboardRequest(BaseModel):
    region: Optional[str] = None


# --- RESPONSE MODELS ---
class PlayerResponse(BaseModel):
    id: PlayerId
    display_name: str
    region: str
    levels_completed: int

    @classmethod
    def from_model(cls, model: PlayerModel) -> Self:
        """Public profile. The email address stays in the directory."""
        return cls(
            id=model.id,
            display_name=model.display_name,
            region=model.region,
            levels_completed=model.levels_completed,
        )


class OnlinePlayerResponse(BaseModel):
    id: PlayerId
    display_name: str
    region: str
    levels_completed: int
    held_square: Optional[SquareIndex]

    @classmethod
    def from_snapshot(cls, snapshot: PlayerSnapshot) -> Self:
        return cls(
            id=snapshot.id,
            display_name=snapshot.display_name,
            region=snapshot.region,
            levels_completed=snapshot.levels_completed,
            held_square=snapshot.held_square,
        )


class BoardResponse(BaseModel):
    level: int
    square_count: int
    occupancy: dict[SquareIndex, PlayerId]
    players: list[OnlinePlayerResponse]
    revision: int

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot) -> Self:
        return cls(
            level=snapshot.level,
            square_count=snapshot.square_count,
            occupancy=dict(snapshot.occupancy),
            players=[OnlinePlayerResponse.from_snapshot(p) for p in snapshot.players],
            revision=snapshot.revision,
        )


class HoldResponse(BaseModel):
    board: BoardResponse
    level_completed: bool

    @classmethod
    def from_result(cls, result: HoldResult) -> Self:
        return cls(
            board=BoardResponse.from_snapshot(result.board),
            level_completed=result.level_completed,
        )


class LeaderboardResponse(BaseModel):
    players: list[PlayerResponse]


class ErrorResponse(BaseModel):
    success: bool = False
    code: ErrorCode
    message: str

    @classmethod
    def from_error(cls, error: GameError) -> Self:
        """Structured result for the caller. Any GameError maps onto one, none is fatal."""
        return cls(code=error.code, message=str(error))
