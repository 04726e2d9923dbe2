"""
Custom exceptions raised by the domain, service and persistence layers.

Every exception derives from GameError and carries an ErrorCode, so the API layer
can turn any of them into a structured error result without knowing the concrete type.
"""

from src.core.shared_types import ErrorCode


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a request."""

    code: ErrorCode = ErrorCode.INVALID_REQUEST


# --- Core game rules ---
class UnknownPlayerError(GameError):
    """The player directory has no record for this id."""

    code = ErrorCode.UNKNOWN_PLAYER


class NotOnlineError(GameError):
    """Operation requires the player to have joined first."""

    code = ErrorCode.NOT_ONLINE


class InvalidSquareError(GameError):
    """Square index outside of the current board."""

    code = ErrorCode.INVALID_SQUARE


class AdmissionClosedError(GameError):
    """Number of online players does not match the number of squares."""

    code = ErrorCode.ADMISSION_CLOSED


class AlreadyHoldingError(GameError):
    code = ErrorCode.ALREADY_HOLDING


class SquareTakenError(GameError):
    code = ErrorCode.SQUARE_TAKEN


# --- Registration / requests ---
class DuplicatePlayerError(GameError):
    code = ErrorCode.DUPLICATE_PLAYER


class InvalidRequestError(GameError):
    code = ErrorCode.INVALID_REQUEST


# --- Persistence ---
class RepositoryError(GameError):
    code = ErrorCode.REPOSITORY
