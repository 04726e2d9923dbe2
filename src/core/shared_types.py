"""
Type definitions used across layers
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    UNKNOWN_PLAYER = "unknown player"
    NOT_ONLINE = "not online"
    INVALID_SQUARE = "invalid square"
    ADMISSION_CLOSED = "admission closed"
    ALREADY_HOLDING = "already holding"
    SQUARE_TAKEN = "square taken"
    DUPLICATE_PLAYER = "duplicate player"
    INVALID_REQUEST = "invalid request"
    REPOSITORY = "repository error"


# --- Square indexes and player ids are plain values at the boundary. Aliases only for readability.
SquareIndex = int
PlayerId = str
