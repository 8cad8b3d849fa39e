"""Domain error codes for statement computation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    UNKNOWN_GENRE = "UNKNOWN_GENRE"
    INVALID_INPUT = "INVALID_INPUT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY,
            message=f"Unknown play: {play_id}",
        )
        self.play_id = play_id


class UnknownGenreError(DomainError):
    """Raised when a play's genre has no registered pricing rule."""

    def __init__(self, genre: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_GENRE,
            message=f"Unknown genre: {genre}",
        )
        self.genre = genre


class InvalidInputError(DomainError):
    """Raised when invoice or catalog input is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=detail,
        )
