"""Domain models for theatrical billing statements.

These dataclasses capture the inputs of a statement request (invoice and play
catalog) and the derived records produced while computing it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .errors import InvalidInputError


class Genre(str, Enum):
    """Play genres with built-in pricing rules."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"


@dataclass(frozen=True)
class Customer:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Play:
    """Catalog entry; genre is kept as the raw string so unknown genres surface at pricing."""

    name: str
    genre: str


@dataclass(frozen=True)
class PerformanceRequest:
    """One invoiced performance."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise InvalidInputError(f"Audience cannot be negative for play {self.play_id}")


@dataclass(frozen=True)
class Invoice:
    customer: Customer
    performances: Sequence[PerformanceRequest] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))


@dataclass(frozen=True)
class EnrichedPerformance:
    """Performance resolved to its play, with amount in minor currency units."""

    play: Play
    audience: int
    amount: int
    volume_credits: int


@dataclass(frozen=True)
class StatementData:
    customer: Customer
    performances: Sequence[EnrichedPerformance]
    total_amount: int
    total_volume_credits: int
