"""Central configuration for the theater billing package."""
from __future__ import annotations

from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(slots=True, frozen=True)
class Settings:
    currency_symbol: str
    thousands_separator: str
    decimal_separator: str
    minor_units_per_major: int
    default_output: str


SETTINGS = Settings(
    currency_symbol="R$",
    thousands_separator=".",
    decimal_separator=",",
    minor_units_per_major=100,
    default_output="plain",
)
