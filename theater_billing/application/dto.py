"""Application-level DTOs for statement generation."""
from __future__ import annotations

from dataclasses import dataclass

from theater_billing.domain.models import StatementData


@dataclass(slots=True, frozen=True)
class StatementResponse:
    data: StatementData
    rendered: str | bytes
