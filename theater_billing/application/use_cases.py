"""Application services orchestrating the statement workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from theater_billing.application.dto import StatementResponse
from theater_billing.domain.models import Invoice, Play, StatementData
from theater_billing.domain.services import PerformanceEnricher, StatementAggregator
from theater_billing.presentation.statement_report import OutputKind, render

log = logging.getLogger(__name__)


@dataclass(slots=True)
class StatementContext:
    enricher: PerformanceEnricher = field(default_factory=PerformanceEnricher)
    aggregator: StatementAggregator = field(default_factory=StatementAggregator)


class CreateStatementUseCase:
    def __init__(self, context: StatementContext | None = None) -> None:
        self._context = context or StatementContext()

    def execute(self, invoice: Invoice, plays: Mapping[str, Play]) -> StatementData:
        performances = self._context.enricher.enrich(invoice, plays)
        data = self._context.aggregator.aggregate(invoice.customer, performances)
        log.info(
            "Statement for %s: %d performances, total %d, credits %d",
            invoice.customer,
            len(data.performances),
            data.total_amount,
            data.total_volume_credits,
        )
        return data

    def respond(
        self,
        invoice: Invoice,
        plays: Mapping[str, Play],
        kind: OutputKind | str = OutputKind.PLAIN,
    ) -> StatementResponse:
        data = self.execute(invoice, plays)
        return StatementResponse(data=data, rendered=render(data, kind))


def statement(invoice: Invoice, plays: Mapping[str, Play], kind: OutputKind | str = OutputKind.PLAIN) -> str | bytes:
    """Compute and render the statement for one invoice."""
    return CreateStatementUseCase().respond(invoice, plays, kind).rendered
