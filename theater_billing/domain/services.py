"""Domain services that turn an invoice into statement data."""
from __future__ import annotations

import logging
from typing import Mapping, Sequence

from .errors import UnknownPlayError
from .models import Customer, EnrichedPerformance, Invoice, Play, PerformanceRequest, StatementData
from .pricing import PricingRuleRegistry, default_registry

log = logging.getLogger(__name__)


class PerformanceEnricher:
    """Resolves each performance to its play and prices it."""

    def __init__(self, registry: PricingRuleRegistry | None = None) -> None:
        if registry is None:
            registry = default_registry()
        self._registry = registry

    def enrich(self, invoice: Invoice, plays: Mapping[str, Play]) -> tuple[EnrichedPerformance, ...]:
        enriched = tuple(self._enrich_one(request, plays) for request in invoice.performances)
        log.debug("Enriched %d performances for %s", len(enriched), invoice.customer)
        return enriched

    def _enrich_one(self, request: PerformanceRequest, plays: Mapping[str, Play]) -> EnrichedPerformance:
        play = self._play_for(request, plays)
        charge = self._registry.price(play.genre, request.audience)
        return EnrichedPerformance(
            play=play,
            audience=request.audience,
            amount=charge.amount,
            volume_credits=charge.volume_credits,
        )

    @staticmethod
    def _play_for(request: PerformanceRequest, plays: Mapping[str, Play]) -> Play:
        play = plays.get(request.play_id)
        if play is None:
            log.warning("Play %r not found in catalog", request.play_id)
            raise UnknownPlayError(request.play_id)
        return play


class StatementAggregator:
    """Sums enriched performances into statement data."""

    def aggregate(self, customer: Customer, performances: Sequence[EnrichedPerformance]) -> StatementData:
        performances = tuple(performances)
        return StatementData(
            customer=customer,
            performances=performances,
            total_amount=sum(p.amount for p in performances),
            total_volume_credits=sum(p.volume_credits for p in performances),
        )
