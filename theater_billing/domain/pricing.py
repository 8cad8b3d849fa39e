"""Genre pricing rules and the registry that dispatches to them."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .errors import UnknownGenreError
from .models import Genre

log = logging.getLogger(__name__)


def _genre_key(genre: Genre | str) -> str:
    return genre.value if isinstance(genre, Genre) else str(genre)


@dataclass(frozen=True)
class Charge:
    amount: int
    volume_credits: int


class PricingRule(ABC):
    """Computes amount and volume credits for one genre."""

    genre: Genre | str

    @abstractmethod
    def amount_for(self, audience: int) -> int:
        ...

    def volume_credits_for(self, audience: int) -> int:
        return max(audience - 30, 0)

    def charge_for(self, audience: int) -> Charge:
        return Charge(
            amount=self.amount_for(audience),
            volume_credits=self.volume_credits_for(audience),
        )


class TragedyPricing(PricingRule):
    genre = Genre.TRAGEDY

    def amount_for(self, audience: int) -> int:
        result = 40000
        if audience > 30:
            result += 1000 * (audience - 30)
        return result


class ComedyPricing(PricingRule):
    genre = Genre.COMEDY

    def amount_for(self, audience: int) -> int:
        result = 30000
        if audience > 20:
            result += 10000 + 500 * (audience - 20)
        result += 300 * audience
        return result

    def volume_credits_for(self, audience: int) -> int:
        # extra credit for every five comedy attendees
        return super().volume_credits_for(audience) + audience // 5


class PricingRuleRegistry:
    """
    Registry for pricing rules keyed by genre value.

    New genres are supported by registering another PricingRule; callers only
    ever go through rule_for() or price().
    """

    def __init__(self, rules: Iterable[PricingRule] = ()) -> None:
        self._rules: dict[str, PricingRule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: PricingRule) -> None:
        self._rules[_genre_key(rule.genre)] = rule

    def genres(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def rule_for(self, genre: str) -> PricingRule:
        key = _genre_key(genre)
        rule = self._rules.get(key)
        if rule is None:
            log.warning("No pricing rule registered for genre %r", key)
            raise UnknownGenreError(key)
        log.debug("Dispatching genre %r to %s", key, type(rule).__name__)
        return rule

    def price(self, genre: str, audience: int) -> Charge:
        return self.rule_for(genre).charge_for(audience)


def default_registry() -> PricingRuleRegistry:
    return PricingRuleRegistry([TragedyPricing(), ComedyPricing()])
