"""Billing statements for theatrical performances."""
from theater_billing.application.use_cases import CreateStatementUseCase, StatementContext, statement
from theater_billing.domain.errors import DomainError, UnknownGenreError, UnknownPlayError
from theater_billing.domain.models import Customer, Genre, Invoice, PerformanceRequest, Play, StatementData
from theater_billing.domain.pricing import PricingRule, PricingRuleRegistry, default_registry
from theater_billing.domain.services import PerformanceEnricher, StatementAggregator

__all__ = [
    "CreateStatementUseCase",
    "StatementContext",
    "statement",
    "DomainError",
    "UnknownGenreError",
    "UnknownPlayError",
    "Customer",
    "Genre",
    "Invoice",
    "PerformanceRequest",
    "Play",
    "StatementData",
    "PricingRule",
    "PricingRuleRegistry",
    "default_registry",
    "PerformanceEnricher",
    "StatementAggregator",
]
