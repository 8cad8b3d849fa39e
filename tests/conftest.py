"""Shared fixtures: the BigCo invoice and its play catalog."""
import pytest

from theater_billing.domain.models import Customer, Invoice, PerformanceRequest, Play


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play("Hamlet", "tragedy"),
        "as-like": Play("As You Like It", "comedy"),
        "othello": Play("Othello", "tragedy"),
    }


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer=Customer("BigCo"),
        performances=[
            PerformanceRequest("hamlet", 55),
            PerformanceRequest("as-like", 35),
            PerformanceRequest("othello", 40),
        ],
    )
