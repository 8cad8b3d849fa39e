from decimal import Decimal

import pytest

from theater_billing.domain.models import Customer, EnrichedPerformance, Play, StatementData
from theater_billing.presentation.formatting import format_currency, format_minor_units
from theater_billing.presentation.statement_report import (
    OutputKind,
    performances_to_rows,
    render,
    render_csv,
    render_html,
    render_plain,
)


def make_statement(customer: str = "BigCo") -> StatementData:
    performances = (
        EnrichedPerformance(play=Play("Hamlet", "tragedy"), audience=55, amount=65000, volume_credits=25),
        EnrichedPerformance(play=Play("As You Like It", "comedy"), audience=35, amount=58000, volume_credits=12),
    )
    return StatementData(
        customer=Customer(customer),
        performances=performances,
        total_amount=123000,
        total_volume_credits=37,
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("0"), "R$ 0,00"),
        (Decimal("650"), "R$ 650,00"),
        (Decimal("1730"), "R$ 1.730,00"),
        (Decimal("1234567.5"), "R$ 1.234.567,50"),
        (Decimal("-12.3"), "-R$ 12,30"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_minor_units_divides_by_hundred():
    assert format_minor_units(173000) == "R$ 1.730,00"
    assert format_minor_units(5) == "R$ 0,05"


def test_rows_follow_performance_order():
    rows = performances_to_rows(make_statement())

    assert [row["play"] for row in rows] == ["Hamlet", "As You Like It"]
    assert rows[0] == {"play": "Hamlet", "seats": "55", "cost": "R$ 650,00"}


def test_render_plain():
    expected = "\n".join(
        [
            "Statement for BigCo",
            "  Hamlet: R$ 650,00 (55 seats)",
            "  As You Like It: R$ 580,00 (35 seats)",
            "Amount owed is R$ 1.230,00",
            "You earned 37 credits",
        ]
    )

    assert render_plain(make_statement()) == expected


def test_render_html_table():
    output = render_html(make_statement("Smith & Sons"))

    assert output.startswith("<h1>Statement for Smith &amp; Sons</h1>")
    assert "<tr><th>play</th><th>seats</th><th>cost</th></tr>" in output
    assert "<tr><td>Hamlet</td><td>55</td><td>R$ 650,00</td></tr>" in output
    assert "<p>Amount owed is <em>R$ 1.230,00</em></p>" in output
    assert output.endswith("<p>You earned <em>37</em> credits</p>")
    assert output.index("Hamlet") < output.index("As You Like It")


def test_render_csv():
    lines = render_csv(make_statement()).decode("utf-8").splitlines()

    assert lines[0] == "play,seats,cost"
    assert lines[1] == 'Hamlet,55,"R$ 650,00"'
    assert len(lines) == 3


def test_render_dispatches_on_kind():
    data = make_statement()

    assert render(data) == render_plain(data)
    assert render(data, "html") == render_html(data)
    assert render(data, OutputKind.CSV) == render_csv(data)


def test_render_rejects_unknown_kind():
    with pytest.raises(ValueError):
        render(make_statement(), "pdf")
