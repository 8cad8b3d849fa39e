"""Invoice JSON parser."""
from __future__ import annotations

from typing import Any, Sequence

from theater_billing.domain.errors import InvalidInputError
from theater_billing.domain.models import Customer, Invoice, PerformanceRequest
from theater_billing.infrastructure.parsing.utils import clean_text, load_json, parse_audience


def _to_performance(raw: Any) -> PerformanceRequest:
    if not isinstance(raw, dict):
        raise InvalidInputError("Performance must be an object")
    play_id = clean_text(raw.get("playID", raw.get("play_id")))
    if not play_id:
        raise InvalidInputError("Performance is missing playID")
    return PerformanceRequest(play_id=play_id, audience=parse_audience(raw.get("audience")))


def _to_invoice(raw: Any) -> Invoice:
    if not isinstance(raw, dict):
        raise InvalidInputError("Invoice must be an object")
    customer = clean_text(raw.get("customer"))
    if not customer:
        raise InvalidInputError("Invoice is missing a customer")
    performances = raw.get("performances") or []
    if not isinstance(performances, list):
        raise InvalidInputError(f"Performances for {customer} must be a list")
    return Invoice(
        customer=Customer(name=customer),
        performances=[_to_performance(item) for item in performances],
    )


def json_to_invoices(data: bytes) -> Sequence[Invoice]:
    """Accepts either a single invoice object or a list of them."""
    document = load_json(data)
    if isinstance(document, dict):
        document = [document]
    if not isinstance(document, list):
        raise InvalidInputError("Invoices document must be an object or a list")
    return [_to_invoice(item) for item in document]
