"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from .models import Invoice, Play


class PlayCatalogRepository(Protocol):
    """Provides the play catalog keyed by play id."""

    def load_plays(self) -> Mapping[str, Play]:
        ...


class InvoiceRepository(Protocol):
    """Provides invoices to bill."""

    def list_invoices(self) -> Sequence[Invoice]:
        ...
