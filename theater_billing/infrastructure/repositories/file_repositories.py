"""File-backed repositories for invoices and the play catalog."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Mapping, Sequence

from theater_billing.domain.models import Invoice, Play
from theater_billing.domain.repositories import InvoiceRepository, PlayCatalogRepository
from theater_billing.infrastructure.parsing.invoices import json_to_invoices
from theater_billing.infrastructure.parsing.plays import excel_to_plays, json_to_plays
from theater_billing.infrastructure.parsing.utils import ensure_bytes

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


class JsonPlayCatalogRepository(PlayCatalogRepository):
    def __init__(self, source: BytesIO | Path | bytes) -> None:
        self._source = ensure_bytes(source)

    def load_plays(self) -> Mapping[str, Play]:
        return json_to_plays(self._source)


class ExcelPlayCatalogRepository(PlayCatalogRepository):
    def __init__(self, source: BytesIO | Path | bytes) -> None:
        self._source = ensure_bytes(source)

    def load_plays(self) -> Mapping[str, Play]:
        return excel_to_plays(self._source)


class JsonInvoiceRepository(InvoiceRepository):
    def __init__(self, source: BytesIO | Path | bytes) -> None:
        self._source = ensure_bytes(source)

    def list_invoices(self) -> Sequence[Invoice]:
        return json_to_invoices(self._source)


def play_catalog_repository(path: Path | str) -> PlayCatalogRepository:
    path = Path(path)
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return ExcelPlayCatalogRepository(path)
    return JsonPlayCatalogRepository(path)
