"""Shared parsing utilities for invoice and catalog ingestion."""
from __future__ import annotations

import json
from io import BytesIO
from pathlib import Path
from typing import Any

from theater_billing.domain.errors import InvalidInputError


def ensure_bytes(source: BytesIO | Path | bytes | str) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, (Path, str)):
        return Path(source).read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def load_json(data: bytes) -> Any:
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidInputError(f"Invalid JSON document: {exc}") from exc


def parse_audience(value: object) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(f"Invalid audience: {value!r}")
    if isinstance(value, int):
        return value
    s = "" if value is None else str(value).strip()
    if s.endswith(".0"):
        s = s[:-2]
    try:
        return int(s)
    except ValueError:
        raise InvalidInputError(f"Invalid audience: {value!r}") from None


def clean_text(value: object) -> str:
    s = "" if value is None else str(value).strip()
    if s.upper() == "NAN":
        return ""
    return s
