"""Play catalog parsers (JSON documents and Excel workbooks)."""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Any

import pandas as pd

from theater_billing.domain.errors import InvalidInputError
from theater_billing.domain.models import Play
from theater_billing.infrastructure.parsing.utils import clean_text, load_json

log = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "Plays"
REQUIRED_COLUMNS = ("id", "name", "type")


def _to_play(play_id: str, raw: Any) -> Play:
    if not isinstance(raw, dict):
        raise InvalidInputError(f"Play {play_id} must be an object")
    name = clean_text(raw.get("name"))
    genre = clean_text(raw.get("type", raw.get("genre"))).lower()
    if not name or not genre:
        raise InvalidInputError(f"Play {play_id} needs both a name and a type")
    return Play(name=name, genre=genre)


def json_to_plays(data: bytes) -> dict[str, Play]:
    document = load_json(data)
    if not isinstance(document, dict):
        raise InvalidInputError("Play catalog must be an object keyed by play id")
    return {str(play_id): _to_play(str(play_id), raw) for play_id, raw in document.items()}


def _pick_sheet(source: BytesIO, preferred: str) -> str:
    sheets = pd.ExcelFile(source, engine="openpyxl").sheet_names
    if not sheets:
        raise InvalidInputError("Catalog workbook has no sheets")
    if preferred in sheets:
        return preferred
    lower_map = {name.lower(): name for name in sheets}
    return lower_map.get(preferred.lower(), sheets[0])


def read_plays_raw(source: BytesIO) -> pd.DataFrame:
    sheet_name = _pick_sheet(source, DEFAULT_SHEET_NAME)
    source.seek(0)
    df = pd.read_excel(source, sheet_name=sheet_name, engine="openpyxl", dtype=str)
    df.columns = [str(col).strip().lower() for col in df.columns]
    return df


def excel_to_plays(data: bytes) -> dict[str, Play]:
    df = read_plays_raw(BytesIO(data))
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise InvalidInputError(f"Catalog sheet is missing columns: {', '.join(missing)}")

    plays: dict[str, Play] = {}
    for idx, row in df.iterrows():
        play_id = clean_text(row.get("id"))
        if not play_id:
            log.debug("Skipping catalog row %s without an id", idx)
            continue
        plays[play_id] = _to_play(play_id, {"name": row.get("name"), "type": row.get("type")})
    return plays
