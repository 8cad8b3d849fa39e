"""Streamlit front-end for theatrical billing statements."""
from __future__ import annotations

from io import BytesIO
from typing import Mapping, Sequence

import pandas as pd
import streamlit as st

from theater_billing import CreateStatementUseCase, DomainError, Play, StatementData
from theater_billing.infrastructure.repositories.file_repositories import (
    ExcelPlayCatalogRepository,
    JsonInvoiceRepository,
    JsonPlayCatalogRepository,
)
from theater_billing.presentation.formatting import format_minor_units
from theater_billing.presentation.statement_report import render_csv, render_html, render_plain


st.set_page_config(page_title="Theater Billing", layout="wide")
st.title("Theater Billing Statements")


def plays_to_dataframe(plays: Mapping[str, Play]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"id": play_id, "name": play.name, "type": play.genre} for play_id, play in plays.items()],
        columns=["id", "name", "type"],
    )


def statement_to_dataframe(data: StatementData) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "play": p.play.name,
                "type": p.play.genre,
                "seats": p.audience,
                "cost": format_minor_units(p.amount),
                "credits": p.volume_credits,
            }
            for p in data.performances
        ],
        columns=["play", "type", "seats", "cost", "credits"],
    )


def load_plays(name: str, content: bytes) -> Mapping[str, Play]:
    if name.lower().endswith((".xlsx", ".xlsm")):
        return ExcelPlayCatalogRepository(BytesIO(content)).load_plays()
    return JsonPlayCatalogRepository(BytesIO(content)).load_plays()


def run_statements(plays: Mapping[str, Play], invoices_bytes: bytes) -> Sequence[StatementData]:
    use_case = CreateStatementUseCase()
    invoices = JsonInvoiceRepository(BytesIO(invoices_bytes)).list_invoices()
    return [use_case.execute(invoice, plays) for invoice in invoices]


if "statements" not in st.session_state:
    st.session_state["statements"] = None

col1, col2 = st.columns(2)
with col1:
    plays_file = st.file_uploader("Upload play catalog", type=["json", "xlsx", "xlsm"])
with col2:
    invoices_file = st.file_uploader("Upload invoices", type=["json"])

plays: Mapping[str, Play] = {}
if plays_file:
    try:
        plays = load_plays(plays_file.name, plays_file.getvalue())
    except DomainError as exc:
        st.error(str(exc))
    with st.expander("Play catalog", expanded=False):
        st.dataframe(plays_to_dataframe(plays), hide_index=True)

run_btn = st.button("Compute statements", disabled=not (plays and invoices_file))
if run_btn and plays and invoices_file:
    try:
        st.session_state["statements"] = run_statements(plays, invoices_file.getvalue())
    except DomainError as exc:
        st.session_state["statements"] = None
        st.error(str(exc))

statements: Sequence[StatementData] | None = st.session_state.get("statements")
if statements is not None:
    if not statements:
        st.info("The invoices file holds no invoices.")
    for index, data in enumerate(statements):
        st.subheader(f"Statement for {data.customer}")
        st.metric("Amount owed", format_minor_units(data.total_amount))
        st.metric("Volume credits", data.total_volume_credits)
        st.dataframe(statement_to_dataframe(data), hide_index=True)
        st.code(render_plain(data), language="text")
        dl1, dl2, dl3 = st.columns(3)
        with dl1:
            st.download_button(
                "Download text",
                data=render_plain(data).encode("utf-8"),
                file_name=f"statement_{index + 1}.txt",
                mime="text/plain",
                key=f"txt_{index}",
            )
        with dl2:
            st.download_button(
                "Download HTML",
                data=render_html(data).encode("utf-8"),
                file_name=f"statement_{index + 1}.html",
                mime="text/html",
                key=f"html_{index}",
            )
        with dl3:
            st.download_button(
                "Download CSV",
                data=render_csv(data),
                file_name=f"statement_{index + 1}.csv",
                mime="text/csv",
                key=f"csv_{index}",
            )
