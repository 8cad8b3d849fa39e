"""Statement renderers: plain text, HTML and CSV views of StatementData."""
from __future__ import annotations

import csv
import html
import io
from enum import Enum

from theater_billing.domain.models import StatementData
from theater_billing.presentation.formatting import format_minor_units


class OutputKind(str, Enum):
    PLAIN = "plain"
    HTML = "html"
    CSV = "csv"


def performances_to_rows(data: StatementData) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for item in data.performances:
        rows.append(
            {
                "play": item.play.name,
                "seats": str(item.audience),
                "cost": format_minor_units(item.amount),
            }
        )
    return rows


def render_plain(data: StatementData) -> str:
    lines = [f"Statement for {data.customer}"]
    for row in performances_to_rows(data):
        lines.append(f"  {row['play']}: {row['cost']} ({row['seats']} seats)")
    lines.append(f"Amount owed is {format_minor_units(data.total_amount)}")
    lines.append(f"You earned {data.total_volume_credits} credits")
    return "\n".join(lines)


def render_html(data: StatementData) -> str:
    parts = [f"<h1>Statement for {html.escape(str(data.customer))}</h1>", "<table>"]
    parts.append("<tr><th>play</th><th>seats</th><th>cost</th></tr>")
    for row in performances_to_rows(data):
        parts.append("<tr>" + "".join(f"<td>{html.escape(value)}</td>" for value in row.values()) + "</tr>")
    parts.append("</table>")
    parts.append(f"<p>Amount owed is <em>{html.escape(format_minor_units(data.total_amount))}</em></p>")
    parts.append(f"<p>You earned <em>{data.total_volume_credits}</em> credits</p>")
    return "\n".join(parts)


def render_csv(data: StatementData) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=["play", "seats", "cost"], lineterminator="\n")
    writer.writeheader()
    writer.writerows(performances_to_rows(data))
    return buffer.getvalue().encode("utf-8")


def render(data: StatementData, kind: OutputKind | str = OutputKind.PLAIN) -> str | bytes:
    try:
        kind = OutputKind(kind)
    except ValueError:
        raise ValueError(f"Unsupported output kind: {kind!r}") from None
    if kind is OutputKind.HTML:
        return render_html(data)
    if kind is OutputKind.CSV:
        return render_csv(data)
    return render_plain(data)
