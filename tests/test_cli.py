import json
from pathlib import Path

import pytest

from theater_billing.cli import main


@pytest.fixture
def inputs(tmp_path: Path) -> tuple[Path, Path]:
    plays = tmp_path / "plays.json"
    plays.write_text(
        json.dumps(
            {
                "hamlet": {"name": "Hamlet", "type": "tragedy"},
                "as-like": {"name": "As You Like It", "type": "comedy"},
                "othello": {"name": "Othello", "type": "tragedy"},
            }
        ),
        encoding="utf-8",
    )
    invoices = tmp_path / "invoices.json"
    invoices.write_text(
        json.dumps(
            [
                {
                    "customer": "BigCo",
                    "performances": [
                        {"playID": "hamlet", "audience": 55},
                        {"playID": "as-like", "audience": 35},
                        {"playID": "othello", "audience": 40},
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )
    return plays, invoices


def test_cli_prints_plain_statement(inputs, capsys):
    plays, invoices = inputs

    assert main([str(plays), str(invoices)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Statement for BigCo\n  Hamlet: R$ 650,00 (55 seats)\n")
    assert out.endswith("Amount owed is R$ 1.730,00\nYou earned 47 credits\n")


def test_cli_html_format(inputs, capsys):
    plays, invoices = inputs

    assert main([str(plays), str(invoices), "--format", "html"]) == 0

    assert "<h1>Statement for BigCo</h1>" in capsys.readouterr().out


def test_cli_reports_unknown_play(inputs, capsys):
    plays, invoices = inputs
    plays.write_text(json.dumps({"hamlet": {"name": "Hamlet", "type": "tragedy"}}), encoding="utf-8")

    assert main([str(plays), str(invoices)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "UNKNOWN_PLAY" in captured.err
