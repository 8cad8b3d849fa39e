"""Command-line entrypoint for statement generation."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from theater_billing.application.use_cases import CreateStatementUseCase
from theater_billing.config import LOG_FORMAT, SETTINGS
from theater_billing.domain.errors import DomainError
from theater_billing.infrastructure.repositories.file_repositories import (
    JsonInvoiceRepository,
    play_catalog_repository,
)
from theater_billing.presentation.statement_report import OutputKind

log = logging.getLogger("theater_billing.cli")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print billing statements for theatrical performances")
    parser.add_argument("plays", type=str, help="Path to play catalog (JSON or Excel)")
    parser.add_argument("invoices", type=str, help="Path to invoices JSON")
    parser.add_argument(
        "--format",
        dest="kind",
        choices=[kind.value for kind in OutputKind],
        default=SETTINGS.default_output,
        help="Output format",
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    use_case = CreateStatementUseCase()
    try:
        plays = play_catalog_repository(Path(args.plays)).load_plays()
        invoices = JsonInvoiceRepository(Path(args.invoices)).list_invoices()
        responses = [use_case.respond(invoice, plays, args.kind) for invoice in invoices]
    except DomainError as exc:
        log.error("Statement aborted: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for index, response in enumerate(responses):
        rendered = response.rendered
        if isinstance(rendered, bytes):
            rendered = rendered.decode("utf-8").rstrip("\n")
        if index:
            print()
        print(rendered)

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
