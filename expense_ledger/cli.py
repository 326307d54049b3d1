"""Console interface for the expense ledger."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from ledger.categories import CATEGORIES
from ledger.exceptions import InvalidRangeError, ValidationError
from ledger.services import ExpenseService

DEFAULT_PORT = 5000
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_records(path: Path) -> List[Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Malformed JSON in {path}") from exc
    if not isinstance(payload, list):
        raise ValidationError(f"Expected a list of expenses in {path}")
    return payload


def handle_serve(args: argparse.Namespace) -> None:
    # Imported lazily so offline commands do not need the web stack loaded.
    from api.app import create_app

    app = create_app(enable_scheduler=not args.no_scheduler)
    logger.info("Expense ledger API running on port %d", args.port)
    app.run(host=args.host, port=args.port, threaded=True)


def handle_analyze(args: argparse.Namespace) -> None:
    service = ExpenseService()
    for record in _load_records(args.file):
        if not isinstance(record, dict):
            raise ValidationError("Each expense must be a JSON object")
        service.create_expense(record)
    analysis = service.analyze(args.category, args.start_date, args.end_date)
    print(json.dumps(analysis.to_dict(), indent=2))


def handle_categories(args: argparse.Namespace) -> None:
    for name in CATEGORIES:
        print(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Expense Ledger")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the REST API and summary scheduler")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=DEFAULT_PORT)
    serve.add_argument(
        "--no-scheduler",
        action="store_true",
        help="Do not fire the weekly and monthly summaries",
    )

    analyze = subparsers.add_parser("analyze", help="Analyse expenses from a JSON file")
    analyze.add_argument("file", type=Path)
    analyze.add_argument("--category")
    analyze.add_argument("--start-date")
    analyze.add_argument("--end-date")

    subparsers.add_parser("categories", help="List the allowed categories")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    handlers = {
        "serve": handle_serve,
        "analyze": handle_analyze,
        "categories": handle_categories,
    }
    try:
        handlers[args.command](args)
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except InvalidRangeError as exc:
        print(f"Invalid date range: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Unable to read input: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
