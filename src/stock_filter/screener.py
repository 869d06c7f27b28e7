"""
screener.py

Usage:
    python -m stock_filter.screener                              # everything from the sample set
    python -m stock_filter.screener --price-min 100 --price-max 200
    python -m stock_filter.screener --dividends yes --yield-min 1
    python -m stock_filter.screener --source remote --url http://localhost:8000/api/stocks
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .clients.stock_client import load_stocks
from .config import configure_logging, load_settings
from .core.models import ConstraintSet
from .core.session import ScreenerState, run_search
from .presentation.table import format_results_table

logger = logging.getLogger(__name__)

# CLI flag -> ConstraintSet field
BOUND_FLAGS = {
    "price_min": "price_min",
    "price_max": "price_max",
    "pe_min": "pe_ratio_min",
    "pe_max": "pe_ratio_max",
    "rsi_min": "rsi_min",
    "rsi_max": "rsi_max",
    "peg_min": "peg_ratio_min",
    "peg_max": "peg_ratio_max",
    "yield_min": "dividend_yield_min",
    "yield_max": "dividend_yield_max",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Filter NYSE stocks by valuation, momentum and dividend metrics.")
    for flag in BOUND_FLAGS:
        parser.add_argument("--" + flag.replace("_", "-"), dest=flag, default="", metavar="X")
    parser.add_argument("--dividends", choices=["yes", "no"], default="", help="require (or exclude) dividend payers")
    parser.add_argument("--source", choices=["sample", "remote"], default=None, help="override the configured data source")
    parser.add_argument("--url", default=None, help="remote /api/stocks endpoint")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def constraints_from_args(args: argparse.Namespace) -> ConstraintSet:
    form = {field: getattr(args, flag) for flag, field in BOUND_FLAGS.items()}
    form["pays_dividends"] = args.dividends
    return ConstraintSet.from_form(form)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        constraints = constraints_from_args(args)
    except ValidationError as e:
        bad = ", ".join(str(err["loc"][0]) for err in e.errors())
        parser.error(f"invalid numeric bound: {bad}")

    settings = load_settings()
    overrides = {}
    if args.source:
        overrides["data_source"] = args.source
    if args.url:
        overrides["api_url"] = args.url
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    records = load_stocks(settings)
    state = run_search(ScreenerState(constraints=constraints), records)
    logger.debug("matched %d of %d stocks", state.count, len(records))
    print(format_results_table(state.results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
