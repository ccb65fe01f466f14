"""
compareoffers CLI

    compareoffers [--price 38] [--printruns 1000,2000,...] <offer> <offer>

Prints the earnings of both offers per sales level plus the difference.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from compareoffers.core.logging_config import logger, setup_logging
from compareoffers.core.settings import settings
from compareoffers.domain.errors import InputError, OfferParseError
from compareoffers.domain.parser import OFFER_PATTERN_EXPLANATION
from compareoffers.services.comparison import (
    compare_offers,
    parse_offers,
    parse_print_runs,
    validate_price,
)
from compareoffers.services.table_renderer import render_comparison

USAGE = "compareoffers [options] <offer> <offer>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compareoffers",
        usage=USAGE,
        description=OFFER_PATTERN_EXPLANATION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "offers",
        nargs="*",
        metavar="offer",
        help="Offer string, e.g. 1500__7-2000_8-4000_9",
    )
    parser.add_argument(
        "--price",
        type=float,
        default=settings.DEFAULT_PRICE,
        help=f"price per copy (default: {settings.DEFAULT_PRICE:g})",
    )
    parser.add_argument(
        "--printruns",
        default=settings.DEFAULT_PRINT_RUNS,
        help=f"comma separated sales levels (default: {settings.DEFAULT_PRINT_RUNS})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse wil zelf het proces stoppen; wij geven de exit code terug aan de caller
        return exc.code if isinstance(exc.code, int) else 1

    setup_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

    try:
        price = validate_price(args.price)
        print_runs = parse_print_runs(args.printruns)
        first, second = parse_offers(args.offers)
    except (InputError, OfferParseError) as e:
        logger.info("input_rejected", error=e.code, literal=e.literal)
        print(e, file=sys.stderr)
        return 1

    rows = compare_offers(first, second, price, print_runs)
    print(render_comparison(rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
