# Services package for compareoffers

from .comparison import ComparisonRow, compare_offers, parse_offers, parse_print_runs, validate_price
from .table_renderer import render_comparison

__all__ = [
    "ComparisonRow",
    "compare_offers",
    "parse_offers",
    "parse_print_runs",
    "validate_price",
    "render_comparison",
]
