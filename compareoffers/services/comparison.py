from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence

from compareoffers.calculators.earnings import calc_earnings, calc_royalties
from compareoffers.core.logging_config import logger
from compareoffers.domain.errors import InputError
from compareoffers.domain.models import Offer
from compareoffers.domain.parser import is_valid_offer_format, parse_offer

PRINT_RUNS_PATTERN = re.compile(r"^([0-9]+,)+[0-9]+$")
_WHITESPACE = re.compile(r"\s")

OFFERS_TO_COMPARE = 2


@dataclass(frozen=True)
class ComparisonRow:
    sales_level: int
    first: float
    second: float
    first_earned_out: bool
    second_earned_out: bool

    @property
    def difference(self) -> float:
        return self.second - self.first


def parse_print_runs(raw: str) -> List[int]:
    """
    "1000, 2000,4000" -> [1000, 2000, 4000]
    Whitespace is ignored; at least two sales levels are required.
    """
    cleaned = _WHITESPACE.sub("", raw or "")
    if not PRINT_RUNS_PATTERN.match(cleaned):
        raise InputError("invalid print runs format", literal=raw or "")
    # format is al gevalideerd, int() kan niet falen
    return [int(p) for p in cleaned.split(",")]


def validate_price(price: float) -> float:
    if price < 0:
        raise InputError("price can't be negative", literal=str(price))
    return price


def parse_offers(raws: Sequence[str]) -> List[Offer]:
    """Format-check and parse exactly two offer strings. Parser errors propagate."""
    if len(raws) != OFFERS_TO_COMPARE:
        raise InputError("you must provide exactly two offers to compare")

    offers: List[Offer] = []
    for raw in raws:
        if not is_valid_offer_format(raw):
            logger.info("offer_rejected", offer=raw, reason="format")
            raise InputError("invalid offer format", literal=raw)
        offers.append(parse_offer(raw))
    return offers


def compare_offers(
    first: Offer,
    second: Offer,
    price: float,
    sales_levels: Sequence[int],
) -> List[ComparisonRow]:
    """One row per sales level, in input order; difference = second - first."""
    rows: List[ComparisonRow] = []
    for level in sales_levels:
        rows.append(
            ComparisonRow(
                sales_level=level,
                first=calc_earnings(first, price, level),
                second=calc_earnings(second, price, level),
                first_earned_out=calc_royalties(first, price, level) >= first.advance,
                second_earned_out=calc_royalties(second, price, level) >= second.advance,
            )
        )

    logger.info("offers_compared", price=price, levels=len(rows))
    return rows
