"""Compare publishing offers: an advance plus a royalty escalator."""
from .calculators.earnings import calc_earnings
from .domain import (
    InvalidAdvance,
    InvalidCopies,
    InvalidEscalator,
    InvalidRate,
    Offer,
    OfferParseError,
    Step,
    parse_offer,
)

__all__ = [
    "InvalidAdvance",
    "InvalidCopies",
    "InvalidEscalator",
    "InvalidRate",
    "Offer",
    "OfferParseError",
    "Step",
    "calc_earnings",
    "parse_offer",
]
