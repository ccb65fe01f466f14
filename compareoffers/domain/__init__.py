# compareoffers/domain/__init__.py
from __future__ import annotations

from .errors import (
    InputError,
    InvalidAdvance,
    InvalidCopies,
    InvalidEscalator,
    InvalidRate,
    OfferParseError,
)
from .models import Offer, Step
from .parser import parse_offer

__all__ = [
    "InputError",
    "InvalidAdvance",
    "InvalidCopies",
    "InvalidEscalator",
    "InvalidRate",
    "Offer",
    "OfferParseError",
    "Step",
    "parse_offer",
]
