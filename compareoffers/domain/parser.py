# compareoffers/domain/parser.py
from __future__ import annotations

import re
from typing import List

from .errors import InvalidAdvance, InvalidCopies, InvalidEscalator, InvalidRate
from .models import Offer, Step

ADVANCE_SEPARATOR = "__"
TIER_SEPARATOR = "_"
THRESHOLD_SEPARATOR = "-"

OFFER_PATTERN = re.compile(
    r"^[0-9]{0,6}(\.[0-9]{1,2})?__"
    r"([0-9]{1,2}(\.[0-9]{1,2})?-[0-9]{1,6}_)*"
    r"[0-9]{1,2}(\.[0-9]{1,2})?$"
)
OFFER_PATTERN_EXPLANATION = (
    "Offer pattern: ADVANCE__RATE-UNTIL_[...]_RATE (for example 1500__7-2000_8-4000_9)."
)

# strict: geen teken, exponent, spaties of inf/nan; aantal cijfers volgens het offer-formaat
_ADVANCE_RE = re.compile(r"^([0-9]{1,6}(\.[0-9]{1,2})?|\.[0-9]{1,2})$")
_RATE_RE = re.compile(r"^[0-9]{1,2}(\.[0-9]{1,2})?$")
_THRESHOLD_RE = re.compile(r"^[0-9]{1,6}$")


def is_valid_offer_format(raw: str) -> bool:
    """Full-format check used by the CLI/API before parsing."""
    return OFFER_PATTERN.match(raw or "") is not None


def _to_float(literal: str, pattern: re.Pattern) -> float | None:
    if not pattern.match(literal):
        return None
    return float(literal)


def _to_int(literal: str) -> int | None:
    if not _THRESHOLD_RE.match(literal):
        return None
    return int(literal)


def parse_offer(raw: str) -> Offer:
    """
    Parse ADVANCE__RATE-UNTIL_[...]_RATE into an Offer.

    UNTIL is a cumulative sales threshold; Step.copies is the difference with
    the previous threshold. The last tier is open-ended (copies=0); a threshold
    on the last tier is ignored.

    Fails fast with an OfferParseError subclass on the first bad token.
    """
    advance_literal, sep, escalator_literal = raw.partition(ADVANCE_SEPARATOR)

    advance = _to_float(advance_literal, _ADVANCE_RE)
    if advance is None:
        raise InvalidAdvance(advance_literal)

    if not sep:
        raise InvalidEscalator(raw, f"{raw!r}: missing escalator: invalid escalator")

    tiers = escalator_literal.split(TIER_SEPARATOR)
    steps: List[Step] = []

    last_threshold = 0
    last_rate = -1.0
    for i, tier in enumerate(tiers):
        rate_literal, _, threshold_literal = tier.partition(THRESHOLD_SEPARATOR)

        rate = _to_float(rate_literal, _RATE_RE)
        if rate is None:
            raise InvalidRate(rate_literal)
        if rate < last_rate:
            raise InvalidEscalator(
                tier,
                f"rate {rate:.2f} is lower than the previous rate {last_rate:.2f}: invalid escalator",
            )
        last_rate = rate

        if i == len(tiers) - 1:
            steps.append(Step(rate=rate, copies=0))
            break

        threshold = _to_int(threshold_literal)
        if threshold is None:
            raise InvalidCopies(
                threshold_literal,
                f"can't convert {threshold_literal!r} to integer: invalid number of copies",
            )
        if threshold <= last_threshold:
            raise InvalidEscalator(
                tier,
                f"previous threshold {last_threshold} is not lower than new threshold "
                f"{threshold}: invalid escalator",
            )

        steps.append(Step(rate=rate, copies=threshold - last_threshold))
        last_threshold = threshold

    return Offer(advance=advance, escalator=tuple(steps))
