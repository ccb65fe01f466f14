from __future__ import annotations

from ..domain.models import Offer


def calc_royalties(offer: Offer, price: float, copies_sold: int) -> float:
    """Royalties over the escalator, without the advance floor."""
    earnings = 0.0
    remaining = copies_sold
    for step in offer.escalator:
        # laatste tier voor deze berekening: te weinig copies over, of open-ended
        if remaining < step.copies or step.unbounded:
            earnings += remaining * price * step.rate / 100
            break
        earnings += step.copies * price * step.rate / 100
        remaining -= step.copies
    return earnings


def calc_earnings(offer: Offer, price: float, copies_sold: int) -> float:
    """
    Earnings for `copies_sold` units at `price`.
    The advance is a floor: if the book has not earned out, earnings = advance.
    """
    earnings = calc_royalties(offer, price, copies_sold)
    if earnings < offer.advance:
        return offer.advance
    return earnings
