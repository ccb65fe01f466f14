# compareoffers/schemas/offers.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt, constr

from compareoffers.domain.models import Offer


class StepOut(BaseModel):
    rate: float
    copies: int  # 0 = open-ended


class OfferOut(BaseModel):
    advance: float
    escalator: List[StepOut]

    @classmethod
    def from_offer(cls, offer: Offer) -> "OfferOut":
        return cls(
            advance=offer.advance,
            escalator=[StepOut(rate=s.rate, copies=s.copies) for s in offer.escalator],
        )


class ParseOfferIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    offer: constr(strip_whitespace=True, min_length=1)  # type: ignore


class EarningsIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    offer: constr(strip_whitespace=True, min_length=1)  # type: ignore
    price: NonNegativeFloat
    copies_sold: NonNegativeInt


class EarningsOut(BaseModel):
    earnings: float
    display: str


class CompareIn(BaseModel):
    """
    Geen price / print_runs meegestuurd -> defaults uit settings.
    """

    model_config = ConfigDict(extra="forbid")

    offers: List[str]
    price: Optional[float] = None
    print_runs: Optional[str] = None


class ComparisonRowOut(BaseModel):
    sales_level: int
    first: float
    second: float
    difference: float
    first_earned_out: bool
    second_earned_out: bool


class CompareOut(BaseModel):
    price: float
    offers: List[OfferOut]
    rows: List[ComparisonRowOut] = Field(default_factory=list)
