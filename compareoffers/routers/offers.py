# compareoffers/routers/offers.py
from fastapi import APIRouter, HTTPException

from compareoffers.calculators.earnings import calc_earnings
from compareoffers.core.logging_config import logger
from compareoffers.core.settings import settings
from compareoffers.domain.errors import InputError, OfferParseError
from compareoffers.domain.parser import parse_offer
from compareoffers.schemas.offers import (
    CompareIn,
    CompareOut,
    ComparisonRowOut,
    EarningsIn,
    EarningsOut,
    OfferOut,
    ParseOfferIn,
)
from compareoffers.services.comparison import (
    compare_offers,
    parse_offers,
    parse_print_runs,
    validate_price,
)

router = APIRouter(prefix="/offers", tags=["offers"])


def _reject(exc: InputError | OfferParseError) -> HTTPException:
    logger.info("input_rejected", error=exc.code, literal=exc.literal)
    return HTTPException(status_code=422, detail=exc.to_dict())


@router.post("/parse", response_model=OfferOut)
def parse(payload: ParseOfferIn) -> OfferOut:
    try:
        offer = parse_offer(payload.offer)
    except OfferParseError as e:
        raise _reject(e)
    return OfferOut.from_offer(offer)


@router.post("/earnings", response_model=EarningsOut)
def earnings(payload: EarningsIn) -> EarningsOut:
    try:
        offer = parse_offer(payload.offer)
    except OfferParseError as e:
        raise _reject(e)

    value = calc_earnings(offer, payload.price, payload.copies_sold)
    return EarningsOut(earnings=value, display=f"{value:.2f}")


@router.post("/compare", response_model=CompareOut)
def compare(payload: CompareIn) -> CompareOut:
    price = settings.DEFAULT_PRICE if payload.price is None else payload.price
    raw_runs = settings.DEFAULT_PRINT_RUNS if payload.print_runs is None else payload.print_runs

    try:
        validate_price(price)
        print_runs = parse_print_runs(raw_runs)
        first, second = parse_offers(payload.offers)
    except (InputError, OfferParseError) as e:
        raise _reject(e)

    rows = compare_offers(first, second, price, print_runs)
    return CompareOut(
        price=price,
        offers=[OfferOut.from_offer(first), OfferOut.from_offer(second)],
        rows=[
            ComparisonRowOut(
                sales_level=r.sales_level,
                first=r.first,
                second=r.second,
                difference=r.difference,
                first_earned_out=r.first_earned_out,
                second_earned_out=r.second_earned_out,
            )
            for r in rows
        ],
    )
