import pytest

from compareoffers.domain.errors import InputError, InvalidEscalator
from compareoffers.services.comparison import (
    compare_offers,
    parse_offers,
    parse_print_runs,
    validate_price,
)


def test_parse_print_runs_ignores_whitespace():
    assert parse_print_runs(" 1000, 2000 ,\t4000 ") == [1000, 2000, 4000]


@pytest.mark.parametrize("raw", ["", "1000", "1000,", ",1000", "1000,abc", "1000;2000"])
def test_parse_print_runs_rejects_bad_input(raw):
    with pytest.raises(InputError, match="invalid print runs format"):
        parse_print_runs(raw)


def test_validate_price():
    assert validate_price(0) == 0
    with pytest.raises(InputError, match="price can't be negative"):
        validate_price(-0.01)


def test_parse_offers_requires_exactly_two():
    with pytest.raises(InputError, match="exactly two offers"):
        parse_offers(["1500__8"])
    with pytest.raises(InputError, match="exactly two offers"):
        parse_offers(["1500__8", "1500__8", "1500__8"])


def test_parse_offers_checks_format_first():
    with pytest.raises(InputError, match="invalid offer format"):
        parse_offers(["1500__8", "1500__7_8"])


def test_parse_offers_propagates_parser_errors():
    with pytest.raises(InvalidEscalator):
        parse_offers(["1500__8", "1500__8-5000_7"])


def test_compare_offers(two_step_offer, three_step_offer):
    rows = compare_offers(two_step_offer, three_step_offer, 38, [1000, 7500, 10])

    assert [r.sales_level for r in rows] == [1000, 7500, 10]

    first = rows[0]
    assert first.first == pytest.approx(2660)
    assert first.second == pytest.approx(3040)
    assert first.difference == pytest.approx(380)
    assert first.first_earned_out and first.second_earned_out

    second = rows[1]
    assert second.first == pytest.approx(20900)
    assert second.second == pytest.approx(23750)
    assert second.difference == pytest.approx(2850)

    # 10 copies: beide advances niet terugverdiend
    last = rows[2]
    assert (last.first, last.second) == (1500, 2500)
    assert not last.first_earned_out and not last.second_earned_out
