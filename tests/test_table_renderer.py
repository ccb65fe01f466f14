from compareoffers.services.comparison import ComparisonRow
from compareoffers.services.table_renderer import render_comparison, render_table


def test_render_comparison():
    rows = [ComparisonRow(1000, 2660.0, 3040.0, True, True)]

    assert render_comparison(rows).splitlines() == [
        "+-------------+---------+---------+------------+",
        "| SALES LEVEL | OFFER 1 | OFFER 2 | DIFFERENCE |",
        "+-------------+---------+---------+------------+",
        "|        1000 | 2660.00 | 3040.00 |     380.00 |",
        "+-------------+---------+---------+------------+",
    ]


def test_columns_grow_with_content():
    out = render_table(["a", "b"], [["1", "123456"]]).splitlines()
    assert out[0] == "+---+--------+"
    assert out[1] == "| A |   B    |"
    assert out[3] == "| 1 | 123456 |"


def test_negative_difference_is_rendered():
    rows = [ComparisonRow(100, 2500.0, 1500.0, False, False)]
    assert "-1000.00" in render_comparison(rows)
