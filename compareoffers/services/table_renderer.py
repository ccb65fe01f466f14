from __future__ import annotations

from typing import Iterable, List, Sequence

from .comparison import ComparisonRow

HEADERS = ["Sales level", "Offer 1", "Offer 2", "Difference"]


def _money(value: float) -> str:
    return f"{value:.2f}"


def comparison_cells(rows: Iterable[ComparisonRow]) -> List[List[str]]:
    return [
        [str(r.sales_level), _money(r.first), _money(r.second), _money(r.difference)]
        for r in rows
    ]


def render_table(headers: Sequence[str], data: Sequence[Sequence[str]]) -> str:
    """
    Bordered text grid. Headers are upper-cased and centered, cells right-aligned
    (every column here is numeric).
    """
    heads = [h.upper() for h in headers]
    widths = [len(h) for h in heads]
    for row in data:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines = [
        border,
        "| " + " | ".join(h.center(w) for h, w in zip(heads, widths)) + " |",
        border,
    ]
    for row in data:
        lines.append("| " + " | ".join(c.rjust(w) for c, w in zip(row, widths)) + " |")
    lines.append(border)
    return "\n".join(lines)


def render_comparison(rows: Iterable[ComparisonRow]) -> str:
    return render_table(HEADERS, comparison_cells(rows))
