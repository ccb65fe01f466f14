from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Step:
    rate: float  # percentage, 8 = 8%
    copies: int  # 0 = open-ended (last step)

    @property
    def unbounded(self) -> bool:
        return self.copies == 0


@dataclass(frozen=True)
class Offer:
    """
    An advance plus a royalty escalator.
    Escalator order = tier order; the last step is always unbounded.
    """

    advance: float
    escalator: Tuple[Step, ...]

    @property
    def thresholds(self) -> Tuple[int, ...]:
        """Cumulative sales thresholds of the bounded steps."""
        out = []
        total = 0
        for step in self.escalator:
            if step.unbounded:
                break
            total += step.copies
            out.append(total)
        return tuple(out)
