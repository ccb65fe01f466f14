# compareoffers/domain/errors.py
from __future__ import annotations

from typing import Any, Dict


class OfferParseError(ValueError):
    """
    Raised when an offer string cannot be turned into an Offer.

    - code: stable machine-readable category (see subclasses)
    - literal: the offending substring, for diagnostics
    """

    code: str = "invalid_offer"
    default_message: str = "invalid offer"

    def __init__(self, literal: str, message: str | None = None):
        self.literal = str(literal)
        self.message = message or f"{self.literal!r}: {self.default_message}"
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.code, "literal": self.literal, "message": self.message}


class InvalidAdvance(OfferParseError):
    code = "invalid_advance"
    default_message = "invalid advance"


class InvalidRate(OfferParseError):
    code = "invalid_rate"
    default_message = "invalid royalty rate"


class InvalidCopies(OfferParseError):
    code = "invalid_copies"
    default_message = "invalid number of copies"


class InvalidEscalator(OfferParseError):
    code = "invalid_escalator"
    default_message = "invalid escalator"


class InputError(ValueError):
    """Raised by the outer surfaces (CLI/API) when the overall input shape is wrong."""

    code = "invalid_input"

    def __init__(self, message: str, literal: str = ""):
        self.message = str(message)
        self.literal = str(literal)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.code, "literal": self.literal, "message": self.message}
