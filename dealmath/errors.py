"""Error types raised by the calculation engine."""

from __future__ import annotations


class ValidationError(ValueError):
    """A domain precondition was violated.

    ``details`` maps each offending field to a short message, e.g.
    ``{"purchase_price": "must be positive"}``.
    """

    def __init__(self, details: dict[str, str]):
        self.details = dict(details)
        parts = [f"{field} {message}" for field, message in self.details.items()]
        super().__init__("Validation failed: " + "; ".join(parts))


def require_positive(**values: float) -> None:
    """Raise ValidationError for every value that is not strictly positive."""
    bad = {name: "must be positive" for name, value in values.items() if value <= 0}
    if bad:
        raise ValidationError(bad)


def require_non_negative(**values: float) -> None:
    bad = {name: "must be non-negative" for name, value in values.items() if value < 0}
    if bad:
        raise ValidationError(bad)
