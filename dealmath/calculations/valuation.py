"""After Repair Value (ARV) estimation from comparable sales."""

from __future__ import annotations

from collections.abc import Sequence
from statistics import median

from dealmath.errors import ValidationError, require_positive
from dealmath.models import Comparable


def price_per_area(comparables: Sequence[Comparable]) -> list[float]:
    """Sale price per unit of area for each comparable, sorted ascending."""
    bad = [i for i, c in enumerate(comparables) if c.area <= 0]
    if bad:
        raise ValidationError({f"comparables[{i}].area": "must be positive" for i in bad})
    return sorted(c.price_per_area for c in comparables)


def estimate_arv(comparables: Sequence[Comparable], subject_area: float) -> float:
    """Estimate ARV as the median comp price-per-area times the subject's area.

    With an even number of comps the two middle values are averaged. A single
    comp simply scales its own price-per-area.

    Args:
        comparables: Recent comparable sales (at least one).
        subject_area: Area of the property being valued.

    Returns:
        Estimated After Repair Value.
    """
    if not comparables:
        raise ValidationError({"comparables": "must contain at least one comparable"})
    require_positive(subject_area=subject_area)

    return median(price_per_area(comparables)) * subject_area
