"""Reduction of raw user ratings into a RatingSummary."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Real
from typing import Any, Iterable, List, Mapping

from landmark_core.models.rating import RatingSummary

# Wide enough to quantize any finite float to one decimal place
_ROUNDING_CONTEXT = Context(prec=400)


def summarize(ratings: Iterable[Any]) -> RatingSummary:
    """
    Average and count of the numeric ratings.

    Non-numeric entries (including booleans, NaN/infinity and ints too large
    for a float) are skipped. The average is rounded half-up to one decimal
    place.
    """
    values = [float(value) for value in ratings if _is_rating(value)]
    if not values:
        return RatingSummary(average=None, count=0)

    average = float(
        Decimal(_mean(values)).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT
        )
    )
    return RatingSummary(average=average, count=len(values))


def ratings_from_documents(documents: Iterable[Mapping[str, Any]]) -> List[Any]:
    """Pull the ``rating`` field out of feedback documents."""
    return [doc.get("rating") for doc in documents if isinstance(doc, Mapping)]


def _mean(values: List[float]) -> float:
    count = len(values)
    try:
        total = math.fsum(values)
    except OverflowError:
        total = math.inf
    if math.isfinite(total):
        return total / count
    # The total overflowed; scale first so the mean of finite values stays finite
    return math.fsum(value / count for value in values)


def _is_rating(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False
