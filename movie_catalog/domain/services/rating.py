from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

RATING_PRECISION = Decimal("0.1")


def compute_movie_rating(ratings: Iterable[int]) -> float:
    """Mean of the given review ratings rounded half-up to one decimal place.

    An empty collection yields 0.
    """
    values = list(ratings)
    if not values:
        return 0.0

    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(RATING_PRECISION, rounding=ROUND_HALF_UP))
