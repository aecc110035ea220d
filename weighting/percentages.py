from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence

from weighting.config import PERCENT_TOTAL
from weighting.errors import EmptyItemsError, ValidationError

logger = logging.getLogger(__name__)


def to_percentages(items: Sequence[str], weights: Sequence[float]) -> Dict[str, int]:
    """Convert normalized weights into integer percentages summing to 100.

    Each weight is rounded half-up. The rounding remainder (which may be
    negative) is added to the first item, in input order, holding the
    largest rounded value, so the displayed total is always exactly 100.

    The adjustment is at most about n/2 points. Once the item count reaches
    the hundreds the remainder can push that entry below 0; realistic
    factor counts (low tens) stay within 0..100.
    """
    if not items:
        raise EmptyItemsError()
    if len(items) != len(weights):
        raise ValidationError(
            f"Expected {len(items)} weights, got {len(weights)}"
        )

    rounded: List[int] = []
    for weight in weights:
        value = float(weight)
        if not math.isfinite(value) or value < 0:
            raise ValidationError(f"Weight must be a finite non-negative number, got {weight!r}")
        rounded.append(int(math.floor(value * PERCENT_TOTAL + 0.5)))

    remainder = PERCENT_TOTAL - sum(rounded)
    if remainder:
        largest = max(range(len(rounded)), key=lambda idx: rounded[idx])
        logger.debug(
            "Assigning rounding remainder %+d to %r", remainder, items[largest]
        )
        rounded[largest] += remainder

    return dict(zip(items, rounded))
