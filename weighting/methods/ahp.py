from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

import numpy as np

from weighting.config import CONSISTENCY_THRESHOLD
from weighting.consistency import consistency_ratio
from weighting.core import JudgmentLike, MethodResult, WeightingMethod, WeightingResult
from weighting.errors import EmptyItemsError, ValidationError
from weighting.matrix import build_comparison_matrix, validate_items, validate_judgments

logger = logging.getLogger(__name__)


def solve_weights(matrix) -> List[float]:
    """Row geometric mean of the comparison matrix, normalized to sum to 1."""
    array = np.asarray(matrix, dtype=float)
    if array.size == 0:
        raise EmptyItemsError("Comparison matrix cannot be empty")
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValidationError(f"Comparison matrix must be square, got shape {array.shape}")
    if not np.all(np.isfinite(array)) or np.any(array <= 0):
        raise ValidationError("Comparison matrix entries must be finite and strictly positive")

    size = array.shape[0]
    if size == 1:
        return [1.0]

    # geometric mean in log space, shifted by the max, so row products never overflow
    logs = np.log(array).mean(axis=1)
    geometric = np.exp(logs - logs.max())
    weights = geometric / geometric.sum()
    logger.debug("Solved weights for %dx%d matrix: %s", size, size, weights)
    return weights.tolist()


class AHPMethod(WeightingMethod):
    id = "ahp"
    name = "Analytic Hierarchy Process"

    def compute_weights(
        self,
        items: Sequence[str],
        judgments: Iterable[JudgmentLike] | None = None,
    ) -> MethodResult:
        ordered = validate_items(items)
        checked = validate_judgments(judgments)
        if len(ordered) == 1:
            return MethodResult(items=ordered, weights=[1.0], consistency_ratio=0.0)

        matrix = build_comparison_matrix(ordered, checked)
        weights = solve_weights(matrix)
        ratio = consistency_ratio(matrix, weights)
        if ratio >= CONSISTENCY_THRESHOLD:
            logger.warning(
                "Pairwise judgments are inconsistent (CR=%.4f >= %.2f)",
                ratio,
                CONSISTENCY_THRESHOLD,
            )
        return MethodResult(items=ordered, weights=weights, consistency_ratio=ratio)


def calculate_ahp_weights(
    items: Sequence[str],
    judgments: Iterable[JudgmentLike] | None = None,
) -> WeightingResult:
    """Percentage weights and consistency verdict for ``items``.

    Returns a :class:`WeightingResult` whose weights are integers keyed by
    item, summing to exactly 100.
    """
    result = AHPMethod().calculate(items, judgments)
    logger.info(
        "Computed AHP weights for %d items (CR=%.4f)",
        len(result.weights),
        result.consistency_ratio,
    )
    return result
