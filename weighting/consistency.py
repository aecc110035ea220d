"""
Consistency checks for pairwise comparison matrices.

CR = CI / RI, where CI = (lambda_max - n) / (n - 1) and RI is the Random
Index for the matrix size. A CR below 0.10 is considered acceptable.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from weighting.config import (
    CONSISTENCY_BANDS,
    CONSISTENCY_THRESHOLD,
    POOR_LEVEL,
    POOR_MESSAGE,
    RANDOM_INDEX,
    RANDOM_INDEX_FALLBACK,
)
from weighting.errors import EmptyItemsError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConsistencyInterpretation:
    level: str
    message: str


def random_index(size: int) -> float:
    return RANDOM_INDEX.get(size, RANDOM_INDEX_FALLBACK)


def _as_square(matrix) -> np.ndarray:
    array = np.asarray(matrix, dtype=float)
    if array.size == 0:
        raise EmptyItemsError("Comparison matrix cannot be empty")
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValidationError(f"Comparison matrix must be square, got shape {array.shape}")
    return array


def _as_weights(weights: Sequence[float], size: int) -> np.ndarray:
    vector = np.asarray(weights, dtype=float)
    if vector.shape != (size,):
        raise ValidationError(f"Expected {size} weights, got shape {vector.shape}")
    if not np.all(np.isfinite(vector)) or np.any(vector <= 0):
        raise ValidationError("Weights must be finite and strictly positive")
    return vector


def lambda_max(matrix, weights: Sequence[float]) -> float:
    """Approximate the principal eigenvalue as the mean of (A w)_i / w_i."""
    array = _as_square(matrix)
    vector = _as_weights(weights, array.shape[0])
    weighted_sum = array @ vector
    return float(np.mean(weighted_sum / vector))


def consistency_index(matrix, weights: Sequence[float]) -> float:
    array = _as_square(matrix)
    size = array.shape[0]
    if size <= 2:
        return 0.0
    return (lambda_max(array, weights) - size) / (size - 1)


def consistency_ratio(matrix, weights: Sequence[float]) -> float:
    array = _as_square(matrix)
    size = array.shape[0]
    if size <= 2:
        return 0.0

    lam = lambda_max(array, weights)
    ci = (lam - size) / (size - 1)
    ri = random_index(size)
    # lambda_max >= n for reciprocal matrices; clamp float noise
    cr = max(ci / ri, 0.0)
    logger.debug("lambda_max=%.6f CI=%.6f RI=%.2f CR=%.6f", lam, ci, ri, cr)
    return cr


def is_consistent(ratio: float) -> bool:
    return ratio < CONSISTENCY_THRESHOLD


def interpret_consistency(ratio: float) -> ConsistencyInterpretation:
    value = float(ratio)
    if not math.isfinite(value):
        raise ValidationError(f"Consistency ratio must be finite, got {ratio!r}")
    for upper, level, message in CONSISTENCY_BANDS:
        if value < upper:
            return ConsistencyInterpretation(level=level, message=message)
    return ConsistencyInterpretation(level=POOR_LEVEL, message=POOR_MESSAGE)
