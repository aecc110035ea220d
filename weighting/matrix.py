from __future__ import annotations

import logging
import math
from itertools import combinations
from numbers import Real
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from weighting.core import JudgmentLike, PairwiseJudgment, as_judgments
from weighting.errors import EmptyItemsError, ValidationError

logger = logging.getLogger(__name__)


def validate_items(items: Sequence[str]) -> List[str]:
    if not items:
        raise EmptyItemsError()
    ordered = list(items)
    if len(set(ordered)) != len(ordered):
        duplicates = sorted({item for item in ordered if ordered.count(item) > 1})
        raise ValidationError(f"Item identifiers must be unique, duplicated: {duplicates}")
    return ordered


def validate_judgment(judgment: PairwiseJudgment) -> float:
    value = judgment.value
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(
            f"Judgment {judgment.item_a!r} vs {judgment.item_b!r} has a non-numeric value {value!r}"
        )
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(
            f"Judgment {judgment.item_a!r} vs {judgment.item_b!r} must be a positive finite number, got {value!r}"
        )
    return value


def validate_judgments(judgments: Iterable[JudgmentLike] | None) -> List[PairwiseJudgment]:
    checked = as_judgments(judgments)
    for judgment in checked:
        validate_judgment(judgment)
    return checked


def build_comparison_matrix(
    items: Sequence[str],
    judgments: Iterable[JudgmentLike] | None = None,
) -> np.ndarray:
    """Build the dense reciprocal comparison matrix for ``items``.

    Pairs without a judgment stay at 1 (equal importance). Judgments naming
    an unknown item or the same item twice are ignored. When a pair is
    judged more than once, the last judgment wins.
    """
    ordered = validate_items(items)
    index: Dict[str, int] = {item: idx for idx, item in enumerate(ordered)}
    size = len(ordered)
    matrix = np.ones((size, size), dtype=float)
    seen = set()

    for judgment in as_judgments(judgments):
        value = validate_judgment(judgment)
        a_idx = index.get(judgment.item_a)
        b_idx = index.get(judgment.item_b)
        if a_idx is None or b_idx is None:
            logger.debug(
                "Ignoring judgment with unknown item: %r vs %r",
                judgment.item_a,
                judgment.item_b,
            )
            continue
        if a_idx == b_idx:
            logger.debug("Ignoring self-comparison of %r", judgment.item_a)
            continue

        pair = frozenset((a_idx, b_idx))
        if pair in seen:
            logger.debug(
                "Overwriting earlier judgment for %r vs %r",
                judgment.item_a,
                judgment.item_b,
            )
        seen.add(pair)
        matrix[a_idx, b_idx] = value
        matrix[b_idx, a_idx] = 1.0 / value

    matrix.setflags(write=False)
    return matrix


def generate_pairs(items: Sequence[str]) -> List[Tuple[int, int]]:
    """All unordered index pairs ``(i, j)`` with ``i < j``, in input order."""
    if not items:
        raise EmptyItemsError()
    return list(combinations(range(len(items)), 2))


def generate_item_pairs(items: Sequence[str]) -> List[Tuple[str, str]]:
    ordered = list(items)
    return [(ordered[i], ordered[j]) for i, j in generate_pairs(ordered)]
