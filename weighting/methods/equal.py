from __future__ import annotations

from typing import Iterable, Sequence

from weighting.core import JudgmentLike, MethodResult, WeightingMethod
from weighting.matrix import validate_items, validate_judgments


class EqualMethod(WeightingMethod):
    id = "equal"
    name = "Equal Weights"

    def compute_weights(
        self,
        items: Sequence[str],
        judgments: Iterable[JudgmentLike] | None = None,
    ) -> MethodResult:
        ordered = validate_items(items)
        validate_judgments(judgments)
        size = len(ordered)
        return MethodResult(items=ordered, weights=[1.0 / size] * size, consistency_ratio=0.0)
