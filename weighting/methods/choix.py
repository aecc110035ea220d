from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from weighting.consistency import consistency_ratio
from weighting.core import JudgmentLike, MethodResult, WeightingMethod
from weighting.matrix import build_comparison_matrix, validate_items, validate_judgments


class ChoixMethod(WeightingMethod):
    """Bradley-Terry weights fitted to the judgments read as win counts."""

    id = "choix"
    name = "Choix (Bradley-Terry)"

    _ratio_scale = [2.0, 3.0, 5.0, 7.0, 9.0]
    _strength_map = {2.0: 1, 3.0: 2, 5.0: 3, 7.0: 4, 9.0: 5}

    def compute_weights(
        self,
        items: Sequence[str],
        judgments: Iterable[JudgmentLike] | None = None,
    ) -> MethodResult:
        ordered = validate_items(items)
        checked = validate_judgments(judgments)
        n_items = len(ordered)
        if n_items == 1:
            return MethodResult(items=ordered, weights=[1.0], consistency_ratio=0.0)

        pairwise = build_comparison_matrix(ordered, checked)
        comp_mat = np.zeros((n_items, n_items), dtype=float)
        for i in range(n_items):
            for j in range(i + 1, n_items):
                ratio = float(pairwise[i, j])
                if abs(ratio - 1.0) < 1e-9:
                    comp_mat[i, j] += 1.0
                    comp_mat[j, i] += 1.0
                else:
                    strength = self._ratio_to_strength(ratio)
                    if ratio > 1.0:
                        comp_mat[i, j] += strength
                    else:
                        comp_mat[j, i] += strength

        from choix import lsr_pairwise_dense

        params = lsr_pairwise_dense(comp_mat, alpha=1e-4)
        weights = np.exp(params)
        weights = weights / weights.sum()
        ratio = consistency_ratio(pairwise, weights)
        return MethodResult(items=ordered, weights=weights.tolist(), consistency_ratio=ratio)

    @classmethod
    def _ratio_to_strength(cls, ratio: float) -> int:
        value = ratio if ratio >= 1.0 else 1.0 / ratio
        closest = min(cls._ratio_scale, key=lambda candidate: abs(candidate - value))
        return cls._strength_map[closest]
