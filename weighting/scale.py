"""Saaty's 1-9 scale for stating how strongly one factor beats another."""

from __future__ import annotations

import math

from weighting.core import PairwiseJudgment
from weighting.errors import ValidationError

SAATY_SCALE = {
    1: "Equal",
    2: "Weak",
    3: "Moderate",
    4: "Moderate+",
    5: "Strong",
    6: "Strong+",
    7: "Very Strong",
    8: "Very Strong+",
    9: "Extreme",
}


def _strength(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"Strength must be a positive finite number, got {value!r}")
    return value if value >= 1.0 else 1.0 / value


def scale_label(value: float) -> str:
    strength = _strength(value)
    label = SAATY_SCALE.get(int(math.floor(strength + 0.5)))
    return label if label is not None else f"{strength:.1f}"


def judgment_from_choice(item_a: str, item_b: str, strength: float, favored: str = "a") -> PairwiseJudgment:
    """Turn "``favored`` wins by ``strength``" into a judgment of a over b."""
    strength = _strength(strength)
    side = favored.lower()
    if side == "a":
        return PairwiseJudgment(item_a, item_b, strength)
    if side == "b":
        return PairwiseJudgment(item_a, item_b, 1.0 / strength)
    raise ValidationError(f"Favored side must be 'a' or 'b', got {favored!r}")
