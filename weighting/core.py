from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from weighting.config import CONSISTENCY_THRESHOLD
from weighting.errors import ValidationError
from weighting.percentages import to_percentages


@dataclass(frozen=True)
class PairwiseJudgment:
    """How strongly ``item_a`` is preferred over ``item_b``.

    ``1`` means equal importance, ``3`` means ``item_a`` matters three times
    as much, ``1/3`` means ``item_b`` does.
    """

    item_a: str
    item_b: str
    value: float


JudgmentLike = Union[PairwiseJudgment, Tuple[str, str, float]]


def as_judgments(judgments: Iterable[JudgmentLike] | None) -> List[PairwiseJudgment]:
    if judgments is None:
        return []
    result: List[PairwiseJudgment] = []
    for judgment in judgments:
        if isinstance(judgment, PairwiseJudgment):
            result.append(judgment)
        else:
            try:
                item_a, item_b, value = judgment
            except (TypeError, ValueError) as exc:
                raise ValidationError(
                    f"Judgment must be an (item_a, item_b, value) triple, got {judgment!r}"
                ) from exc
            result.append(PairwiseJudgment(item_a, item_b, value))
    return result


@dataclass
class WeightingResult:
    weights: Dict[str, int]
    consistency_ratio: float
    is_consistent: bool
    method_id: str = "ahp"

    def to_dict(self) -> dict:
        return {
            "weights": dict(self.weights),
            "consistency_ratio": self.consistency_ratio,
            "is_consistent": self.is_consistent,
            "method_id": self.method_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeightingResult":
        ratio = float(data.get("consistency_ratio", 0.0))
        return cls(
            weights={key: int(value) for key, value in data.get("weights", {}).items()},
            consistency_ratio=ratio,
            is_consistent=bool(data.get("is_consistent", ratio < CONSISTENCY_THRESHOLD)),
            method_id=data.get("method_id", "ahp"),
        )


@dataclass
class MethodResult:
    items: List[str] = field(default_factory=list)
    weights: List[float] = field(default_factory=list)
    consistency_ratio: float = 0.0

    @property
    def is_consistent(self) -> bool:
        return self.consistency_ratio < CONSISTENCY_THRESHOLD

    def weights_by_item(self) -> Dict[str, float]:
        return dict(zip(self.items, self.weights))

    def percentages(self) -> Dict[str, int]:
        return to_percentages(self.items, self.weights)

    def summarize(self, method_id: str) -> WeightingResult:
        return WeightingResult(
            weights=self.percentages(),
            consistency_ratio=self.consistency_ratio,
            is_consistent=self.is_consistent,
            method_id=method_id,
        )


class WeightingMethod(ABC):
    id: str
    name: str

    @abstractmethod
    def compute_weights(
        self,
        items: Sequence[str],
        judgments: Iterable[JudgmentLike] | None = None,
    ) -> MethodResult:
        raise NotImplementedError

    def calculate(
        self,
        items: Sequence[str],
        judgments: Iterable[JudgmentLike] | None = None,
    ) -> WeightingResult:
        return self.compute_weights(items, judgments).summarize(self.id)
