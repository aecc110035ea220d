from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Mapping, Optional


@dataclass
class Factor:
    id: str
    name: str
    weight: int = 0
    category: str = "personal"
    description: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "weight": self.weight,
            "category": self.category,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Factor":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            weight=int(data.get("weight", 0)),
            category=data.get("category", "personal"),
            description=data.get("description"),
        )


def factor_names(factors: List[Factor]) -> List[str]:
    return [factor.name for factor in factors]


def apply_weights(factors: List[Factor], weights_by_name: Mapping[str, int]) -> List[Factor]:
    """Copies of ``factors`` carrying their computed weight; unknown names get 0."""
    return [replace(factor, weight=int(weights_by_name.get(factor.name, 0))) for factor in factors]


def weights_by_id(factors: List[Factor], weights_by_name: Mapping[str, int]) -> Dict[str, int]:
    return {factor.id: int(weights_by_name.get(factor.name, 0)) for factor in factors}
