from weighting.config import DEFAULT_METHOD
from weighting.consistency import ConsistencyInterpretation, consistency_ratio, interpret_consistency
from weighting.core import MethodResult, PairwiseJudgment, WeightingMethod, WeightingResult
from weighting.errors import EmptyItemsError, ValidationError, WeightingError
from weighting.matrix import build_comparison_matrix, generate_item_pairs, generate_pairs
from weighting.methods.ahp import AHPMethod, calculate_ahp_weights, solve_weights
from weighting.methods.choix import ChoixMethod
from weighting.methods.equal import EqualMethod
from weighting.percentages import to_percentages

METHODS = {
    "ahp": AHPMethod(),
    "equal": EqualMethod(),
    "choix": ChoixMethod(),
}


def get_method(method_id: str) -> WeightingMethod:
    return METHODS.get(method_id, METHODS[DEFAULT_METHOD])


def list_methods() -> dict:
    return {method_id: method.name for method_id, method in METHODS.items()}
