from weighting.methods.ahp import AHPMethod, calculate_ahp_weights, solve_weights
from weighting.methods.choix import ChoixMethod
from weighting.methods.equal import EqualMethod

__all__ = ["AHPMethod", "ChoixMethod", "EqualMethod", "calculate_ahp_weights", "solve_weights"]
