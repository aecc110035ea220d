import unittest

from weighting import get_method, list_methods
from weighting.core import WeightingResult
from weighting.errors import EmptyItemsError, ValidationError
from weighting.methods.ahp import AHPMethod
from weighting.methods.equal import EqualMethod


class TestMethodRegistry(unittest.TestCase):
    def test_list_methods(self) -> None:
        methods = list_methods()
        self.assertEqual(methods["ahp"], "Analytic Hierarchy Process")
        self.assertEqual(methods["equal"], "Equal Weights")
        self.assertIn("choix", methods)

    def test_unknown_method_falls_back_to_ahp(self) -> None:
        self.assertIsInstance(get_method("missing"), AHPMethod)
        self.assertIsInstance(get_method("equal"), EqualMethod)


class TestEqualMethod(unittest.TestCase):
    def test_ignores_judgments(self) -> None:
        result = EqualMethod().calculate(["A", "B", "C", "D"], [("A", "B", 9.0)])
        self.assertEqual(result.weights, {"A": 25, "B": 25, "C": 25, "D": 25})
        self.assertEqual(result.consistency_ratio, 0.0)
        self.assertTrue(result.is_consistent)
        self.assertEqual(result.method_id, "equal")

    def test_uneven_split_sums_to_100(self) -> None:
        result = EqualMethod().calculate(["A", "B", "C"])
        self.assertEqual(result.weights, {"A": 34, "B": 33, "C": 33})

    def test_empty_items_rejected(self) -> None:
        with self.assertRaises(EmptyItemsError):
            EqualMethod().compute_weights([])

    def test_rejects_invalid_judgments(self) -> None:
        with self.assertRaises(ValidationError):
            EqualMethod().compute_weights(["A"], [("A", "B", -3.0)])


class TestWeightingResult(unittest.TestCase):
    def test_dict_round_trip(self) -> None:
        result = get_method("ahp").calculate(["A", "B"], [("A", "B", 4.0)])
        data = result.to_dict()
        self.assertEqual(
            data,
            {
                "weights": {"A": 80, "B": 20},
                "consistency_ratio": 0.0,
                "is_consistent": True,
                "method_id": "ahp",
            },
        )
        self.assertEqual(WeightingResult.from_dict(data), result)

    def test_from_dict_derives_verdict(self) -> None:
        result = WeightingResult.from_dict({"weights": {"A": 100}, "consistency_ratio": 0.2})
        self.assertFalse(result.is_consistent)
        self.assertEqual(result.method_id, "ahp")
