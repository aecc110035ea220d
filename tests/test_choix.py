import importlib.util
import unittest

from weighting.errors import ValidationError
from weighting.methods.choix import ChoixMethod


@unittest.skipUnless(importlib.util.find_spec("choix"), "choix not installed")
class TestChoixMethod(unittest.TestCase):
    def test_compute_weights(self) -> None:
        method = ChoixMethod()
        result = method.compute_weights(["Cost", "Quality"], [("Cost", "Quality", 2.0)])
        self.assertEqual(len(result.weights), 2)
        self.assertAlmostEqual(sum(result.weights), 1.0, places=3)
        self.assertGreater(result.weights[0], result.weights[1])
        self.assertEqual(result.consistency_ratio, 0.0)

    def test_percentages_sum_to_100(self) -> None:
        result = ChoixMethod().calculate(
            ["A", "B", "C"],
            [("A", "B", 3.0), ("B", "C", 5.0), ("A", "C", 7.0)],
        )
        self.assertEqual(sum(result.weights.values()), 100)
        self.assertGreater(result.weights["A"], result.weights["C"])


class TestChoixSingleItem(unittest.TestCase):
    def test_single_item_needs_no_fit(self) -> None:
        result = ChoixMethod().compute_weights(["Only"])
        self.assertEqual(result.weights, [1.0])
        self.assertEqual(result.consistency_ratio, 0.0)

    def test_single_item_still_validates_judgments(self) -> None:
        with self.assertRaises(ValidationError):
            ChoixMethod().compute_weights(["Only"], [("Only", "Other", 0.0)])
