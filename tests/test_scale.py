import unittest

from weighting.core import PairwiseJudgment
from weighting.errors import ValidationError
from weighting.scale import SAATY_SCALE, judgment_from_choice, scale_label


class TestScaleLabel(unittest.TestCase):
    def test_scale_covers_one_to_nine(self) -> None:
        self.assertEqual(sorted(SAATY_SCALE), list(range(1, 10)))

    def test_labels(self) -> None:
        self.assertEqual(scale_label(1), "Equal")
        self.assertEqual(scale_label(5.4), "Strong")
        self.assertEqual(scale_label(9), "Extreme")

    def test_reciprocal_reads_as_strength(self) -> None:
        self.assertEqual(scale_label(1.0 / 3.0), "Moderate")

    def test_off_scale_value(self) -> None:
        self.assertEqual(scale_label(12), "12.0")

    def test_rejects_non_positive(self) -> None:
        with self.assertRaises(ValidationError):
            scale_label(0)


class TestJudgmentFromChoice(unittest.TestCase):
    def test_favoring_first_item(self) -> None:
        self.assertEqual(
            judgment_from_choice("Cost", "Quality", 5, favored="a"),
            PairwiseJudgment("Cost", "Quality", 5.0),
        )

    def test_favoring_second_item(self) -> None:
        judgment = judgment_from_choice("Cost", "Quality", 4, favored="B")
        self.assertEqual(judgment.item_a, "Cost")
        self.assertEqual(judgment.item_b, "Quality")
        self.assertAlmostEqual(judgment.value, 0.25)

    def test_rejects_unknown_side(self) -> None:
        with self.assertRaises(ValidationError):
            judgment_from_choice("Cost", "Quality", 3, favored="c")
