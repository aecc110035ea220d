"""
Static reference data and thresholds for pairwise-comparison weighting.

Random Index values follow Saaty (1980).
"""

from types import MappingProxyType

# Random Index (RI) for matrices of size 1..10
RANDOM_INDEX = MappingProxyType({
    1: 0.0,
    2: 0.0,
    3: 0.58,
    4: 0.90,
    5: 1.12,
    6: 1.24,
    7: 1.32,
    8: 1.41,
    9: 1.45,
    10: 1.49,
})
RANDOM_INDEX_FALLBACK = 1.49

# CR strictly below this is acceptable
CONSISTENCY_THRESHOLD = 0.10

# Upper bounds (exclusive) of the interpretation bands, checked in order
CONSISTENCY_BANDS = (
    (0.05, "excellent", "Your comparisons are highly consistent!"),
    (0.08, "good", "Your comparisons are consistent."),
    (0.10, "acceptable", "Your comparisons are acceptably consistent."),
)
POOR_LEVEL = "poor"
POOR_MESSAGE = "Your comparisons may be inconsistent. Consider reviewing your answers."

PERCENT_TOTAL = 100

DEFAULT_METHOD = "ahp"
