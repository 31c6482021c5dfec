# splitgain/__init__.py
"""
splitgain: information gain split criterion for decision-tree learners.

Exports:
    - InformationGain
    - evaluate, evaluate_weighted, evaluate_counts, gain_range
"""
from .criterion import (
    InformationGain,
    evaluate,
    evaluate_counts,
    evaluate_weighted,
    gain_range,
)

__all__ = [
    "InformationGain",
    "evaluate",
    "evaluate_weighted",
    "evaluate_counts",
    "gain_range",
]
__version__ = "0.1.0"
