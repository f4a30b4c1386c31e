"""Engine — рекурсивный мемоизированный расчёт вероятностей голосований.

- ProbabilityEngine: вероятность включения голосования в цепочку
- RemovalMultiset: ключ мемоизации (мультимножество удалённых весов)
"""

from .probability_engine import (
    EngineStats,
    ProbabilityEngine,
    calculate_probability,
    evaluate_query,
    overall_probability,
)
from .removal_multiset import EMPTY_REMOVALS, RemovalMultiset

__all__ = [
    "ProbabilityEngine",
    "EngineStats",
    "RemovalMultiset",
    "EMPTY_REMOVALS",
    "overall_probability",
    "calculate_probability",
    "evaluate_query",
]
