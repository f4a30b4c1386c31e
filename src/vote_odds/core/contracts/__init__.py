"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе vote-odds.
"""

from .validators import (
    ContractValidator,
    ProbabilityRequestValidator,
    ProbabilityResultValidator,
    SchemaLoader,
    validate_probability_request,
    validate_probability_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ProbabilityRequestValidator",
    "ProbabilityResultValidator",
    # Functions
    "validate_probability_request",
    "validate_probability_result",
]
