"""
Domain models and value objects.

Contains the weight table and the query/result boundary models.
"""

from vote_odds.core.domain.vote_query import ProbabilityResult, VoteQuery
from vote_odds.core.domain.weight_table import UnknownVoteId, WeightTable

__all__ = [
    # Weight table
    "WeightTable",
    "UnknownVoteId",
    # Query / result
    "VoteQuery",
    "ProbabilityResult",
]
