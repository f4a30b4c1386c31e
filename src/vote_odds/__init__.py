"""
vote-odds — exact probability that a vote appears in the next vote event.

Weighted selection without replacement with probabilistic continuation
(combined votes) and an independent discard (repeal) chance.
"""

__version__ = "1.0.0"
