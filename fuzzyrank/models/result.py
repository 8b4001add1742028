"""
Match result: the outcome of scoring one candidate string against a query.
"""

from pydantic import BaseModel, ConfigDict


class MatchResult(BaseModel):
    """Result of a single fuzzy ranking."""

    model_config = ConfigDict(frozen=True)

    # True if every query character is present, in order, in sort_key.
    match: bool
    # The query that was matched against.
    query: str
    # How well sort_key matched query. Higher is better; may be negative.
    score: float
    # The string query was compared to.
    sort_key: str
