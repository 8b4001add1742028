"""Per-candidate scoring: match verdict and relevance score for one string."""

from .core import score

__all__ = ["score"]
