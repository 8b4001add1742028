"""
Sort configuration: bonuses and penalties applied by the scoring function.

SortOptions defaults are defined here. Callers may pass a dict (e.g. loaded
from a JSON file); from_dict() merges it with these defaults.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

# Bonus for adjacent matches
DEFAULT_ADJACENCY_BONUS = 5.0
# Bonus if the match is after a separator
DEFAULT_SEPARATOR_BONUS = 10.0
# Bonus if match is uppercase and previous is lower
DEFAULT_CAMEL_BONUS = 10.0
# Penalty applied for every letter in string before first match
DEFAULT_LEADING_LETTER_PENALTY = -3.0
# Maximum penalty for leading letters
DEFAULT_MAX_LEADING_LETTER_PENALTY = -9.0
# Penalty for every letter that doesn't match
DEFAULT_UNMATCHED_LETTER_PENALTY = -1.0

# Short names accepted inside the "bonuses" / "penalties" sections of a config dict.
_SECTION_FIELDS = {
    "bonuses": {
        "adjacency": "adjacency_bonus",
        "separator": "separator_bonus",
        "camel": "camel_bonus",
    },
    "penalties": {
        "leading_letter": "leading_letter_penalty",
        "max_leading_letter": "max_leading_letter_penalty",
        "unmatched_letter": "unmatched_letter_penalty",
    },
}


class SortOptions(BaseModel):
    """Bonuses and penalties for fuzzy sorting."""

    model_config = ConfigDict(frozen=True)

    # -------------------------------------------------------------------------
    # Bonuses (added to the score of a matched letter)
    # -------------------------------------------------------------------------

    # Previous candidate letter was also matched.
    adjacency_bonus: float = DEFAULT_ADJACENCY_BONUS
    # Previous candidate letter was "_" or " " (or this is the first letter).
    separator_bonus: float = DEFAULT_SEPARATOR_BONUS
    # Previous letter lowercase, this one uppercase, e.g. the H in GitHub.
    camel_bonus: float = DEFAULT_CAMEL_BONUS

    # -------------------------------------------------------------------------
    # Penalties
    # leading = max(position_of_first_match * leading_letter_penalty, max_leading_letter_penalty)
    # -------------------------------------------------------------------------

    leading_letter_penalty: float = DEFAULT_LEADING_LETTER_PENALTY
    # Floor for the leading penalty (the most negative value it may reach).
    max_leading_letter_penalty: float = DEFAULT_MAX_LEADING_LETTER_PENALTY
    # Charged for every candidate letter that matches nothing.
    unmatched_letter_penalty: float = DEFAULT_UNMATCHED_LETTER_PENALTY

    def with_overrides(self, **overrides: float) -> "SortOptions":
        """Return a copy with the given fields replaced."""
        unknown = set(overrides) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown sort options: {', '.join(sorted(unknown))}")
        return type(self).model_validate({**self.model_dump(), **overrides})

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SortOptions":
        """Create options from dictionary (e.g., loaded from JSON)."""
        flat = {}
        for section, names in _SECTION_FIELDS.items():
            values = config_dict.get(section) or {}
            if not isinstance(values, dict):
                raise ValueError(f"'{section}' must be an object, got {type(values).__name__}")
            for short, field in names.items():
                if short in values:
                    flat[field] = values[short]
        allowed = set(cls.model_fields)
        flat.update({k: v for k, v in config_dict.items() if k in allowed})
        return cls.model_validate(flat)


DEFAULT_OPTIONS = SortOptions()


def resolve_options(options: Optional[SortOptions]) -> SortOptions:
    """Return options or DEFAULT_OPTIONS when none is provided."""
    return options if options is not None else DEFAULT_OPTIONS
