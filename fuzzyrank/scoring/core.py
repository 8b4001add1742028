"""
Scoring: match one candidate string against a query in a single pass.

Walks the candidate left to right with a cursor into the query. A matched
letter is not committed straight away: it is held as the "best letter" until
either the next query letter matches (the hold is resolved) or a later
occurrence of the same letter scores at least as well (the hold moves there).
This picks the better placement of repeated letters without a full alignment.
"""

from dataclasses import dataclass
from typing import Optional

from ..models.config import SortOptions, resolve_options
from ..models.result import MatchResult
from ..utils.chars import is_lower, is_separator, is_upper, to_lower


@dataclass
class _MatchState:
    """Loop state carried between candidate positions."""

    score: float = 0.0
    query_idx: int = 0
    # Pending letter (lowercased) and the score it will add once committed.
    best_lower: str = ""
    best_score: float = 0.0
    prev_matched: bool = False
    prev_lower: bool = False
    # The first character behaves as if it followed a separator.
    prev_separator: bool = True

    def commit_best(self) -> None:
        self.score += self.best_score
        self.best_lower = ""
        self.best_score = 0.0


def score(
    candidate: str,
    query: str,
    options: Optional[SortOptions] = None,
) -> MatchResult:
    """
    Score candidate for query.

    match is True when every character of query appears in candidate, in order,
    compared case-insensitively. The score is returned for non-matches too.
    An empty query always matches.
    """
    opts = resolve_options(options)
    st = _MatchState()
    query_len = len(query)

    for pos, ch in enumerate(candidate):
        query_lower = to_lower(query[st.query_idx]) if st.query_idx < query_len else ""
        ch_lower = to_lower(ch)
        has_best = st.best_lower != ""

        next_match = query_lower != "" and query_lower == ch_lower
        rematch = has_best and st.best_lower == ch_lower
        advanced = next_match and has_best
        query_repeat = has_best and st.best_lower == query_lower

        if advanced or query_repeat:
            st.commit_best()

        if next_match or rematch:
            new_score = 0.0

            # Only the first matched query letter pays for the letters before it
            if st.query_idx == 0:
                st.score += max(pos * opts.leading_letter_penalty, opts.max_leading_letter_penalty)

            if st.prev_matched:
                new_score += opts.adjacency_bonus
            if st.prev_separator:
                new_score += opts.separator_bonus
            if st.prev_lower and is_upper(ch):
                new_score += opts.camel_bonus

            if next_match:
                st.query_idx += 1

            if new_score >= st.best_score:
                if st.best_lower != "":
                    st.score += opts.unmatched_letter_penalty
                st.best_lower = ch_lower
                st.best_score = new_score

            st.prev_matched = True
        else:
            st.score += opts.unmatched_letter_penalty
            st.prev_matched = False

        st.prev_lower = is_lower(ch)
        st.prev_separator = is_separator(ch)

    if st.best_lower != "":
        st.commit_best()

    return MatchResult(
        match=st.query_idx == query_len,
        query=query,
        score=st.score,
        sort_key=candidate,
    )
