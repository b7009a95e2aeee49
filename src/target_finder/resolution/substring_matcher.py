"""
Substring matching strategy for target resolution.

Fast, deterministic containment check.
"""
from typing import List, Sequence
from .target_matcher import TargetMatcher


class SubstringTargetMatcher(TargetMatcher):
    """
    Substring match strategy.

    Returns every candidate containing the query as a contiguous substring,
    preserving candidate order. Case-sensitive, no result limit.
    An empty query matches every non-empty candidate.
    """

    strategy_name = "substring"

    def find_matches(
        self,
        query: str,
        candidates: Sequence[str],
    ) -> List[str]:
        return [
            candidate
            for candidate in candidates
            if candidate and query in candidate
        ]
