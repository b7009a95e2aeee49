"""
Fuzzy matching strategy for target resolution using rapidfuzz.

Handles typos and near-misses in target names.
"""
import logging
from functools import partial
from typing import Iterable, List, Sequence
from rapidfuzz import fuzz, process

from ..config import DEFAULT_FUZZY_BAG_SIZES, DEFAULT_FUZZY_MATCHES_COUNT, DEFAULT_FUZZY_SCORER
from .ngram import ngram_ratio
from .target_matcher import TargetMatcher

logger = logging.getLogger(__name__)


class FuzzyTargetMatcher(TargetMatcher):
    """
    Fuzzy match strategy using rapidfuzz.

    Handles:
    - Typos ("consensus_perfromance" → "//rs/tests:consensus_performance")
    - Transposed or dropped characters
    - Partial names ("upgrade_compat" → "//rs/tests:upgrade_compatibility_test")

    Scores every candidate with the configured scorer and uses rapidfuzz's
    process.extract to keep the best `limit` results. Ties keep candidate
    order, so results are deterministic for fixed inputs.
    """

    strategy_name = "fuzzy"

    def __init__(
        self,
        limit: int = DEFAULT_FUZZY_MATCHES_COUNT,
        bag_sizes: Iterable[int] = DEFAULT_FUZZY_BAG_SIZES,
        scorer: str = DEFAULT_FUZZY_SCORER,
    ):
        """
        Initialize fuzzy matcher.

        :param limit: Maximum number of matches to return
        :param bag_sizes: N-gram window sizes for the "ngram" scorer
        :param scorer: Scorer to use ("ngram", "ratio", "partial_ratio",
            "token_sort_ratio", "token_set_ratio")
        """
        if limit <= 0:
            raise ValueError(f"Limit must be a positive integer, got {limit}")

        bag_sizes = tuple(bag_sizes)
        if not bag_sizes or any(size <= 0 for size in bag_sizes):
            raise ValueError(f"Bag sizes must be positive integers, got {bag_sizes}")

        self.limit = limit
        self.bag_sizes = bag_sizes
        self.scorer = scorer

        # Map scorer names to scoring functions
        self._scorer_map = {
            "ngram": partial(ngram_ratio, bag_sizes=bag_sizes),
            "ratio": fuzz.ratio,
            "partial_ratio": fuzz.partial_ratio,
            "token_sort_ratio": fuzz.token_sort_ratio,
            "token_set_ratio": fuzz.token_set_ratio,
        }

        if scorer not in self._scorer_map:
            raise ValueError(
                f"Unknown scorer '{scorer}'. "
                f"Must be one of: {list(self._scorer_map.keys())}"
            )

    def find_matches(
        self,
        query: str,
        candidates: Sequence[str],
    ) -> List[str]:
        """
        Find the closest candidates, best first.

        :param query: Query to match
        :param candidates: List of candidate target labels
        :return: Up to `limit` labels sharing some similarity with the query
        """
        choices = [candidate for candidate in candidates if candidate]
        if not choices:
            return []

        results = process.extract(
            query,
            choices,
            scorer=self._scorer_map[self.scorer],
            limit=self.limit,
        )

        # Drop candidates with nothing in common with the query
        matches = [choice for choice, score, _ in results if score > 0]
        logger.debug(
            "Fuzzy search for %r over %d candidates returned %d matches",
            query, len(choices), len(matches),
        )
        return matches
