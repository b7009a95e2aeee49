from dataclasses import dataclass
from typing import Tuple


# Max number of results returned by the fuzzy search.
DEFAULT_FUZZY_MATCHES_COUNT = 7
# N-gram window sizes compared by the fuzzy scorer.
DEFAULT_FUZZY_BAG_SIZES = (2, 3, 4)
DEFAULT_FUZZY_SCORER = "ngram"
FUZZY_SCORERS = ("ngram", "ratio", "partial_ratio", "token_sort_ratio", "token_set_ratio")
# Command suggested in "try fuzzy match" hints.
DEFAULT_COMMAND_NAME = "ict test"


@dataclass
class TargetFinderConfig:
    # Bazel
    bazel_binary: str = "bazel"
    test_root: str = "//rs/tests/..."
    testnet_tag: str = "dynamic_testnet"

    # Fuzzy matching
    fuzzy_matches_count: int = DEFAULT_FUZZY_MATCHES_COUNT
    fuzzy_bag_sizes: Tuple[int, ...] = DEFAULT_FUZZY_BAG_SIZES
    fuzzy_scorer: str = DEFAULT_FUZZY_SCORER

    command_name: str = DEFAULT_COMMAND_NAME
