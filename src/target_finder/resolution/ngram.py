"""
N-gram bag similarity used by the fuzzy matcher.

Strings are compared as multisets of their character n-grams over several
window sizes. The score follows rapidfuzz conventions (0-100, higher is
better) so it can be passed to rapidfuzz.process as a scorer.
"""
from collections import Counter
from typing import Iterable, Optional

from ..config import DEFAULT_FUZZY_BAG_SIZES


def ngram_bag(value: str, bag_sizes: Iterable[int]) -> Counter:
    """
    Collect all n-grams of the given window sizes.

    Window sizes longer than the string contribute nothing.
    """
    bag: Counter = Counter()
    for size in bag_sizes:
        for start in range(len(value) - size + 1):
            bag[value[start:start + size]] += 1
    return bag


def ngram_ratio(
    s1: str,
    s2: str,
    *,
    bag_sizes: Iterable[int] = DEFAULT_FUZZY_BAG_SIZES,
    processor=None,
    score_cutoff: Optional[float] = None,
    **kwargs,
) -> float:
    """
    Dice coefficient of the n-gram bags of two strings, scaled to 0-100.

    :param s1: First string (the query)
    :param s2: Second string (the candidate)
    :param bag_sizes: N-gram window sizes
    :param processor: Optional preprocessing callable applied to both strings
    :param score_cutoff: Scores below this value are reported as 0
    :return: Similarity between 0 and 100
    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    bag_sizes = tuple(bag_sizes)
    bag1 = ngram_bag(s1, bag_sizes)
    bag2 = ngram_bag(s2, bag_sizes)

    total = sum(bag1.values()) + sum(bag2.values())
    if total == 0:
        return 0.0

    shared = sum((bag1 & bag2).values())
    score = 200.0 * shared / total

    if score_cutoff is not None and score < score_cutoff:
        return 0.0
    return score
