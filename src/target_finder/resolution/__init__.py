"""
Target resolution layer.

Resolves a user supplied, possibly partial or misspelled target name to a
single canonical build label.

Key components:
- TargetMatcher: Base class for match engines
- SubstringTargetMatcher / FuzzyTargetMatcher: the two engines
- ResolutionOutcome: Immutable RESOLVED / AMBIGUOUS / NOT_FOUND result
- TargetResolver: Engine selection and 0 / 1 / many classification
"""
from .target_matcher import TargetMatcher
from .substring_matcher import SubstringTargetMatcher
from .fuzzy_matcher import FuzzyTargetMatcher
from .ngram import ngram_bag, ngram_ratio
from .match_messages import MatchMessages, SubstringMessages, FuzzyMessages
from .resolution_result import ResolutionOutcome, ResolutionStatus
from .target_resolver import TargetResolver, classify_matches, resolve
from .resolver_factory import create_fuzzy_matcher, create_target_resolver

__all__ = [
    "TargetMatcher",
    "SubstringTargetMatcher",
    "FuzzyTargetMatcher",
    "ngram_bag",
    "ngram_ratio",
    "MatchMessages",
    "SubstringMessages",
    "FuzzyMessages",
    "ResolutionOutcome",
    "ResolutionStatus",
    "TargetResolver",
    "classify_matches",
    "resolve",
    "create_fuzzy_matcher",
    "create_target_resolver",
]
