"""
Target resolution: picks a match engine and classifies its matches.
"""
import logging
from typing import List, Optional, Sequence

from ..config import DEFAULT_COMMAND_NAME
from .fuzzy_matcher import FuzzyTargetMatcher
from .match_messages import FuzzyMessages, MatchMessages, SubstringMessages
from .resolution_result import ResolutionOutcome, ResolutionStatus
from .substring_matcher import SubstringTargetMatcher
from .target_matcher import TargetMatcher

logger = logging.getLogger(__name__)


def classify_matches(
    query: str,
    matches: Sequence[str],
    candidate_count: int,
    strategy_name: str,
    messages: MatchMessages,
) -> ResolutionOutcome:
    """
    Classify a Match Set by size: 0 → NOT_FOUND, 1 → RESOLVED, more → AMBIGUOUS.

    :param query: Original query
    :param matches: Matches produced by the engine, in engine order
    :param candidate_count: Number of candidates searched
    :param strategy_name: Name of the engine that produced the matches
    :param messages: Message formatter for that engine
    :return: ResolutionOutcome
    """
    matches = tuple(matches)

    if not matches:
        return ResolutionOutcome(
            status=ResolutionStatus.NOT_FOUND,
            query=query,
            strategy_used=strategy_name,
            message=messages.not_found(query, candidate_count),
        )

    if len(matches) == 1:
        return ResolutionOutcome(
            status=ResolutionStatus.RESOLVED,
            query=query,
            strategy_used=strategy_name,
            message=messages.single_match(query, matches[0]),
            target=matches[0],
            matches=matches,
        )

    return ResolutionOutcome(
        status=ResolutionStatus.AMBIGUOUS,
        query=query,
        strategy_used=strategy_name,
        message=messages.multiple_matches(query, matches),
        matches=matches,
    )


class TargetResolver:
    """
    Resolves a (possibly partial or misspelled) target name to one label.

    Combines:
    - SubstringTargetMatcher (default, exact containment)
    - FuzzyTargetMatcher (n-gram similarity, opt-in)
    - classify_matches (shared 0 / 1 / many classification)

    Usage:
        resolver = TargetResolver()
        outcome = resolver.resolve(all_targets, "bar")
        if outcome.is_resolved:
            label = outcome.target
    """

    def __init__(
        self,
        substring_matcher: Optional[TargetMatcher] = None,
        fuzzy_matcher: Optional[TargetMatcher] = None,
        command_name: str = DEFAULT_COMMAND_NAME,
    ):
        """
        :param substring_matcher: Engine used when fuzzy search is off
        :param fuzzy_matcher: Engine used when fuzzy search is on
        :param command_name: Command shown in the "try fuzzy match" hint
        """
        self._substring = substring_matcher or SubstringTargetMatcher()
        self._fuzzy = fuzzy_matcher or FuzzyTargetMatcher()
        self._substring_messages = SubstringMessages(command_name)
        self._fuzzy_messages = FuzzyMessages()

    def resolve(
        self,
        candidates: Sequence[str],
        query: str,
        use_fuzzy: bool = False,
    ) -> ResolutionOutcome:
        """
        Resolve a query against candidate labels.

        An exact label is not special-cased; it goes through the same
        ambiguity check as any other query.

        :param candidates: All known target labels
        :param query: Target name supplied by the user
        :param use_fuzzy: Use approximate matching instead of substring matching
        :return: ResolutionOutcome
        """
        if use_fuzzy:
            matcher, messages = self._fuzzy, self._fuzzy_messages
        else:
            matcher, messages = self._substring, self._substring_messages

        matches = matcher.find_matches(query, candidates)
        logger.debug(
            "%s search for %r: %d of %d candidates matched",
            matcher.strategy_name, query, len(matches), len(candidates),
        )

        return classify_matches(
            query=query,
            matches=matches,
            candidate_count=len(candidates),
            strategy_name=matcher.strategy_name,
            messages=messages,
        )

    def closest_matches(
        self,
        candidates: Sequence[str],
        query: str,
    ) -> List[str]:
        """
        Suggest the candidates closest to a query, best first.

        Used to suggest dynamic testnet names; no classification is applied.

        :param candidates: Labels to search (e.g. dynamic testnet targets)
        :param query: Name supplied by the user
        :return: Fuzzy matches, capped by the fuzzy matcher's limit
        """
        return self._fuzzy.find_matches(query, candidates)


def resolve(
    candidates: Sequence[str],
    query: str,
    use_fuzzy: bool = False,
) -> ResolutionOutcome:
    """Resolve with default matchers. See TargetResolver.resolve."""
    return TargetResolver().resolve(candidates, query, use_fuzzy)
