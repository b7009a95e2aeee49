"""
Core abstraction for target matching strategies.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence


class TargetMatcher(ABC):
    """
    Base class for match engines.

    A matcher turns (candidates, query) into an ordered Match Set.
    It never raises for "no match"; it returns an empty list.
    """

    #: Name reported in resolution outcomes (e.g. "substring", "fuzzy")
    strategy_name: str = ""

    @abstractmethod
    def find_matches(
        self,
        query: str,
        candidates: Sequence[str],
    ) -> List[str]:
        """
        Find candidates matching a query.

        :param query: The query to match, used verbatim
        :param candidates: Candidate target labels, in source order
        :return: Matching labels, empty strings excluded
        """
        pass
