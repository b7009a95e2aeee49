"""
User-facing messages for each match engine.

The resolver classifies matches the same way for every engine; only the
wording differs, so each engine gets a MatchMessages implementation.
"""
from abc import ABC, abstractmethod
from typing import Sequence

from ..config import DEFAULT_COMMAND_NAME


class MatchMessages(ABC):
    """Formats the three resolution outcomes for one match engine."""

    @abstractmethod
    def not_found(self, query: str, candidate_count: int) -> str:
        pass

    @abstractmethod
    def single_match(self, query: str, match: str) -> str:
        pass

    @abstractmethod
    def multiple_matches(self, query: str, matches: Sequence[str]) -> str:
        pass


class SubstringMessages(MatchMessages):

    def __init__(self, command_name: str = DEFAULT_COMMAND_NAME):
        """
        :param command_name: Command shown in the "try fuzzy match" hint
        """
        self.command_name = command_name

    def not_found(self, query: str, candidate_count: int) -> str:
        return (
            f"None of the {candidate_count} existing targets matches the substring `{query}`.\n"
            f"Try fuzzy match: '{self.command_name} {query} --fuzzy'"
        )

    def single_match(self, query: str, match: str) -> str:
        return (
            f"Target `{query}` doesn't exist. However, a single substring match "
            f"`{match}` was found and will be used ..."
        )

    def multiple_matches(self, query: str, matches: Sequence[str]) -> str:
        return (
            f"Target `{query}` doesn't exist. However, the following substring matches found:\n"
            + "\n".join(matches)
        )


class FuzzyMessages(MatchMessages):

    def not_found(self, query: str, candidate_count: int) -> str:
        return f"No fuzzy matches for target `{query}` were found."

    def single_match(self, query: str, match: str) -> str:
        return (
            f"Target `{query}` doesn't exist, a single fuzzy match `{match}` "
            f"was found and will be used ..."
        )

    def multiple_matches(self, query: str, matches: Sequence[str]) -> str:
        return f"Multiple fuzzy matches were found for `{query}`:\n" + "\n".join(matches)
