"""
Result types for target resolution.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..exceptions import AmbiguousMatchError, NoMatchError


class ResolutionStatus(str, Enum):
    """Outcome tag of a resolution."""
    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolutionOutcome:
    """
    Immutable result of resolving a query against candidate targets.

    Attributes:
        status: RESOLVED, AMBIGUOUS or NOT_FOUND
        query: The original query, unmodified
        strategy_used: Name of the match engine ("substring" or "fuzzy")
        message: Informational text when resolved, error text otherwise
        target: The resolved label (only set when RESOLVED)
        matches: Every match the engine produced, in engine order
    """
    status: ResolutionStatus
    query: str
    strategy_used: str
    message: str
    target: Optional[str] = None
    matches: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate that target is set exactly when resolved."""
        if (self.status is ResolutionStatus.RESOLVED) != (self.target is not None):
            raise ValueError(
                f"Target must be set only for resolved outcomes, got status={self.status.value}"
            )

    @property
    def is_resolved(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED

    def raise_for_status(self) -> Tuple[str, str]:
        """
        Return (target, message) or raise the matching ResolverError.

        :raises: NoMatchError or AmbiguousMatchError
        """
        if self.status is ResolutionStatus.NOT_FOUND:
            raise NoMatchError(self.query, self.message)
        if self.status is ResolutionStatus.AMBIGUOUS:
            raise AmbiguousMatchError(self.query, self.matches, self.message)
        return self.target, self.message
