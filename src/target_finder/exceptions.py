from typing import Sequence, Tuple


class TargetFinderError(Exception):
    """Base exception for target finder."""


class ConfigurationError(TargetFinderError):
    """Raised when configuration values are missing or invalid."""


class QueryFailedError(TargetFinderError):
    """Raised when a bazel query process exits with a non-zero status."""

    def __init__(self, command: Sequence[str], stderr: str):
        self.command: Tuple[str, ...] = tuple(command)
        self.stderr = stderr
        super().__init__(f"Bazel command: [{' '.join(self.command)}] failed: {stderr}")


class ResolverError(TargetFinderError):
    """Base exception for target resolution failures."""

    def __init__(self, query: str, message: str):
        self.query = query
        super().__init__(message)


class NoMatchError(ResolverError):
    """Raised when no target matches the query."""


class AmbiguousMatchError(ResolverError):
    """Raised when more than one target matches the query."""

    def __init__(self, query: str, matches: Sequence[str], message: str):
        self.matches: Tuple[str, ...] = tuple(matches)
        super().__init__(query, message)
