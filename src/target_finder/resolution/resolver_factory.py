"""
Factory for creating target resolvers from configuration.
"""
from typing import Optional
from .fuzzy_matcher import FuzzyTargetMatcher
from .substring_matcher import SubstringTargetMatcher
from .target_resolver import TargetResolver
from ..config import TargetFinderConfig
from ..exceptions import ConfigurationError


def create_fuzzy_matcher(config: Optional[TargetFinderConfig] = None) -> FuzzyTargetMatcher:
    """
    Build a FuzzyTargetMatcher with the configured limit, bag sizes and scorer.

    :param config: TargetFinderConfig instance (defaults if None)
    :return: FuzzyTargetMatcher
    :raises: ConfigurationError if the fuzzy settings are invalid
    """
    config = config or TargetFinderConfig()
    try:
        return FuzzyTargetMatcher(
            limit=config.fuzzy_matches_count,
            bag_sizes=config.fuzzy_bag_sizes,
            scorer=config.fuzzy_scorer,
        )
    except ValueError as exc:
        raise ConfigurationError(f"Invalid fuzzy matching configuration: {exc}") from exc


def create_target_resolver(config: Optional[TargetFinderConfig] = None) -> TargetResolver:
    """
    Factory function to create a TargetResolver.

    :param config: TargetFinderConfig instance (defaults if None)
    :return: TargetResolver
    :raises: ConfigurationError if the fuzzy settings are invalid
    """
    config = config or TargetFinderConfig()
    return TargetResolver(
        substring_matcher=SubstringTargetMatcher(),
        fuzzy_matcher=create_fuzzy_matcher(config),
        command_name=config.command_name,
    )
