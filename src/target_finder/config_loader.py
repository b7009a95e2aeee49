"""
Configuration loader with validation.

Builds TargetFinderConfig from environment variables (and a local .env file).
"""
from dotenv import load_dotenv
from .config import TargetFinderConfig, FUZZY_SCORERS
from .config_validator import get_optional_env, parse_int_tuple, parse_positive_int, validate_choice


def load_config_from_env(load_env_file: bool = True) -> TargetFinderConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        source = BazelCandidateSource(config)

    :param load_env_file: Whether to read a .env file first (local development)
    :return: Validated TargetFinderConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    if load_env_file:
        load_dotenv()

    defaults = TargetFinderConfig()

    bag_sizes = get_optional_env("TARGET_FINDER_FUZZY_BAG_SIZES")
    matches_count = get_optional_env("TARGET_FINDER_FUZZY_MATCHES_COUNT")

    return TargetFinderConfig(
        bazel_binary=get_optional_env("TARGET_FINDER_BAZEL_BINARY", defaults.bazel_binary),
        test_root=get_optional_env("TARGET_FINDER_TEST_ROOT", defaults.test_root),
        testnet_tag=get_optional_env("TARGET_FINDER_TESTNET_TAG", defaults.testnet_tag),
        fuzzy_matches_count=(
            parse_positive_int(matches_count, "TARGET_FINDER_FUZZY_MATCHES_COUNT")
            if matches_count is not None
            else defaults.fuzzy_matches_count
        ),
        fuzzy_bag_sizes=(
            parse_int_tuple(bag_sizes, "TARGET_FINDER_FUZZY_BAG_SIZES")
            if bag_sizes is not None
            else defaults.fuzzy_bag_sizes
        ),
        fuzzy_scorer=validate_choice(
            get_optional_env("TARGET_FINDER_FUZZY_SCORER", defaults.fuzzy_scorer),
            "TARGET_FINDER_FUZZY_SCORER",
            FUZZY_SCORERS,
        ),
        command_name=get_optional_env("TARGET_FINDER_COMMAND_NAME", defaults.command_name),
    )
