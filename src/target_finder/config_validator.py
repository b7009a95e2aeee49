"""
Configuration validation utilities.

Environment lookups and value parsing with explicit error messages.
"""
import os
from typing import Optional, Sequence, Tuple
from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    Blank values are treated as unset.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key)

    if value is None or not value.strip():
        return default

    return value.strip()


def parse_positive_int(value: str, key: str) -> int:
    """
    Parse a strictly positive integer setting.

    :param value: Raw string value
    :param key: Setting name (for error messages)
    :return: Parsed integer
    :raises: ConfigurationError if not a positive integer
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{key} must be a positive integer, got {value!r}."
        ) from None

    if parsed <= 0:
        raise ConfigurationError(
            f"{key} must be a positive integer, got {parsed}."
        )

    return parsed


def parse_int_tuple(value: str, key: str) -> Tuple[int, ...]:
    """
    Parse a comma separated list of positive integers, e.g. "2,3,4".

    :param value: Raw string value
    :param key: Setting name (for error messages)
    :return: Tuple of parsed integers
    :raises: ConfigurationError if empty or any item is invalid
    """
    items = [item.strip() for item in value.split(",") if item.strip()]

    if not items:
        raise ConfigurationError(f"{key} must list at least one integer.")

    return tuple(parse_positive_int(item, key) for item in items)


def validate_choice(value: str, key: str, choices: Sequence[str]) -> str:
    """
    Validate that a setting is one of a fixed set of names.

    :param value: Raw string value
    :param key: Setting name (for error messages)
    :param choices: Accepted values
    :return: The value
    :raises: ConfigurationError if not one of choices
    """
    if value not in choices:
        raise ConfigurationError(
            f"{key} must be one of {list(choices)}, got {value!r}."
        )

    return value
