"""Type coercion and validation utilities for configuration loading.

Errors are raised with clear messages to help users fix configuration issues.
"""

import os
from typing import Any

from gofritai.core.config.schema import ConfigSchema, EnvVarSpec


class ConfigError(Exception):
    """Configuration validation error.

    Attributes:
        env_var: The environment variable name
        value: The raw value that failed validation
        message: Human-readable error message
    """

    def __init__(self, env_var: str, value: str, message: str) -> None:
        self.env_var = env_var
        self.value = value
        self.message = message
        super().__init__(f"{env_var}={value}: {message}")


def load_env_var(spec: EnvVarSpec) -> Any:
    """Load and validate a single environment variable.

    Args:
        spec: Environment variable specification from ConfigSchema

    Returns:
        Validated and coerced value, or the default when unset

    Raises:
        ConfigError: If validation fails or type conversion is impossible
    """
    raw_value = os.environ.get(spec.name)

    if raw_value is None:
        return spec.default

    try:
        if spec.type_hint is int:
            value = int(raw_value)
        else:
            value = raw_value
    except ValueError as e:
        raise ConfigError(
            spec.name,
            raw_value,
            f"Cannot convert to {spec.type_hint.__name__}: {e}",
        ) from e

    if spec.validator is not None:
        try:
            if not spec.validator(value):
                raise ConfigError(
                    spec.name,
                    raw_value,
                    f"Validation failed for type {spec.type_hint.__name__}",
                )
        except TypeError as e:
            raise ConfigError(
                spec.name,
                raw_value,
                f"Validation error: {e}",
            ) from e

    return value


def validate_all() -> list[ConfigError]:
    """Validate all environment variables and return any errors.

    Every spec is checked so that all problems can be reported at once.

    Returns:
        List of ConfigError instances (empty if all valid)
    """
    errors: list[ConfigError] = []
    for spec in ConfigSchema.all_specs().values():
        try:
            load_env_var(spec)
        except ConfigError as e:
            errors.append(e)
    return errors
