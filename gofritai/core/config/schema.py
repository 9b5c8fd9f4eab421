"""Declarative schema for environment variable configuration.

Every setting GoFritAI reads from the environment is declared here once,
together with its default, type and validation rule.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Type the raw string is converted to (str or int)
        description: Human-readable description for docs
        validator: Optional custom validation function
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Logging ===

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="WARNING",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x.split()[0].upper() in LOG_LEVELS if x.strip() else False,
    )

    # === Monitor ===

    MONITOR_INTERVAL_MINUTES = EnvVarSpec(
        name="GOFRITAI_MONITOR_INTERVAL_MINUTES",
        default=5,
        type_hint=int,
        description="Minutes between quota checks of the monitor daemon",
        validator=lambda x: x > 0,
    )

    ALERT_THRESHOLD_PERCENT = EnvVarSpec(
        name="GOFRITAI_ALERT_THRESHOLD_PERCENT",
        default=80,
        type_hint=int,
        description="Usage percentage above which the monitor raises an alert",
        validator=lambda x: 1 <= x <= 100,
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications.

        Returns:
            Dictionary mapping spec names to EnvVarSpec objects
        """
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }
