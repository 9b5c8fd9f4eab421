"""Runtime configuration for GoFritAI.

Values are read from the environment (and a local .env file) once, at
construction time, using the declarations in ConfigSchema.
"""

from gofritai.core.config.schema import ConfigSchema
from gofritai.core.config.validation import load_env_var


class Config:
    """Settings loaded from the environment with direct property access.

    Raises:
        ConfigError: From the constructor, if any variable is invalid.
    """

    def __init__(self) -> None:
        self._log_level: str = load_env_var(ConfigSchema.LOG_LEVEL)
        self._monitor_interval_minutes: int = load_env_var(ConfigSchema.MONITOR_INTERVAL_MINUTES)
        self._alert_threshold_percent: int = load_env_var(ConfigSchema.ALERT_THRESHOLD_PERCENT)

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def monitor_interval_minutes(self) -> int:
        return self._monitor_interval_minutes

    @property
    def alert_threshold_percent(self) -> int:
        return self._alert_threshold_percent

    def as_dict(self) -> dict[str, object]:
        """Return effective values keyed by environment variable name."""
        return {
            ConfigSchema.LOG_LEVEL.name: self.log_level,
            ConfigSchema.MONITOR_INTERVAL_MINUTES.name: self.monitor_interval_minutes,
            ConfigSchema.ALERT_THRESHOLD_PERCENT.name: self.alert_threshold_percent,
        }
