"""Configuration package.

- schema: Declarative environment variable specifications
- validation: Loading, coercion and validation of those variables
- config: The Config object the CLI builds at start-up
"""

from gofritai.core.config.config import Config
from gofritai.core.config.schema import ConfigSchema, EnvVarSpec
from gofritai.core.config.validation import ConfigError, load_env_var, validate_all

__all__ = [
    "Config",
    "ConfigSchema",
    "EnvVarSpec",
    "ConfigError",
    "load_env_var",
    "validate_all",
]
