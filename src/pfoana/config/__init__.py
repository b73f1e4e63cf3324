"""Configuration loading for pfoana.

Configurations are YAML files made of blocks (`base`, `geo`, `io`, `post`,
`ana`) which may pull in other files through an `include` directive.
"""

from .errors import (
    ConfigCycleError,
    ConfigError,
    ConfigIncludeError,
    ConfigValidationError,
)
from .load import load_config, load_config_file

__all__ = [
    "load_config",
    "load_config_file",
    "ConfigError",
    "ConfigIncludeError",
    "ConfigCycleError",
    "ConfigValidationError",
]
