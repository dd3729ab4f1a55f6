"""specgraph configuration.

Typed, immutable access to analysis thresholds, reference validation
settings and logging options.

Example:
    >>> from specgraph.config import SpecGraphConfig
    >>> config = SpecGraphConfig.load(include_env=False)
    >>> config.references.max_suggestions
    3
"""

from specgraph.exceptions import ConfigError, ConfigLoadError

from ._defaults import DEFAULT_CONFIG
from ._loader import copy_value, deep_merge, parse_env_overrides, read_toml_file
from ._models import (
    AnalysisConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    ReferencesConfig,
    SpecGraphConfig,
)

__all__ = [
    "DEFAULT_CONFIG",
    "AnalysisConfig",
    "ConfigError",
    "ConfigLoadError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ReferencesConfig",
    "SpecGraphConfig",
    "copy_value",
    "deep_merge",
    "parse_env_overrides",
    "read_toml_file",
]
