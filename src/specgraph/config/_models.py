"""Configuration models.

Pydantic models for the ``[analysis]``, ``[references]`` and ``[logging]``
sections of a specgraph configuration file.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from specgraph.config._defaults import DEFAULT_CONFIG
from specgraph.config._loader import deep_merge, parse_env_overrides, read_toml_file
from specgraph.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Self


class LogLevel(StrEnum):
    """Log level threshold values."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class AnalysisConfig(BaseModel):
    """Thresholds used by the structural analyzers.

    Attributes:
        high_coupling_threshold: Coupling above which a node is flagged.
        high_fan_out_threshold: Fan-out above which a node is flagged.
        max_depth_warning: Dependency depth above which health is penalized.
        complexity_node_threshold: Node count above which health is penalized.
        most_connected_limit: Number of nodes listed as most connected.
        coverage_warning_percentage: Overall coverage below which to warn.
        requirement_coverage_warning: Requirement coverage below which to warn.
        component_coverage_warning: Component coverage below which to warn.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    high_coupling_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    high_fan_out_threshold: int = Field(default=10, ge=0)
    max_depth_warning: int = Field(default=10, ge=0)
    complexity_node_threshold: int = Field(default=100, ge=0)
    most_connected_limit: int = Field(default=10, ge=0)
    coverage_warning_percentage: float = Field(default=70.0, ge=0.0, le=100.0)
    requirement_coverage_warning: float = Field(default=80.0, ge=0.0, le=100.0)
    component_coverage_warning: float = Field(default=90.0, ge=0.0, le=100.0)


class ReferencesConfig(BaseModel):
    """Settings for reference validation and repair suggestions.

    Attributes:
        similarity_threshold: Minimum similarity for a suggestion to be kept.
        max_suggestions: Maximum suggestions returned per broken reference.
        allow_self_references: Whether an entity may reference itself.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    similarity_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Suggestions must score strictly above this value",
    )
    max_suggestions: int = Field(default=3, ge=0)
    allow_self_references: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class SpecGraphConfig(BaseModel):
    """Top-level configuration container."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    references: ReferencesConfig = Field(default_factory=ReferencesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, include_env: bool = False) -> Self:
        """Build a configuration from a (possibly partial) dictionary.

        Args:
            data: User values, merged over the defaults.
            include_env: Whether ``SPECGRAPH_*`` environment overrides apply.

        Returns:
            The validated configuration.

        Raises:
            ConfigError: If a value fails validation.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        if include_env:
            merged = deep_merge(merged, parse_env_overrides())

        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            msg = f"Invalid configuration: {e}"
            raise ConfigError(msg) from e

    @classmethod
    def load(cls, path: Path | None = None, *, include_env: bool = True) -> Self:
        """Load configuration from a TOML file, falling back to defaults.

        Args:
            path: Optional config file. When None only defaults and the
                environment are used.
            include_env: Whether ``SPECGRAPH_*`` environment overrides apply.

        Raises:
            ConfigLoadError: If the file is missing or is not valid TOML.
            ConfigError: If a value fails validation.
        """
        data = read_toml_file(path) if path is not None else {}
        return cls.from_dict(data, include_env=include_env)
