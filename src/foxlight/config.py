"""Configuration loading and management for Foxlight.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in FoxlightConfig)
    2. Global config (~/.foxlight.toml)
    3. Project config (./foxlight.toml)
    4. Explicit config file
    5. Environment variables (FOXLIGHT_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(max_snapshots=10)
    >>> config.max_snapshots
    10
    >>> config.thresholds.significant_gzip_bytes
    1024
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

FRAMEWORK_HINTS = ("react", "vue", "svelte", "angular", "web-component", "unknown")

DEFAULT_INCLUDE = [
    "src/**/*.{tsx,jsx,vue,svelte}",
    "components/**/*.{tsx,jsx,vue,svelte}",
    "app/**/*.{tsx,jsx,vue,svelte}",
    "pages/**/*.{tsx,jsx,vue,svelte}",
]

DEFAULT_EXCLUDE = [
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.next/**",
    "**/.nuxt/**",
    "**/*.test.*",
    "**/*.spec.*",
    "**/*.stories.*",
]


@dataclass(frozen=True)
class ThresholdConfig:
    """Policy thresholds for CI gating and report rendering.

    Attributes:
        CI significance (a diff is worth a PR comment when exceeded):
            significant_gzip_bytes: |gzip delta| in bytes for any component
            significant_health_points: |health delta| in points for any component

        Comment rendering (rows below these are left out of the tables):
            comment_gzip_bytes: |gzip delta| to list a bundle row
            comment_health_points: |health delta| to list a health row
    """

    significant_gzip_bytes: int = 1024
    significant_health_points: float = 10.0

    comment_gzip_bytes: int = 100
    comment_health_points: float = 5.0

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        for field_name in (
            "significant_gzip_bytes",
            "significant_health_points",
            "comment_gzip_bytes",
            "comment_health_points",
        ):
            value = getattr(self, field_name)
            if value < 0:
                raise InvalidConfigError(field_name, value, "must be non-negative")


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class FoxlightConfig:
    """Configuration for a Foxlight project.

    Attributes:
        Source discovery (consumed by the analysis layer):
            include: Glob patterns for component source files
            exclude: Glob patterns to skip
            framework: Framework hint; None means auto-detect

        Snapshot history:
            snapshot_dir: Directory (relative to the project root) for stored snapshots
            max_snapshots: How many snapshots the store keeps before rotating

        Output control:
            verbosity: Logging verbosity level

        Policy:
            thresholds: CI significance and report thresholds
    """

    include: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    framework: Optional[str] = None

    snapshot_dir: str = ".foxlight/snapshots"
    max_snapshots: int = 30

    verbosity: Verbosity = "normal"

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.framework is not None and self.framework not in FRAMEWORK_HINTS:
            raise InvalidConfigError(
                "framework", self.framework, f"expected one of {', '.join(FRAMEWORK_HINTS)}"
            )
        if self.max_snapshots < 1:
            raise InvalidConfigError("max_snapshots", self.max_snapshots, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        if not self.snapshot_dir:
            raise InvalidConfigError("snapshot_dir", self.snapshot_dir, "must not be empty")


def load_config(config_file: Optional[Path] = None, **overrides) -> FoxlightConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated FoxlightConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".foxlight.toml"
    if global_config.exists():
        merged.update(_load_toml_checked(global_config, "global config"))

    project_config = Path.cwd() / "foxlight.toml"
    if project_config.exists():
        merged.update(_load_toml_checked(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_checked(config_file, "config file"))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    thresholds = merged.pop("thresholds", None)
    if isinstance(thresholds, dict):
        try:
            merged["thresholds"] = ThresholdConfig(**thresholds)
        except TypeError as e:
            raise ConfigurationError(f"Invalid [thresholds] config: {e}")
    elif isinstance(thresholds, ThresholdConfig):
        merged["thresholds"] = thresholds

    try:
        return FoxlightConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_toml_checked(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from FOXLIGHT_* environment variables.

    Supported environment variables:
        FOXLIGHT_FRAMEWORK: str
        FOXLIGHT_SNAPSHOT_DIR: str
        FOXLIGHT_MAX_SNAPSHOTS: int
        FOXLIGHT_VERBOSITY: quiet/normal/verbose

    List fields (include/exclude) are only configurable from TOML.
    """
    type_hints = get_type_hints(FoxlightConfig)

    result: dict[str, Any] = {}

    for field_name in FoxlightConfig.__dataclass_fields__:
        env_key = f"FOXLIGHT_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot come from a single string.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
