"""Configuration loading and management for top-owners.

Configuration sources are merged in priority order:
    1. Defaults (defined in OwnersConfig)
    2. Global config (~/.top-owners.toml)
    3. Project config (./top-owners.toml)
    4. Explicit config file
    5. Environment variables (TOP_OWNERS_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(tau=180, count=5)
    >>> config.tau
    180
    >>> config.bonus_per_repo
    0.1
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

GLOBAL_CONFIG_NAME = ".top-owners.toml"
PROJECT_CONFIG_NAME = "top-owners.toml"
ENV_PREFIX = "TOP_OWNERS_"


@dataclass(frozen=True)
class OwnersConfig:
    """Parameters of one ownership run.

    Attributes:
        Scoring:
            tau: Decay constant in days. A commit ``tau`` days old weighs 1/e.
            bonus_per_repo: Multiplier increment per repository beyond the first.
            count: Number of ranked owners to return (0 returns nothing).

        Identity:
            aliases_file: Optional TOML file mapping canonical emails to aliases.

        Execution:
            workers: Parallel repository readers (None = min(8, repositories)).
            git_timeout_seconds: Upper bound for each git subprocess.

        Output control:
            verbosity: Logging verbosity level
    """

    # Scoring
    tau: float = 365.0
    bonus_per_repo: float = 0.1
    count: int = 10

    # Identity
    aliases_file: Optional[str] = None

    # Execution
    workers: Optional[int] = None
    git_timeout_seconds: int = 120

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_tau(self.tau)
        validate_bonus_per_repo(self.bonus_per_repo)
        validate_count(self.count)

        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be at least 1"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


def validate_tau(tau: float) -> None:
    if not math.isfinite(tau) or tau <= 0:
        raise InvalidConfigError(
            "tau", tau, "decay constant must be a positive finite number of days"
        )


def validate_bonus_per_repo(bonus_per_repo: float) -> None:
    if not math.isfinite(bonus_per_repo):
        raise InvalidConfigError("bonus_per_repo", bonus_per_repo, "must be a finite number")
    if bonus_per_repo < 0:
        raise InvalidConfigError("bonus_per_repo", bonus_per_repo, "cannot be negative")


def validate_count(count: int) -> None:
    if isinstance(count, float) and not math.isfinite(count):
        raise InvalidConfigError("count", count, "must be a finite number")
    if count < 0:
        raise InvalidConfigError("count", count, "cannot be negative")


def load_config(config_file: Optional[Path] = None, **overrides) -> OwnersConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated OwnersConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        try:
            merged.update(load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    if "aliases_file" in merged and merged["aliases_file"] is not None:
        merged["aliases_file"] = str(merged["aliases_file"])

    try:
        return OwnersConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from TOP_OWNERS_* environment variables.

    Supported environment variables:
        TOP_OWNERS_TAU: float
        TOP_OWNERS_BONUS_PER_REPO: float
        TOP_OWNERS_COUNT: int
        TOP_OWNERS_ALIASES_FILE: path
        TOP_OWNERS_WORKERS: int
        TOP_OWNERS_GIT_TIMEOUT_SECONDS: int
        TOP_OWNERS_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any TOP_OWNERS_* vars found.
    """
    type_hints = get_type_hints(OwnersConfig)

    result: dict[str, Any] = {}

    for field_name in OwnersConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

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

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
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
