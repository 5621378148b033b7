"""Configuration management for TimeKeeper.

Loads configuration from environment variables and .env file.
Provides validation and sensible defaults.

The host builds one Config at startup and passes it to whatever needs
it. The models layer never reads configuration; the engine reads it
only through build_chart_for().

Usage:
    from src.core.config import load_config, validate_config

    config = load_config()
    issues = validate_config(config)
    if issues:
        for issue in issues:
            print(f"Config issue: {issue}")
"""

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

from src.core.exceptions import ConfigurationError

# Default paths (defined once, used by both Config and load_config)
DEFAULT_LOG_PATH = Path.home() / ".timekeeper" / "logs"
DEFAULT_BROWSE_DIR = Path.home() / "Desktop"
DEFAULT_CHART_DAYS = 33


@dataclass
class Config:
    """Application configuration.

    Attributes:
        log_path: Directory for log files
        default_browse_dir: Folder the host opens its file pickers in
            (pass it to the picker; nothing here reads it)
        reference_date: Day the biorhythm chart is computed for (None = today),
            used by build_chart_for()
        chart_days: Number of days plotted, used by build_chart_for()
        debug: Enable debug mode
    """

    log_path: Path = field(default_factory=lambda: DEFAULT_LOG_PATH)
    default_browse_dir: Path = field(default_factory=lambda: DEFAULT_BROWSE_DIR)
    reference_date: Optional[date] = None
    chart_days: int = DEFAULT_CHART_DAYS
    debug: bool = False


def load_env_file(path: Path) -> dict[str, str]:
    """Parse .env file.

    Handles:
        - KEY=VALUE format
        - Comments (lines starting with #)
        - Blank lines
        - Quoted values

    Args:
        path: Path to .env file

    Returns:
        Dictionary of environment variables
    """
    env_vars: dict[str, str] = {}

    if not path.exists():
        return env_vars

    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()

                if value and value[0] in ('"', "'") and value[-1] == value[0]:
                    value = value[1:-1]

                if key:
                    env_vars[key] = value

    return env_vars


def _lookup(key: str, env_vars: dict[str, str]) -> Optional[str]:
    return os.environ.get(key) or env_vars.get(key) or None


def _get_path(key: str, default: Path, env_vars: dict[str, str]) -> Path:
    """Get path from environment, expanding ~ and resolving."""
    value = _lookup(key, env_vars)
    if value:
        return Path(value).expanduser().resolve()
    return default


def _get_bool(key: str, default: bool, env_vars: dict[str, str]) -> bool:
    """Get boolean from environment."""
    value = _lookup(key, env_vars)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _get_int(key: str, default: int, env_vars: dict[str, str]) -> int:
    """Get integer from environment."""
    value = _lookup(key, env_vars)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from e


def _get_date(key: str, env_vars: dict[str, str]) -> Optional[date]:
    """Get ISO date (YYYY-MM-DD) from environment."""
    value = _lookup(key, env_vars)
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a YYYY-MM-DD date, got {value!r}") from e


def load_config(env_file: Optional[Path] = None) -> Config:
    """Load configuration from environment and .env file.

    Priority:
        1. Environment variables (highest)
        2. .env file
        3. Default values (lowest)

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If a date or integer variable is malformed
    """
    if env_file is None:
        env_file = Path.cwd() / ".env"

    env_vars = load_env_file(Path(env_file))

    return Config(
        log_path=_get_path("TIMEKEEPER_LOG_PATH", DEFAULT_LOG_PATH, env_vars),
        default_browse_dir=_get_path("TIMEKEEPER_BROWSE_DIR", DEFAULT_BROWSE_DIR, env_vars),
        reference_date=_get_date("TIMEKEEPER_REFERENCE_DATE", env_vars),
        chart_days=_get_int("TIMEKEEPER_CHART_DAYS", DEFAULT_CHART_DAYS, env_vars),
        debug=_get_bool("TIMEKEEPER_DEBUG", False, env_vars),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration.

    Checks:
        - Log directory exists or can be created, and is writable
        - Chart shows at least one day

    Args:
        config: Configuration to validate

    Returns:
        List of issues (empty if valid)
    """
    issues: list[str] = []

    try:
        config.log_path.mkdir(parents=True, exist_ok=True)
        if not os.access(config.log_path, os.W_OK):
            issues.append(f"Log directory not writable: {config.log_path}")
    except OSError as e:
        issues.append(f"Cannot create log directory {config.log_path}: {e}")

    if config.chart_days < 1:
        issues.append(f"Chart must show at least one day, got {config.chart_days}")

    return issues
