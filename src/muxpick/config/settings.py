"""
Configuration management for Muxpick.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-16
"""

import logging
import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from muxpick.core.exceptions import ConfigurationError


@dataclass
class TuiSettings:
    """Terminal UI settings."""

    tick_rate_ms: int = 100  # redraw interval
    page_size: int = 10  # rows moved by PageUp/PageDown


@dataclass
class FileSettings:
    """File picker settings."""

    show_hidden: bool = False


@dataclass
class WorktreeSettings:
    """Worktree settings."""

    base_dir: Optional[str] = None  # None = sibling of the repository root


@dataclass
class GitDiffSettings:
    """Git diff popup settings."""

    command: str = "git diff HEAD | delta"
    width: str = "90%"
    height: str = "90%"


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: str = "~/.cache/muxpick/muxpick.log"


@dataclass
class Settings:
    """Main settings container."""

    tui: TuiSettings = field(default_factory=TuiSettings)
    files: FileSettings = field(default_factory=FileSettings)
    worktrees: WorktreeSettings = field(default_factory=WorktreeSettings)
    git_diff: GitDiffSettings = field(default_factory=GitDiffSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/muxpick/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the config file is not valid YAML, a
                section is not a mapping or a value has the wrong type
        """
        settings = cls()

        # Load from config file
        if config_path is None:
            config_path = Path.home() / ".config" / "muxpick" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Config file {config_path} must contain a mapping")

            # TUI settings
            if "tui" in config_data:
                tui = _section(config_data, "tui")
                settings.tui = TuiSettings(
                    tick_rate_ms=_positive_int(tui, "tui.tick_rate_ms", 100),
                    page_size=_positive_int(tui, "tui.page_size", 10),
                )

            # File picker settings
            if "files" in config_data:
                files = _section(config_data, "files")
                settings.files = FileSettings(
                    show_hidden=bool(files.get("show_hidden", False)),
                )

            # Worktree settings
            if "worktrees" in config_data:
                worktrees = _section(config_data, "worktrees")
                settings.worktrees = WorktreeSettings(
                    base_dir=_optional_str(worktrees, "worktrees.base_dir"),
                )

            # Git diff popup settings
            if "git_diff" in config_data:
                diff = _section(config_data, "git_diff")
                settings.git_diff = GitDiffSettings(
                    command=_optional_str(diff, "git_diff.command") or "git diff HEAD | delta",
                    width=str(diff.get("width", "90%")),
                    height=str(diff.get("height", "90%")),
                )

            # Logging settings
            if "logging" in config_data:
                log = _section(config_data, "logging")
                settings.logging = LoggingSettings(
                    level=_log_level(log.get("level", "WARNING")),
                    file=_optional_str(log, "logging.file") or "~/.cache/muxpick/muxpick.log",
                )

        # Override with environment variables
        log_level_env = os.getenv("MUXPICK_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = _log_level(log_level_env)

        log_file_env = os.getenv("MUXPICK_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        diff_command_env = os.getenv("MUXPICK_DIFF_COMMAND")
        if diff_command_env:
            settings.git_diff.command = diff_command_env

        worktree_dir_env = os.getenv("MUXPICK_WORKTREE_DIR")
        if worktree_dir_env:
            settings.worktrees.base_dir = worktree_dir_env

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "tui": {
                "tick_rate_ms": self.tui.tick_rate_ms,
                "page_size": self.tui.page_size,
            },
            "files": {"show_hidden": self.files.show_hidden},
            "worktrees": {"base_dir": self.worktrees.base_dir},
            "git_diff": {
                "command": self.git_diff.command,
                "width": self.git_diff.width,
                "height": self.git_diff.height,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data[name] or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping")
    return section


def _positive_int(section: Dict[str, Any], key: str, default: int) -> int:
    value = section.get(key.split(".")[-1], default)
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from e
    if number < 1:
        raise ConfigurationError(f"{key} must be at least 1, got {number}")
    return number


def _optional_str(section: Dict[str, Any], key: str) -> Optional[str]:
    value = section.get(key.split(".")[-1])
    if value is not None and not isinstance(value, str):
        raise ConfigurationError(f"{key} must be a string, got {value!r}")
    return value


def _log_level(level: Any) -> str:
    """Upper-cased level name; raises ConfigurationError for unknown levels."""
    name = str(level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigurationError(f"Unknown log level '{level}'")
    return name


def setup_logging(settings: Settings) -> Path:
    """
    Send log records to the configured log file.

    The TUI owns the terminal, so nothing is logged to stderr.

    Args:
        settings: Loaded settings

    Returns:
        Path of the log file

    Raises:
        ConfigurationError: If the log level is unknown
    """
    level = _log_level(settings.logging.level)
    log_path = Path(settings.logging.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )

    root = logging.getLogger("muxpick")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False
    return log_path


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "muxpick"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_cache_dir() -> Path:
    """Get cache directory, creating if needed."""
    cache_dir = Path.home() / ".cache" / "muxpick"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir
