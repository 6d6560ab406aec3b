"""
Configuration management for Muxpick.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/muxpick/config.yaml)
- Environment variables

Modified: 2026-10-16
"""

from muxpick.config.settings import (
    Settings,
    TuiSettings,
    FileSettings,
    WorktreeSettings,
    GitDiffSettings,
    LoggingSettings,
    setup_logging,
    get_config_dir,
    get_cache_dir,
)

__all__ = [
    "Settings",
    "TuiSettings",
    "FileSettings",
    "WorktreeSettings",
    "GitDiffSettings",
    "LoggingSettings",
    "setup_logging",
    "get_config_dir",
    "get_cache_dir",
]
