"""Custom Log Levels — extended severity levels and minimum-level log filtering."""

from custom_log_levels.registry import InvalidLevelError, LevelRegistry, default_registry

__all__ = ["InvalidLevelError", "LevelRegistry", "default_registry"]
