"""LevelRegistry: lookup, validation, and minimum-level filtering over the severity table."""

import logging
from collections.abc import Mapping, Sequence

from custom_log_levels.levels import (
    DEFAULT_LEVEL,
    SEVERITY_TABLE,
    level_color,
    level_label,
)
from custom_log_levels.models import record_level

logger = logging.getLogger(__name__)


class InvalidLevelError(ValueError):
    """Raised when a level name is empty or not in the severity table."""

    def __init__(self, level, supported: Sequence[str]):
        self.level = level
        self.supported = list(supported)
        super().__init__(
            f"Unsupported log level: {level}. "
            f"Supported levels: {', '.join(self.supported)}"
        )


class LevelRegistry:
    """Read-only view over a severity table.

    All lookups upper-case the name first, so "verbose", "Verbose" and
    "VERBOSE" resolve to the same value.
    """

    def __init__(self, table: Mapping[str, int] = SEVERITY_TABLE):
        self._table = table

    def get_supported_levels(self) -> frozenset[str]:
        return frozenset(self._table)

    def get_level_value(self, name: str | None) -> int | None:
        """Numeric severity for *name*, or None if it is not a known level."""
        if not name:
            return None
        return self._table.get(name.upper())

    def validate_level(self, name: str | None) -> None:
        """Raise InvalidLevelError unless *name* is a known level."""
        if self.get_level_value(name) is None:
            raise InvalidLevelError(name, list(self._table))

    def filter_by_minimum_level(self, records: Sequence, min_level: str | None):
        """Keep records whose level is at or above *min_level*.

        An empty or unknown *min_level* disables filtering: the input is
        returned as-is. Records without a level count as INFO. Records whose
        level is not in the table are dropped.
        """
        threshold = self.get_level_value(min_level)
        if threshold is None:
            logger.debug("No usable minimum level (%r), returning records unfiltered", min_level)
            return records

        kept = []
        dropped_unknown = 0
        for record in records:
            value = self.get_level_value(record_level(record) or DEFAULT_LEVEL)
            if value is None:
                dropped_unknown += 1
                continue
            if value >= threshold:
                kept.append(record)

        if dropped_unknown:
            logger.debug("Dropped %d record(s) with unrecognized levels", dropped_unknown)
        return kept

    def ordered_levels(self) -> list[str]:
        """Level names in ascending severity."""
        return sorted(self._table, key=self._table.__getitem__)

    def describe_levels(self) -> list[dict]:
        """Name, value, label and color for each level, ascending severity."""
        return [
            {
                "name": name,
                "value": self._table[name],
                "label": level_label(name),
                "color": level_color(name),
            }
            for name in self.ordered_levels()
        ]


default_registry = LevelRegistry()
