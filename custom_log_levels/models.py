"""Log record model consumed by the level filter."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class LogRecord:
    message: str
    level: str | None = None   # None is treated as INFO
    timestamp: datetime | None = None
    service: str | None = None


def record_level(record) -> str | None:
    """Return the level name carried by a record.

    Accepts LogRecord instances, any object with a ``level`` attribute, and
    plain dicts as received over HTTP. Enum-valued levels resolve to the
    member name.
    """
    if isinstance(record, dict):
        level = record.get("level")
    else:
        level = getattr(record, "level", None)
    if isinstance(level, Enum):
        return level.name
    return level
