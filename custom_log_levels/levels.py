"""Extended log level table — name to numeric severity, plus slider display data."""

from types import MappingProxyType

# Higher value = more restrictive threshold. OFF filters everything, ALL nothing.
SEVERITY_TABLE = MappingProxyType({
    "OFF": 60000,
    "FATAL": 50000,
    "ERROR": 40000,
    "WARN": 30000,
    "INFO": 20000,
    "DEBUG": 10000,
    "TRACE": 5000,
    # Custom levels
    "VERBOSE": 3000,
    "FINEST": 1000,
    "ALL": 0,
})

DEFAULT_LEVEL = "INFO"

LEVEL_COLORS = MappingProxyType({
    "OFF": "#8c8c8c",
    "FATAL": "#d32f2f",
    "ERROR": "#f44336",
    "WARN": "#ff9800",
    "INFO": "#2196f3",
    "DEBUG": "#4caf50",
    "TRACE": "#9c27b0",
    "VERBOSE": "#673ab7",
    "FINEST": "#3f51b5",
    "ALL": "#607d8b",
})

DEFAULT_COLOR = LEVEL_COLORS[DEFAULT_LEVEL]


def level_label(name: str) -> str:
    """Display label for a level, e.g. VERBOSE -> 'Verbose'."""
    return name.capitalize()


def level_color(name: str | None) -> str:
    if not name:
        return DEFAULT_COLOR
    return LEVEL_COLORS.get(name.upper(), DEFAULT_COLOR)
