"""Configuration loaded from YAML and merged over built-in defaults."""

import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Configuration manager that loads from YAML and merges with defaults."""

    DEFAULTS = {
        "server": {
            "host": "0.0.0.0",
            "port": 5000,
            "debug": False,
        },
        "plugin": {
            "manifest_path": "plugin.json",
            "schema_path": "schemas/plugin_schema.json",
            "filter_schema_path": "schemas/filter_request_schema.json",
        },
        "logging": {
            "level": "INFO",
        },
    }

    def __init__(self, config_path=None):
        self._config = copy.deepcopy(self.DEFAULTS)

        if config_path is not None:
            try:
                with open(config_path, "r") as f:
                    user_config = yaml.safe_load(f)

                if user_config and isinstance(user_config, dict):
                    self._config = self._deep_merge(self._config, user_config)
                    logger.info("Loaded config overrides from %s", config_path)
            except FileNotFoundError:
                logger.info("Config file %s not found, using defaults", config_path)
            except yaml.YAMLError:
                logger.warning("Invalid YAML in %s, using defaults", config_path)

    @staticmethod
    def _deep_merge(base, override):
        """Recursively merge override dict into base dict."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = Config._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    def __getitem__(self, key):
        return self._config[key]


def resolve_path(path: str) -> str:
    """Resolve a data file path against the installed package directory."""
    if os.path.isabs(path):
        return path
    return os.path.join(PACKAGE_DIR, path)


def load_config() -> Config:
    """Build Config from the file named by CONFIG_PATH (default: config.yaml)."""
    return Config(os.environ.get("CONFIG_PATH", "config.yaml"))
