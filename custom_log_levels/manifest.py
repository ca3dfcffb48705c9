"""Plugin manifest loading — plugin.json validated against a JSON schema."""

import json
import logging
from dataclasses import dataclass, field

import jsonschema

logger = logging.getLogger(__name__)

PLUGIN_ID = "customLogLevels"


class ManifestError(Exception):
    """Raised when plugin.json cannot be read or fails schema validation."""


@dataclass(frozen=True)
class Endpoint:
    path: str
    method: str
    handler: str


@dataclass(frozen=True)
class PluginManifest:
    plugin_id: str
    name: str
    version: str
    description: str
    min_host_version: str
    endpoints: tuple[Endpoint, ...] = field(default_factory=tuple)
    ui_components: dict[str, str] = field(default_factory=dict)

    def integration_properties(self) -> dict:
        """Registration properties handed to the host platform."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
        }


def load_manifest(manifest_path: str, schema_path: str) -> PluginManifest:
    """Read *manifest_path*, validate it, and return a PluginManifest.

    Raises:
        ManifestError: If either file is unreadable or the manifest violates
            the schema. All violations are listed in the message.
    """
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestError(f"Cannot load plugin manifest: {e}") from e

    validator = jsonschema.Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda err: list(err.path))
    if errors:
        messages = "; ".join(err.message for err in errors)
        raise ManifestError(f"Invalid plugin manifest {manifest_path}: {messages}")

    extensions = data.get("extensions", {})
    endpoints = tuple(
        Endpoint(path=e["path"], method=e["method"], handler=e["handler"])
        for e in extensions.get("api", {}).get("endpoints", [])
    )
    manifest = PluginManifest(
        plugin_id=data["id"],
        name=data["name"],
        version=data["version"],
        description=data["description"],
        min_host_version=data["reportPortalVersion"],
        endpoints=endpoints,
        ui_components=dict(extensions.get("ui", {}).get("components", {})),
    )
    logger.info("Loaded plugin manifest %s v%s from %s", manifest.plugin_id, manifest.version, manifest_path)
    return manifest
