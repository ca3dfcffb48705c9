"""Tests for custom_log_levels/manifest.py"""

import json
import os
import tempfile

import pytest

from custom_log_levels.config import resolve_path
from custom_log_levels.manifest import PLUGIN_ID, ManifestError, load_manifest

SCHEMA_PATH = resolve_path("schemas/plugin_schema.json")


def _write_manifest(data) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        json.dump(data, f)
        return f.name


@pytest.fixture
def manifest_data():
    with open(resolve_path("plugin.json"), "r") as f:
        return json.load(f)


class TestLoadManifest:
    def test_bundled_manifest(self):
        manifest = load_manifest(resolve_path("plugin.json"), SCHEMA_PATH)
        assert manifest.plugin_id == PLUGIN_ID == "customLogLevels"
        assert manifest.name == "Custom Log Levels"
        assert manifest.version == "1.0.0"
        assert manifest.min_host_version == ">=5.0.0"
        assert "logLevelSlider" in manifest.ui_components

    def test_endpoints(self):
        manifest = load_manifest(resolve_path("plugin.json"), SCHEMA_PATH)
        assert len(manifest.endpoints) == 1
        endpoint = manifest.endpoints[0]
        assert endpoint.path == "/plugin/customLogLevels/levels"
        assert endpoint.method == "GET"
        assert endpoint.handler == "getSupportedLogLevels"

    def test_integration_properties(self):
        manifest = load_manifest(resolve_path("plugin.json"), SCHEMA_PATH)
        assert manifest.integration_properties() == {
            "name": "Custom Log Levels",
            "version": "1.0.0",
            "description": "Extended log level support with additional custom levels",
        }

    def test_missing_required_field(self, manifest_data):
        del manifest_data["version"]
        path = _write_manifest(manifest_data)
        try:
            with pytest.raises(ManifestError, match="version"):
                load_manifest(path, SCHEMA_PATH)
        finally:
            os.unlink(path)

    def test_bad_version_format(self, manifest_data):
        manifest_data["version"] = "one"
        path = _write_manifest(manifest_data)
        try:
            with pytest.raises(ManifestError):
                load_manifest(path, SCHEMA_PATH)
        finally:
            os.unlink(path)

    def test_bad_endpoint_method(self, manifest_data):
        manifest_data["extensions"]["api"]["endpoints"][0]["method"] = "FETCH"
        path = _write_manifest(manifest_data)
        try:
            with pytest.raises(ManifestError):
                load_manifest(path, SCHEMA_PATH)
        finally:
            os.unlink(path)

    def test_minimal_manifest_without_extensions(self, manifest_data):
        del manifest_data["extensions"]
        path = _write_manifest(manifest_data)
        try:
            manifest = load_manifest(path, SCHEMA_PATH)
            assert manifest.endpoints == ()
            assert manifest.ui_components == {}
        finally:
            os.unlink(path)

    def test_missing_file(self):
        with pytest.raises(ManifestError):
            load_manifest("/nonexistent/plugin.json", SCHEMA_PATH)

    def test_malformed_json(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            f.write("{not json")
            path = f.name
        try:
            with pytest.raises(ManifestError):
                load_manifest(path, SCHEMA_PATH)
        finally:
            os.unlink(path)
