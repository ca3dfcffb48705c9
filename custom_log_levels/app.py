import json
import logging

import jsonschema
from flask import Flask, jsonify, request

from custom_log_levels.config import load_config, resolve_path
from custom_log_levels.manifest import load_manifest
from custom_log_levels.registry import InvalidLevelError, default_registry

logger = logging.getLogger(__name__)


def create_app(config=None, registry=None):
    """Flask application factory."""
    app = Flask(__name__)

    if config is None:
        config = load_config()
    if registry is None:
        registry = default_registry

    plugin_cfg = config["plugin"]
    manifest = load_manifest(
        resolve_path(plugin_cfg["manifest_path"]),
        resolve_path(plugin_cfg["schema_path"]),
    )
    with open(resolve_path(plugin_cfg["filter_schema_path"]), "r") as f:
        filter_validator = jsonschema.Draft202012Validator(json.load(f))

    # Store components on app for access in tests
    app.config["components"] = {
        "config": config,
        "manifest": manifest,
        "registry": registry,
    }

    prefix = f"/plugin/{manifest.plugin_id}"

    @app.errorhandler(InvalidLevelError)
    def invalid_level(err):
        logger.warning("Rejected level request: %s", err)
        return jsonify({
            "status": "invalid",
            "error": str(err),
            "supported": err.supported,
        }), 400

    # --- Routes ---

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy", "plugin_id": manifest.plugin_id})

    @app.route(f"{prefix}/info")
    def info():
        return jsonify({
            "id": manifest.plugin_id,
            "min_host_version": manifest.min_host_version,
            "ui_components": sorted(manifest.ui_components),
            **manifest.integration_properties(),
        })

    @app.route(f"{prefix}/levels")
    def supported_levels():
        # Most restrictive first
        return jsonify(list(reversed(registry.ordered_levels())))

    @app.route(f"{prefix}/levels/details")
    def level_details():
        return jsonify(registry.describe_levels())

    @app.route(f"{prefix}/levels/<name>")
    def level_value(name):
        registry.validate_level(name)
        return jsonify({"level": name.upper(), "value": registry.get_level_value(name)})

    @app.route(f"{prefix}/logs/filter", methods=["POST"])
    def filter_logs():
        body = request.get_json(silent=True)
        if body is None:
            return jsonify({"status": "invalid", "errors": ["Request body must be JSON"]}), 400

        errors = [e.message for e in filter_validator.iter_errors(body)]
        if errors:
            return jsonify({"status": "invalid", "errors": errors}), 400

        logs = body["logs"]
        min_level = body.get("min_level")
        kept = registry.filter_by_minimum_level(logs, min_level)
        logger.debug("Filtered %d log(s) at %s, kept %d", len(logs), min_level, len(kept))

        return jsonify({
            "min_level": min_level,
            "total": len(logs),
            "returned": len(kept),
            "logs": kept,
        })

    return app


# For gunicorn: `gunicorn "custom_log_levels.app:create_app()"`
