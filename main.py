"""Entry point for the Custom Log Levels plugin server."""

import logging
import sys

from custom_log_levels.app import create_app
from custom_log_levels.config import load_config


def main():
    config = load_config()

    logging.basicConfig(
        level=config["logging"]["level"],
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    app = create_app(config)
    server = config["server"]
    logger.info("Serving plugin API on %s:%d", server["host"], server["port"])
    app.run(host=server["host"], port=server["port"], debug=server["debug"], use_reloader=False)


if __name__ == "__main__":
    main()
