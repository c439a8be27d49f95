"""Log API server entry point."""

import logging
import sys

from log_api.app import create_app
from log_api.config import load_config

ENDPOINTS = [
    ("POST  ", "/logs", "Receive log entries"),
    ("GET   ", "/logs", "List stored logs (with filtering & pagination)"),
    ("GET   ", "/stats", "Get statistics and analytics"),
    ("GET   ", "/search", "Search logs by message content"),
    ("GET   ", "/health", "Health check for monitoring"),
    ("GET   ", "/sample-log", "Generate a sample log document"),
    ("DELETE", "/logs", "Clear all stored logs (testing)"),
]


def main():
    config = load_config()
    logging.basicConfig(
        level=getattr(logging, str(config["logging"]["level"]).upper(), logging.INFO),
        format="%(asctime)s [log-api] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    app = create_app(config)
    server = config["server"]

    logger.info("Log API server starting on port %s", server["port"])
    for method, path, description in ENDPOINTS:
        logger.info("  %s %-12s - %s", method, path, description)
    logger.info("Storage: in-memory (max %d logs)", config["storage"]["max_logs"])

    try:
        app.run(host=server["host"], port=server["port"], debug=server["debug"], threaded=True)
    except KeyboardInterrupt:
        pass
    logger.info("Log API server stopped.")


if __name__ == "__main__":
    main()
