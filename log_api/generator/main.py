"""Log generator entry point: posts one payment-service log per interval."""

import logging
import signal
import sys

import requests
from apscheduler.schedulers.blocking import BlockingScheduler

from log_api.generator.builder import create_realistic_log
from log_api.generator.config import load_config
from log_api.generator.sender import LogSender

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [GENERATOR] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def send_one(sender: LogSender, config) -> bool:
    """Build and post a single log. Returns False if delivery failed."""
    log = create_realistic_log(source=config.source_name, weights=config.log_weights)
    try:
        sender.send(log)
    except requests.RequestException as e:
        logger.error("[%s] Failed to send log: %s", config.source_name, e)
        return False
    logger.info("[%s] Sent %s log: %s", config.source_name, log["level"], log["message"])
    return True


def main():
    config = load_config()
    sender = LogSender(config.api_url, timeout=config.request_timeout_seconds)
    scheduler = BlockingScheduler()
    scheduler.add_job(
        send_one, "interval", seconds=config.send_interval_seconds,
        args=[sender, config], max_instances=1, coalesce=True,
    )

    def _signal_handler(sig, _frame):
        logger.info("Shutdown signal received (signal %d), stopping...", sig)
        scheduler.shutdown(wait=False)

    signal.signal(signal.SIGTERM, _signal_handler)

    logger.info("[%s] Log generator started with weights: %s", config.source_name, config.log_weights)
    logger.info("[%s] Sending logs to: %s", config.source_name, config.api_url)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        pass
    finally:
        sender.close()
        logger.info("Log generator stopped.")


if __name__ == "__main__":
    main()
