"""Generator configuration loaded from environment variables with sensible defaults."""

import logging
import math
import os
from dataclasses import dataclass, field

from log_api.generator.builder import DEFAULT_SOURCE, DEFAULT_WEIGHTS

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000/logs"


def _parse_float(val: str | None, default: float, name: str) -> float:
    if val is None:
        return default
    try:
        parsed = float(val)
    except ValueError:
        logger.warning("Invalid %s '%s', using %s", name, val, default)
        return default
    if not math.isfinite(parsed) or parsed <= 0:
        logger.warning("%s must be a positive finite number, using %s", name, default)
        return default
    return parsed


def _parse_weights(val: str | None) -> dict[str, int]:
    """Parse 'debug:80,info:15,...' into a weight mapping."""
    if val is None:
        return DEFAULT_WEIGHTS.copy()
    try:
        weights = {}
        for pair in val.split(","):
            level, weight = pair.split(":")
            weights[level.strip().lower()] = int(weight.strip())
    except ValueError:
        logger.warning("Invalid LOG_WEIGHTS format, using defaults")
        return DEFAULT_WEIGHTS.copy()

    unknown = set(weights) - set(DEFAULT_WEIGHTS)
    if unknown or sum(weights.values()) <= 0 or any(w < 0 for w in weights.values()):
        logger.warning("LOG_WEIGHTS must use debug/info/warn/error with positive total, using defaults")
        return DEFAULT_WEIGHTS.copy()
    return weights


@dataclass(frozen=True)
class GeneratorConfig:
    api_url: str = DEFAULT_API_URL
    source_name: str = DEFAULT_SOURCE
    send_interval_seconds: float = 1.0
    request_timeout_seconds: float = 5.0
    log_weights: dict = field(default_factory=lambda: DEFAULT_WEIGHTS.copy())


def load_config() -> GeneratorConfig:
    """Load configuration from environment variables, falling back to defaults."""
    return GeneratorConfig(
        api_url=os.environ.get("API_URL", DEFAULT_API_URL),
        source_name=os.environ.get("SOURCE_NAME", DEFAULT_SOURCE).strip() or DEFAULT_SOURCE,
        send_interval_seconds=_parse_float(
            os.environ.get("SEND_INTERVAL_SECONDS"), 1.0, "SEND_INTERVAL_SECONDS"
        ),
        request_timeout_seconds=_parse_float(
            os.environ.get("REQUEST_TIMEOUT_SECONDS"), 5.0, "REQUEST_TIMEOUT_SECONDS"
        ),
        log_weights=_parse_weights(os.environ.get("LOG_WEIGHTS")),
    )
