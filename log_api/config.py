"""Server configuration: YAML file merged over defaults, plus the API_PORT override."""

import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
PORT_ENV = "API_PORT"


def _merged(defaults: dict, overrides: dict) -> dict:
    """Return a copy of ``defaults`` with ``overrides`` applied section by section."""
    result = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merged(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _read_yaml(path) -> dict:
    """Load a YAML mapping; a missing file gives {}, a malformed one warns and gives {}."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError:
        logger.warning("Invalid YAML in %s, using defaults", path)
        return {}
    return data if isinstance(data, dict) else {}


class Config:
    """Log API settings.

    Precedence, lowest first: ``DEFAULTS``, the YAML file at ``config_path``,
    then ``port`` (normally the raw ``API_PORT`` string).
    """

    DEFAULTS = {
        "server": {
            "host": "0.0.0.0",
            "port": 3000,
            "debug": False,
            "max_body_bytes": 10 * 1024 * 1024,
        },
        "storage": {
            "max_logs": 1000,
        },
        "logging": {
            "level": "INFO",
        },
    }

    def __init__(self, config_path=None, port=None):
        overrides = _read_yaml(config_path) if config_path is not None else {}
        self._settings = _merged(self.DEFAULTS, overrides)

        if port:
            try:
                self._settings["server"]["port"] = int(port)
            except (TypeError, ValueError):
                logger.warning(
                    "Invalid %s %r, keeping port %s", PORT_ENV, port, self._settings["server"]["port"]
                )

    def get(self, key, default=None):
        return self._settings.get(key, default)

    def __getitem__(self, key):
        return self._settings[key]

    def __contains__(self, key):
        return key in self._settings


def load_config() -> Config:
    """Build the config from CONFIG_PATH (default config.yaml) and API_PORT."""
    return Config(
        os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH),
        port=os.environ.get(PORT_ENV),
    )
