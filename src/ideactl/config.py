import logging
import os
from typing import Any, NamedTuple

from .core.const import ACPI_CALL
from .core.errors import ConfigError
from .utils import expanduser

logger = logging.getLogger(__name__)

CONFIG_DIR = os.environ.get("IDEACTL_CONFIG_DIR", "~/.config/ideactl")
CONFIG_FILE = "config.yml"


class Config(NamedTuple):
    channel: str = ACPI_CALL
    log_dir: str | None = None
    elevate: bool = True


def _is_set(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def get_config_fn() -> str:
    return os.path.join(expanduser(CONFIG_DIR), CONFIG_FILE)


def load_config_yaml(fn: str) -> dict[str, Any]:
    import yaml

    try:
        with open(fn, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file '{fn}' is not valid yaml:\n{e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file '{fn}':\n{e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{fn}' should contain a mapping.")
    return data


def load_config(fn: str | None = None) -> Config:
    """Loads the config file and applies environment overrides.

    A missing default config file is not an error, a missing file that was
    asked for explicitly is."""
    if fn is None:
        fn = get_config_fn()
        data = load_config_yaml(fn) if os.path.isfile(fn) else {}
    else:
        data = load_config_yaml(expanduser(fn))

    unknown = set(data) - set(Config._fields)
    if unknown:
        logger.warning(f"Ignoring unknown config keys:\n{', '.join(sorted(unknown))}")

    channel = data.get("channel", ACPI_CALL)
    log_dir = data.get("log_dir", None)
    elevate = data.get("elevate", True)

    if not isinstance(channel, str) or not channel:
        raise ConfigError(f"Config key 'channel' should be a path, got {channel!r}.")
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigError(f"Config key 'log_dir' should be a path, got {log_dir!r}.")
    if not isinstance(elevate, bool):
        raise ConfigError(f"Config key 'elevate' should be true/false, got {elevate!r}.")

    if env := os.environ.get("IDEACTL_CHANNEL", None):
        logger.warning(f"ACPI channel override using an environment variable to '{env}'.")
        channel = env
    if env := os.environ.get("IDEACTL_LOG_DIR", None):
        log_dir = env
    if _is_set("IDEACTL_NO_ELEVATE"):
        elevate = False

    return Config(channel=channel, log_dir=log_dir, elevate=elevate)
