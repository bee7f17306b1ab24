import json
import logging
import os

from .constants import CONFIG_ENV_VAR, CONFIG_FILENAME, DEFAULT_ANCHOR_HISTORY_LIMIT

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "anchor_history_limit": DEFAULT_ANCHOR_HISTORY_LIMIT,
}


def config_path():
    """Location of the settings file, honouring the environment override."""
    return os.environ.get(CONFIG_ENV_VAR) or os.path.expanduser(os.path.join("~", CONFIG_FILENAME))


def _read_config(path):
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object in {path}, got {type(data).__name__}")
    return data


def load_settings():
    """Load settings from config file, falling back to defaults"""
    settings = DEFAULT_SETTINGS.copy()
    path = config_path()

    try:
        if os.path.exists(path):
            settings.update(_read_config(path))
    except (OSError, ValueError) as e:
        logger.warning("Could not load settings from %s: %s", path, e)

    return settings


def get_setting(key, default=None):
    """Utility function to get a single setting value"""
    return load_settings().get(key, default)


def set_setting(key, value):
    """Utility function to set a single setting value"""
    path = config_path()
    try:
        settings = {}
        if os.path.exists(path):
            settings = _read_config(path)

        settings[key] = value

        with open(path, "w") as f:
            json.dump(settings, f, indent=2)
    except (OSError, ValueError) as e:
        logger.error("Could not save setting %s to %s: %s", key, path, e)


def get_history_limit():
    limit = get_setting("anchor_history_limit", DEFAULT_ANCHOR_HISTORY_LIMIT)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        logger.warning("Ignoring invalid anchor_history_limit %r, using %d", limit, DEFAULT_ANCHOR_HISTORY_LIMIT)
        return DEFAULT_ANCHOR_HISTORY_LIMIT
    return limit
