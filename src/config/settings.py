import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

app_root = Path(__file__).parent.parent.parent

DEFAULT_HISTORY_LIMIT = 20
DEFAULT_GLOBAL_HISTORY_LIMIT = 100

DEFAULT_CONFIG: Dict[str, Any] = {
    "tools": {},
    "history_limits": {"color-converter": 10},
    "global_history_limit": DEFAULT_GLOBAL_HISTORY_LIMIT,
}


def get_config_file() -> Path:
    """Config file path, overridable with WEBDEV_TOOLS_CONFIG_FILE."""
    override = os.environ.get('WEBDEV_TOOLS_CONFIG_FILE')
    if override:
        return Path(override)
    return app_root / "config" / "config.json"


def load_config() -> Dict[str, Any]:
    """Load configuration from config/config.json, falling back to defaults"""
    config = json.loads(json.dumps(DEFAULT_CONFIG))
    config_file = get_config_file()
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", config_file, e)
            return config
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key].update(value)
            else:
                config[key] = value
    return config
