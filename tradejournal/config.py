"""Configuration for the trade journal CLI.

Settings live in ``~/.config/tradejournal/config.toml``. Missing keys,
or a missing or unreadable file, fall back to the defaults below.
"""

import logging
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "tradejournal"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = {
    "journal": {
        "path": str(CONFIG_DIR / "journal.json"),
    },
    "display": {
        "currency": "₹",
        "top_items": 5,
    },
    "targets": {
        "monthly_pnl": 10000.0,
    },
}


def _merge(defaults: dict, overrides: dict) -> dict:
    """Merge config sections, keeping defaults for keys not overridden."""
    merged = {}
    for key, value in defaults.items():
        override = overrides.get(key)
        if isinstance(value, dict):
            merged[key] = _merge(value, override if isinstance(override, dict) else {})
        elif override is not None:
            merged[key] = override
        else:
            merged[key] = value
    for key, value in overrides.items():
        merged.setdefault(key, value)
    return merged


def get_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        config_path: Config file to read. Defaults to CONFIG_PATH.

    Returns:
        Config dict.
    """
    path = config_path or CONFIG_PATH

    if not path.exists():
        return _merge(DEFAULT_CONFIG, {})

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return _merge(DEFAULT_CONFIG, {})

    return _merge(DEFAULT_CONFIG, loaded)


def get_journal_path(config: dict) -> Path:
    """Get the journal file path from config."""
    return Path(config["journal"]["path"]).expanduser()


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Write a config file holding the default settings.

    Returns:
        Path of the written config file.
    """
    path = config_path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return path
