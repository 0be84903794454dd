"""Config persistence for blinkhid.

Config is stored at ~/.config/blinkhid/config.json (XDG-compliant).

Usage:
    from blinkhid.conf import get_selected_serial, save_selected_serial

    save_selected_serial("BS012345-3.0")
    get_selected_serial()       # 'BS012345-3.0'
    get_default_channel()       # 0 unless saved
"""
from __future__ import annotations

import json
import logging
import os
from typing import Optional

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'blinkhid')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            config = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    if not isinstance(config, dict):
        log.warning("Ignoring malformed config at %s", CONFIG_PATH)
        return {}
    return config


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# Selected device persistence (CLI device selection)
# =========================================================================

def get_selected_serial() -> Optional[str]:
    """Get CLI-selected device serial. Returns None if unset."""
    return load_config().get('selected_serial')


def save_selected_serial(serial: str):
    """Persist CLI-selected device serial."""
    config = load_config()
    config['selected_serial'] = serial
    save_config(config)


# =========================================================================
# Default channel
# =========================================================================

def get_default_channel() -> int:
    """Channel used when a command gives none. Defaults to 0."""
    try:
        return int(load_config().get('default_channel', 0))
    except (TypeError, ValueError):
        return 0


def save_default_channel(channel: int):
    config = load_config()
    config['default_channel'] = channel
    save_config(config)
