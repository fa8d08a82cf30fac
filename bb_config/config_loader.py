import json
import os
from datetime import datetime

from rich.console import Console

DEFAULT_CONFIG_PATH = "bb_config/runtime_config.json"

DEFAULT_CONFIG = {
    "progress_interval": 10_000_000,
    "show_progress": True,
    "max_steps": None,
    "log_results": False,
    "output_directory": "logs/",
    "log_file_prefix": "busybeaver_",
}

# Expected types for validation
CONFIG_SCHEMA = {
    "progress_interval": int,
    "show_progress": bool,
    "max_steps": (int, type(None)),
    "log_results": bool,
    "output_directory": str,
    "log_file_prefix": str,
}

POSITIVE_KEYS = ("progress_interval", "max_steps")


def validate_config(config):
    for key in config:
        if key not in CONFIG_SCHEMA:
            raise ValueError(f"Unknown configuration key: {key}")

    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is a subclass of int
        if isinstance(value, bool) and expected_type is not bool:
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")
        if not isinstance(value, expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    for key in POSITIVE_KEYS:
        if config[key] is not None and config[key] <= 0:
            raise ValueError(f"Config key '{key}' must be positive, got {config[key]}.")


def load_config(path=None, verbose=False, console=None):
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not os.path.exists(path):
            path = None
    elif not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    user_config = {}
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    if config["log_results"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        console = console or Console()
        console.print(f"[{datetime.now()}] Loaded config from {path or 'defaults'}:", markup=False)
        for key, value in config.items():
            console.print(f"  {key}: {value}", markup=False)

    return config
