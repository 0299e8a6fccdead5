import os
from pathlib import Path
from typing import Optional

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "fuzzy_date.yml"
CONFIG_ENV_VAR = "FUZZY_DATE_CONFIG"

DEFAULTS = {
    "debug": False,
    "paths": {"logs_dir": "logs"},
    # No "file" key: console logging only unless a config file enables it.
    "logging": {"level": "INFO", "rotate": False, "per_module": False},
    "pipeline": {"skip_blank": True, "stop_on_error": False},
}


class FDConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.pipeline = {**DEFAULTS["pipeline"], **(data.get("pipeline") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", DEFAULTS["debug"]))


def load_config(path: Optional[Path] = None) -> 'FDConfig':
    """
    Load configuration from YAML.

    Resolution order: explicit ``path``, then $FUZZY_DATE_CONFIG, then
    ``config/fuzzy_date.yml`` at the project root. An explicit or env path
    that does not exist is an error; a missing default file means defaults.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        config_path = Path(explicit)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = CONFIG_PATH
        if not config_path.exists():
            return FDConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FDConfig(data)

_config_cache = None

def get_config() -> 'FDConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
