from simplevtt.tools import file_utils
from simplevtt.constants import APP_NAME

import platformdirs
import yaml

import shutil
import importlib.resources
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_config(arg: Path | None = None) -> dict[str, Any]:
    """
    Load configuration from a YAML file, layered over the packaged defaults.

    The first file found wins:
    1. Path given by `--config` or SIMPLEVTT_CONFIG.
    2. `config.yaml` in the project root (for development).
    3. `config.yaml` in the user's config directory (e.g., ~/.config/simplevtt/),
       created from the packaged default if missing.

    Keys the file leaves out keep their value from `default_config.yaml`.
    """
    # Logging isn't set up yet; keep stdout clean for the WebVTT output
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    with _default_config().open('r', encoding='utf-8') as f:
        defaults: dict[str, Any] = yaml.safe_load(f)

    config_path = _find_config(arg)
    if config_path is None:
        logger.info("Using packaged default config")
        return defaults

    logger.info(f"Loading config from: {config_path}")
    with open(config_path, 'r', encoding='utf-8') as f:
        overrides = yaml.safe_load(f) or {}

    return merge_config(defaults, overrides)

def merge_config(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Returns `defaults` with `overrides` applied section by section."""
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged

def _find_config(arg: Path | None) -> Path | None:
    """Finds the config file to load, or None to use the packaged default alone."""
    if arg:
        if arg.exists():
            return arg
        logger.warning(f"Config file not found, ignoring: {arg}")

    try:
        dev_config_path = file_utils.get_project_dir() / "config.yaml"
        if dev_config_path.exists():
            return dev_config_path
    except FileNotFoundError:
        pass

    user_config_dir = Path(platformdirs.user_config_dir(APP_NAME))
    user_config_path = user_config_dir / "config.yaml"
    if user_config_path.exists():
        return user_config_path

    logger.info(f"User config not found. Creating default at {user_config_path.resolve()}")
    try:
        with importlib.resources.as_file(_default_config()) as default_path:
            user_config_dir.mkdir(parents=True, exist_ok=True)
            shutil.copy(default_path, user_config_path)
    except (FileNotFoundError, PermissionError) as e:
        logger.warning(f"Could not create user config file ({e}).")
        return None

    return user_config_path

def _default_config():
    return importlib.resources.files('simplevtt.defaults').joinpath('default_config.yaml')
