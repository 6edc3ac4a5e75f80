# screenflow/config.py
# Description: Configuration management for the screenflow runtime.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the runtime configuration file ---
CONFIG_ENV_VAR = "SCREENFLOW_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "screenflow" / "config.toml"

CONFIG_TOML_CONTENT = """
# Configuration for the screenflow UI navigation runtime.

[logging]
# Minimum level for the console and file sinks.
level = "INFO"
console = true
# Leave empty to disable file logging.
log_file = ""
rotation = "10 MB"
retention = "7 days"

[runtime]
# Context used by window creation calls that do not pass one explicitly.
default_context = ""
# Seconds between two tween frames.
frame_interval = 0.016

[navigation]
# Maximum number of entries kept in a coordinator back stack. 0 means unbounded.
max_back_stack = 50

[animation.fade]
show_duration = 0.25
show_ease = "linear"
hide_duration = 0.25
hide_ease = "linear"

[animation.slide]
slide_duration = 0.35
slide_ease = "out_circ"
# One of "left_to_right", "right_to_left", "none".
direction = "right_to_left"

[buttons]
# Minimum seconds between two accepted pointer clicks.
min_click_interval = 0.7
color_change_duration = 0.2
default_color = [1.0, 1.0, 1.0, 1.0]
hover_color = [1.0, 1.0, 1.0, 1.0]
inactive_color = [0.5, 0.5, 0.5, 1.0]
selection_color = [1.0, 0.92, 0.016, 1.0]

[buttons.punch]
click_scale = 1.05
hover_scale = 1.02
default_scale = 1.0
click_duration = 0.2
click_ease = "in_out_quad"
hover_duration = 1.0
hover_ease = "in_out_bounce"

[buttons.jump_up]
# Jump height in layout units.
jump_height = 20.0
jump_duration = 0.5
jump_ease = "out_bounce"
return_duration = 0.3
return_ease = "in_out_quad"
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)


def get_config_path() -> Path:
    """Return the configuration file path, honouring the SCREENFLOW_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


# --- Primary Configuration Loading Logic ---
_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_runtime_config(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads runtime settings from the TOML config file.

    The defaults from CONFIG_TOML_CONTENT are used as a base and the user file,
    when present, is merged on top. A file that cannot be decoded is logged
    and ignored so the runtime always starts with a usable configuration.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)
    config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"Config file not found at {config_path}. Using built-in defaults.")
    else:
        try:
            with open(config_path, "rb") as f:
                user_config = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config)
            logger.info(f"Loaded screenflow config from {config_path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding config file {config_path}: {e}. Using built-in defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using built-in defaults.")

    _CONFIG_CACHE = loaded_config
    return _CONFIG_CACHE


def reset_config_cache() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None


def _get_section(config: Dict[str, Any], section: str) -> Optional[Dict[str, Any]]:
    current: Any = config
    for part in section.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current if isinstance(current, dict) else None


def get_runtime_setting(section: str, key: str, default: Any = None) -> Any:
    """
    Helper to get a specific setting from the loaded configuration.

    Dotted section names address nested tables, e.g. ``"animation.fade"``.
    """
    section_data = _get_section(load_runtime_config(), section)
    if section_data is None:
        return default
    return section_data.get(key, default)


def get_runtime_section(section: str) -> Dict[str, Any]:
    """Return a copy of a whole (possibly nested) section, or an empty dict."""
    section_data = _get_section(load_runtime_config(), section)
    return copy.deepcopy(section_data) if section_data is not None else {}


def save_setting_to_config(section: str, key: str, value: Any) -> bool:
    """
    Persist a single setting to the user config file and refresh the cache.

    Returns:
        True if the file was written, False otherwise.
    """
    config_path = get_config_path()
    user_config: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Refusing to overwrite unreadable config {config_path}: {e}")
            return False

    target = user_config
    for part in section.split("."):
        existing = target.get(part)
        if not isinstance(existing, dict):
            existing = {}
            target[part] = existing
        target = existing
    target[key] = value

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(user_config, f)
    except OSError as e:
        logger.error(f"Could not write config file {config_path}: {e}")
        return False

    logger.info(f"Saved setting [{section}] {key} to {config_path}")
    load_runtime_config(force_reload=True)
    return True

#
# End of config.py
#######################################################################################################################
