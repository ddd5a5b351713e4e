#region Imports
import json
from typing import Optional

from contrib_canvas.config.defaults import (
    DEFAULT_FONT_FACE,
    DEFAULT_THEME_NAME,
    THEME_SLOTS,
    get_all_defaults,
)
from contrib_canvas.config.settings import get_config_path
#endregion


#region Constants
EDITABLE_KEYS = ("theme", "font_face", "footer_text", "scale_factor")
#endregion


#region Functions


def load_config() -> dict:
    """
    Load user configuration from disk.

    Missing keys are filled in from the defaults, so callers can index
    every preference directly.

    Returns:
        Configuration dictionary with user preferences
    """
    config = get_default_config()
    config_path = get_config_path()

    if not config_path.exists():
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (json.JSONDecodeError, IOError):
        return config

    if isinstance(stored, dict):
        config.update(stored)
    return config


def save_config(config: dict) -> None:
    """
    Save user configuration to disk.

    Args:
        config: Configuration dictionary to save

    Raises:
        IOError: If config cannot be written
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def get_default_config() -> dict:
    """
    Get default configuration values.

    Returns:
        Default configuration dictionary
    """
    config = get_all_defaults()
    config["version"] = "1.0"
    return config


def reset_config() -> None:
    """Overwrite the configuration file with the defaults."""
    save_config(get_default_config())


def get_theme_name() -> str:
    """
    Get the configured theme name.

    Returns:
        Theme name (unknown names are resolved to "standard" at render time)
    """
    config = load_config()
    return str(config.get("theme") or DEFAULT_THEME_NAME)


def get_font_face() -> str:
    """
    Get the configured font face.

    Returns:
        Font family name or font file path
    """
    config = load_config()
    return str(config.get("font_face") or DEFAULT_FONT_FACE)


def get_footer_text() -> Optional[str]:
    """
    Get the configured footer text.

    Returns:
        Footer text, or None when no footer is configured
    """
    config = load_config()
    footer = config.get("footer_text")
    return str(footer) if footer else None


def get_scale_factor() -> float:
    """
    Get the configured device pixel ratio.

    Returns:
        Positive scale factor, 1.0 if the stored value is unusable
    """
    config = load_config()
    try:
        scale = float(config.get("scale_factor", 1))
    except (TypeError, ValueError):
        return 1.0
    return scale if scale > 0 else 1.0


def get_custom_themes() -> dict[str, dict[str, str]]:
    """
    Get user-defined palettes from the "themes" table of the config file.

    Entries that are not mappings are ignored, and so are unknown slots.

    Returns:
        Dictionary mapping theme name to a (possibly partial) slot mapping
    """
    config = load_config()
    raw_themes = config.get("themes") or {}
    if not isinstance(raw_themes, dict):
        return {}

    custom = {}
    for name, slots in raw_themes.items():
        if not isinstance(slots, dict):
            continue
        custom[str(name)] = {
            slot: str(color) for slot, color in slots.items() if slot in THEME_SLOTS
        }
    return custom


def set_preference(key: str, value: str) -> None:
    """
    Set a single preference in the configuration file.

    Args:
        key: One of "theme", "font_face", "footer_text", "scale_factor"
        value: New value (stored as a string)

    Raises:
        ValueError: If key is unknown or value is invalid for that key
    """
    if key not in EDITABLE_KEYS:
        raise ValueError(
            f"Invalid setting: {key}. Must be one of: {', '.join(EDITABLE_KEYS)}"
        )

    if key == "scale_factor":
        try:
            scale = float(value)
        except ValueError:
            raise ValueError(f"Invalid scale factor: {value}. Must be a number")
        if scale <= 0:
            raise ValueError(f"Invalid scale factor: {value}. Must be greater than 0")

    if key in ("theme", "font_face") and not value.strip():
        raise ValueError(f"{key} cannot be empty")

    config = load_config()
    config[key] = value
    save_config(config)


#endregion
