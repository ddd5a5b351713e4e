#region Imports
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from contrib_canvas.config.defaults import DEFAULT_THEME_NAME, DEFAULT_THEMES, THEME_SLOTS
#endregion


#region Data Classes


@dataclass(frozen=True)
class Theme:
    """
    Named palette used by both charts.

    Attributes:
        background: Page background
        text: Titles, year headers and axis labels
        meta: Month labels and footer
        grade0..grade4: Intensity ramp, lowest to highest
    """

    background: str
    text: str
    meta: str
    grade0: str
    grade1: str
    grade2: str
    grade3: str
    grade4: str

    def grade(self, intensity: int) -> str:
        """Ramp color for an intensity bucket, clamped to grade0..grade4."""
        level = min(max(int(intensity), 0), 4)
        return getattr(self, f"grade{level}")

    @classmethod
    def from_mapping(cls, mapping: Mapping, fallback: Optional["Theme"] = None) -> "Theme":
        """
        Build a theme from a slot mapping.

        Args:
            mapping: Slot name to color
            fallback: Theme supplying any slot missing from mapping

        Returns:
            Theme

        Raises:
            ValueError: If a slot is missing and there is no fallback
        """
        values = {}
        for slot in THEME_SLOTS:
            if slot in mapping:
                values[slot] = str(mapping[slot])
            elif fallback is not None:
                values[slot] = getattr(fallback, slot)
            else:
                raise ValueError(f"Theme is missing the '{slot}' color")
        return cls(**values)
#endregion


#region Functions


def build_themes(custom: Optional[Mapping[str, Mapping]] = None) -> Mapping[str, Theme]:
    """
    Build the read-only theme table.

    Args:
        custom: User palettes by name, merged over the built-in themes.
            Missing slots are taken from the standard theme.

    Returns:
        Read-only mapping of theme name to Theme
    """
    table = {name: Theme.from_mapping(slots) for name, slots in DEFAULT_THEMES.items()}
    standard = table[DEFAULT_THEME_NAME]
    for name, slots in (custom or {}).items():
        table[name] = Theme.from_mapping(slots, fallback=standard)
    return MappingProxyType(table)


THEMES = build_themes()


def get_theme(theme_name: Optional[str] = None, themes: Mapping[str, Theme] = THEMES) -> Theme:
    """
    Resolve a theme by name.

    Unknown names are not an error: the standard theme is returned.

    Args:
        theme_name: Requested theme
        themes: Theme table to look in

    Returns:
        Matching Theme, or the standard theme
    """
    if theme_name is not None and theme_name in themes:
        return themes[theme_name]
    if DEFAULT_THEME_NAME in themes:
        return themes[DEFAULT_THEME_NAME]
    return THEMES[DEFAULT_THEME_NAME]


#endregion
