"""
Default configuration values for contrib-canvas.

Edit this file to change default settings.
This file is used for:
1. The built-in theme table (palettes selectable by name)
2. Reset to defaults (`contrib-canvas config reset`)

All colors are hex strings understood by Pillow.
"""

#region Theme Defaults
# Every theme defines the same slots: page background, primary text,
# secondary (meta) text, and a five-step intensity ramp grade0..grade4.

DEFAULT_THEME_NAME = "standard"

DEFAULT_THEMES = {
    "standard": {
        "background": "#ffffff",
        "text": "#000000",
        "meta": "#666666",
        "grade4": "#216e39",
        "grade3": "#30a14e",
        "grade2": "#40c463",
        "grade1": "#9be9a8",
        "grade0": "#ebedf0",
    },
    "classic": {
        "background": "#ffffff",
        "text": "#000000",
        "meta": "#666666",
        "grade4": "#196127",
        "grade3": "#239a3b",
        "grade2": "#7bc96f",
        "grade1": "#c6e48b",
        "grade0": "#ebedf0",
    },
    "githubDark": {
        "background": "#101217",
        "text": "#ffffff",
        "meta": "#dddddd",
        "grade4": "#27d545",
        "grade3": "#10983d",
        "grade2": "#00602d",
        "grade1": "#003820",
        "grade0": "#161b22",
    },
    "halloween": {
        "background": "#ffffff",
        "text": "#000000",
        "meta": "#666666",
        "grade4": "#03001c",
        "grade3": "#fe9600",
        "grade2": "#ffc501",
        "grade1": "#ffee4a",
        "grade0": "#ebedf0",
    },
    "teal": {
        "background": "#ffffff",
        "text": "#000000",
        "meta": "#666666",
        "grade4": "#458b74",
        "grade3": "#66cdaa",
        "grade2": "#76eec6",
        "grade1": "#7fffd4",
        "grade0": "#ebedf0",
    },
    "blue": {
        "background": "#ffffff",
        "text": "#000000",
        "meta": "#666666",
        "grade4": "#153651",
        "grade3": "#1f4f79",
        "grade2": "#2966a0",
        "grade1": "#3484cc",
        "grade0": "#eff3f7",
    },
    "dracula": {
        "background": "#181818",
        "text": "#f8f8f2",
        "meta": "#6272a4",
        "grade4": "#ff79c6",
        "grade3": "#bd93f9",
        "grade2": "#6272a4",
        "grade1": "#44475a",
        "grade0": "#282a36",
    },
    "solarizedDark": {
        "background": "#002b36",
        "text": "#93a1a1",
        "meta": "#586e75",
        "grade4": "#d33682",
        "grade3": "#b58900",
        "grade2": "#2aa198",
        "grade1": "#268bd2",
        "grade0": "#073642",
    },
    "solarizedLight": {
        "background": "#fdf6e3",
        "text": "#586e75",
        "meta": "#93a1a1",
        "grade4": "#6c71c4",
        "grade3": "#dc322f",
        "grade2": "#cb4b16",
        "grade1": "#b58900",
        "grade0": "#eee8d5",
    },
}

THEME_SLOTS = ("background", "text", "meta", "grade0", "grade1", "grade2", "grade3", "grade4")

#endregion


#region Other Defaults

DEFAULT_FONT_FACE = "IBM Plex Mono"

DEFAULT_PREFERENCES = {
    "theme": DEFAULT_THEME_NAME,        # any key of DEFAULT_THEMES or a custom theme
    "font_face": DEFAULT_FONT_FACE,     # font family name or path to a .ttf/.otf file
    "footer_text": "",                  # empty = no footer
    "scale_factor": "1",                # device pixel ratio applied to the output image
}

#endregion


def get_all_defaults() -> dict:
    """
    Get all default settings merged into a single dictionary.

    Returns:
        Dictionary with all default preferences plus an empty custom theme table
    """
    defaults = {}
    defaults.update(DEFAULT_PREFERENCES)
    defaults["themes"] = {}
    return defaults
