#region Imports
from rich.console import Console
from rich.table import Table
from rich.text import Text

from contrib_canvas.config.defaults import DEFAULT_THEMES
from contrib_canvas.config.user_config import get_custom_themes, get_theme_name
from contrib_canvas.visualization.themes import build_themes
#endregion


#region Functions


def run(console: Console) -> None:
    """
    List every available theme with a preview of its intensity ramp.

    Args:
        console: Rich console for output
    """
    custom = get_custom_themes()
    themes = build_themes(custom)
    current = get_theme_name()

    table = Table(title="Themes", show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Ramp")
    table.add_column("Background")
    table.add_column("Source", style="dim")

    for name, theme in themes.items():
        ramp = Text()
        for level in range(5):
            ramp.append("■ ", style=theme.grade(level))

        label = Text(name, style="bold green" if name == current else "")
        source = "built-in" if name in DEFAULT_THEMES and name not in custom else "config"
        table.add_row(label, ramp, Text(theme.background), source)

    console.print(table)
    console.print(f"[dim]Current theme: {current}[/dim]")


#endregion
