"""
contrib-canvas CLI - Command-line interface using typer.

Main entry point for all contrib-canvas commands.
"""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from contrib_canvas.commands import config_cmd, export, themes


# Create typer app
app = typer.Typer(
    name="contrib-canvas",
    help="Render GitHub contribution heatmaps and yearly trend charts to PNG",
    add_completion=False,
    no_args_is_help=True,
)

# Create console for commands
console = Console()


@app.command(name="heatmap")
def heatmap_command(
    data_file: Path = typer.Argument(..., help="JSON dataset with 'years' and 'contributions'"),
    username: str = typer.Option(..., "--username", "-u", help="GitHub login shown in the header"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output PNG path"),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Theme name (see 'themes')"),
    font: Optional[str] = typer.Option(None, "--font", help="Font family or font file"),
    footer: Optional[str] = typer.Option(None, "--footer", help="Footer text"),
    scale: Optional[float] = typer.Option(None, "--scale", help="Device pixel ratio (default: from config, 1)"),
    open_after: bool = typer.Option(False, "--open", help="Open the image after export"),
):
    """Render a calendar heatmap, one block per year."""
    export.run(
        console,
        "heatmap",
        data_file,
        username,
        output=output,
        theme_name=theme,
        font_face=font,
        footer_text=footer,
        scale_factor=scale,
        should_open=open_after,
    )


@app.command(name="linechart")
def linechart_command(
    data_file: Path = typer.Argument(..., help="JSON dataset with 'years' and 'contributions'"),
    username: str = typer.Option(..., "--username", "-u", help="GitHub login shown in the header"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output PNG path"),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Theme name (see 'themes')"),
    font: Optional[str] = typer.Option(None, "--font", help="Font family or font file"),
    footer: Optional[str] = typer.Option(None, "--footer", help="Footer text"),
    scale: Optional[float] = typer.Option(None, "--scale", help="Device pixel ratio (default: from config, 1)"),
    open_after: bool = typer.Option(False, "--open", help="Open the image after export"),
):
    """Render a line chart of contribution totals per year."""
    export.run(
        console,
        "linechart",
        data_file,
        username,
        output=output,
        theme_name=theme,
        font_face=font,
        footer_text=footer,
        scale_factor=scale,
        should_open=open_after,
    )


@app.command(name="themes")
def themes_command():
    """List available themes."""
    themes.run(console)


@app.command(name="config")
def config_command(
    action: str = typer.Argument(..., help="Action: show, set, reset"),
    key: Optional[str] = typer.Argument(None, help="Setting name for 'set'"),
    value: Optional[str] = typer.Argument(None, help="Setting value for 'set'"),
):
    """Manage default theme, font, footer and scale factor."""
    config_cmd.run(console, action, key, value)


def main() -> None:
    """
    Main CLI entry point for contrib-canvas.

    Usage:
        contrib-canvas heatmap data.json -u octocat
        contrib-canvas linechart data.json -u octocat --theme githubDark
        contrib-canvas themes
        contrib-canvas config show

    Exit:
        Press Ctrl+C to abort
    """
    try:
        app()
    except KeyboardInterrupt:
        import sys
        sys.exit(130)


if __name__ == "__main__":
    main()
