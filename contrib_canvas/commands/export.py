#region Imports
import sys
import traceback
from pathlib import Path
from typing import Optional

from rich.console import Console

from contrib_canvas.config.settings import DEBUG
from contrib_canvas.config.user_config import (
    get_custom_themes,
    get_font_face,
    get_footer_text,
    get_scale_factor,
    get_theme_name,
)
from contrib_canvas.data.dataset_loader import load_dataset
from contrib_canvas.models.activity import InvalidDataset
from contrib_canvas.utils._system import open_file
from contrib_canvas.utils.security import safe_filename_part, validate_output_path
from contrib_canvas.visualization.canvas import RenderOptions, render_heatmap, render_trend_line
from contrib_canvas.visualization.surface import PillowSurface
from contrib_canvas.visualization.themes import build_themes
#endregion


#region Constants
CHART_KINDS = ("heatmap", "linechart")
#endregion


#region Functions


def run(
    console: Console,
    kind: str,
    data_file: Path,
    username: str,
    output: Optional[Path] = None,
    theme_name: Optional[str] = None,
    font_face: Optional[str] = None,
    footer_text: Optional[str] = None,
    scale_factor: Optional[float] = None,
    should_open: bool = False,
) -> None:
    """
    Render a chart from a dataset file and save it as PNG.

    Options left as None are taken from the user config.

    Args:
        console: Rich console for output
        kind: "heatmap" or "linechart"
        data_file: JSON dataset to render
        username: GitHub login shown in the header
        output: Output PNG path (default: contributions-<user>-<kind>.png)
        theme_name: Palette name
        font_face: Font family or font file
        footer_text: Footer line
        scale_factor: Device pixel ratio
        should_open: Open the image after export

    Exit:
        Exits with status 1 on error
    """
    if kind not in CHART_KINDS:
        console.print(f"[red]Error: Unknown chart type: {kind}[/red]")
        sys.exit(1)

    if output is None:
        output = Path(f"contributions-{safe_filename_part(username)}-{kind}.png")
    output_path = output if output.is_absolute() else Path.cwd() / output

    is_valid, error = validate_output_path(output_path)
    if not is_valid:
        console.print(f"[red]Error: {error}[/red]")
        sys.exit(1)

    options = RenderOptions(
        data=None,
        username=username,
        theme_name=theme_name or get_theme_name(),
        font_face=font_face or get_font_face(),
        footer_text=footer_text if footer_text is not None else get_footer_text(),
    )
    scale = scale_factor if scale_factor is not None else get_scale_factor()

    try:
        with console.status("[bold #40c463]Loading contributions...", spinner="dots", spinner_style="#40c463"):
            options.data = load_dataset(data_file)
            themes = build_themes(get_custom_themes())

        if options.theme_name not in themes:
            console.print(f"[yellow]Unknown theme '{options.theme_name}', using standard[/yellow]")

        with console.status(f"[bold #40c463]Rendering {kind}...", spinner="dots", spinner_style="#40c463"):
            surface = PillowSurface()
            if kind == "heatmap":
                render_heatmap(surface, options, themes=themes, scale_factor=scale)
            else:
                render_trend_line(surface, options, themes=themes, scale_factor=scale)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            surface.save(output_path)

    except (FileNotFoundError, InvalidDataset, ValueError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        if DEBUG:
            traceback.print_exc()
        sys.exit(1)

    console.print(f"[green]✓ Exported to: {output_path}[/green]")

    if should_open:
        console.print("[cyan]Opening PNG...[/cyan]")
        if not open_file(output_path):
            console.print("[yellow]Could not open the image viewer[/yellow]")


#endregion
