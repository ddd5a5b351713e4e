"""
Page composition for the two chart types.

Sizes the surface, applies the device pixel ratio, draws the shared
header/footer and hands the rest of the page to the heatmap or line
chart renderer.
"""
#region Imports
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from contrib_canvas.config.defaults import DEFAULT_FONT_FACE
from contrib_canvas.config.settings import (
    CANVAS_MARGIN,
    CELL_STRIDE,
    FOOTER_PADDING,
    GRID_WEEKS,
    HEADER_HEIGHT,
    LINE_CHART_HEIGHT,
    SEPARATOR_Y,
    X_AXIS_HEIGHT,
    YEAR_HEIGHT,
)
from contrib_canvas.models.activity import coerce_dataset
from contrib_canvas.visualization.heatmap import draw_year
from contrib_canvas.visualization.line_chart import draw_line_chart
from contrib_canvas.visualization.surface import RenderingContext, Surface
from contrib_canvas.visualization.themes import THEMES, Theme, get_theme
#endregion


#region Data Classes


@dataclass
class RenderOptions:
    """
    What to draw and how.

    Attributes:
        data: ActivityDataset, or a mapping in its JSON shape
        username: GitHub login shown in the page header
        theme_name: Palette name, unknown names fall back to 'standard'
        font_face: Font family for all text
        footer_text: Optional line at the bottom of the page
    """

    data: Any
    username: str
    theme_name: Optional[str] = None
    font_face: str = DEFAULT_FONT_FACE
    footer_text: Optional[str] = None
#endregion


#region Functions


def heatmap_size(year_count: int) -> tuple[int, int]:
    """Logical (width, height) of a heatmap page with year_count year blocks."""
    width = GRID_WEEKS * CELL_STRIDE + CANVAS_MARGIN * 2
    height = year_count * YEAR_HEIGHT + CANVAS_MARGIN + HEADER_HEIGHT + FOOTER_PADDING
    return width, height


def line_chart_size() -> tuple[int, int]:
    """Logical (width, height) of a line chart page."""
    width = GRID_WEEKS * CELL_STRIDE + CANVAS_MARGIN * 2
    height = LINE_CHART_HEIGHT + CANVAS_MARGIN + HEADER_HEIGHT + X_AXIS_HEIGHT + FOOTER_PADDING
    return width, height


def draw_metadata(
    ctx: RenderingContext,
    username: str,
    width: float,
    height: float,
    theme: Theme,
    font_face: str = DEFAULT_FONT_FACE,
    footer_text: Optional[str] = None
) -> None:
    """
    Paint the background, page header, separator and optional footer.

    Args:
        ctx: Drawing context
        username: GitHub login
        width: Logical page width
        height: Logical page height
        theme: Palette
        font_face: Font family
        footer_text: Footer line, omitted when empty
    """
    ctx.fill_style = theme.background
    ctx.fill_rect(0, 0, width, height)

    if footer_text:
        ctx.fill_style = theme.meta
        ctx.text_baseline = "bottom"
        ctx.set_font(10, font_face)
        ctx.fill_text(footer_text, CANVAS_MARGIN, height - 5)

    ctx.fill_style = theme.text
    ctx.text_baseline = "hanging"
    ctx.set_font(20, font_face)
    ctx.fill_text(f"@{username} on GitHub", CANVAS_MARGIN, CANVAS_MARGIN)

    ctx.begin_path()
    ctx.move_to(CANVAS_MARGIN, SEPARATOR_Y)
    ctx.line_to(width - CANVAS_MARGIN, SEPARATOR_Y)
    ctx.stroke_style = theme.grade0
    ctx.stroke()


def _prepare_surface(surface: Surface, width: int, height: int, scale_factor: float) -> RenderingContext:
    if scale_factor <= 0:
        raise ValueError(f"Scale factor must be greater than 0, got {scale_factor}")

    surface.resize(width * scale_factor, height * scale_factor)
    ctx = surface.get_context()
    ctx.scale(scale_factor, scale_factor)
    ctx.text_baseline = "hanging"
    return ctx


def render_heatmap(
    surface: Surface,
    options: RenderOptions,
    themes: Mapping[str, Theme] = THEMES,
    scale_factor: float = 1.0,
    today: Optional[date] = None
) -> None:
    """
    Render one heatmap block per year onto a surface.

    The surface is resized to fit every year of the dataset. The dataset is
    validated before anything is drawn.

    Args:
        surface: Target surface, modified in place
        options: Dataset, username and presentation options
        themes: Theme table to resolve options.theme_name in
        scale_factor: Device pixel ratio
        today: Current date (defaults to the system date)

    Raises:
        InvalidDataset: If options.data is missing or malformed
        ValueError: If scale_factor is not positive
    """
    data = coerce_dataset(options.data)
    if today is None:
        today = date.today()

    theme = get_theme(options.theme_name, themes)
    width, height = heatmap_size(len(data.years))
    ctx = _prepare_surface(surface, width, height, scale_factor)

    draw_metadata(ctx, options.username, width, height, theme, options.font_face, options.footer_text)

    for i, year in enumerate(data.years):
        offset_y = YEAR_HEIGHT * i + CANVAS_MARGIN + HEADER_HEIGHT
        draw_year(
            ctx,
            year,
            data,
            theme,
            offset_x=CANVAS_MARGIN,
            offset_y=offset_y,
            font_face=options.font_face,
            today=today,
        )


def render_trend_line(
    surface: Surface,
    options: RenderOptions,
    themes: Mapping[str, Theme] = THEMES,
    scale_factor: float = 1.0
) -> None:
    """
    Render the per-year totals as a line chart onto a surface.

    The caller's dataset is left untouched; years are plotted oldest first
    when the dataset lists them newest first.

    Args:
        surface: Target surface, modified in place
        options: Dataset, username and presentation options
        themes: Theme table to resolve options.theme_name in
        scale_factor: Device pixel ratio

    Raises:
        InvalidDataset: If options.data is missing or malformed
        ValueError: If scale_factor is not positive
    """
    data = coerce_dataset(options.data)
    theme = get_theme(options.theme_name, themes)
    width, height = line_chart_size()
    ctx = _prepare_surface(surface, width, height, scale_factor)

    draw_metadata(ctx, options.username, width, height, theme, options.font_face, options.footer_text)
    draw_line_chart(ctx, data, theme, width, options.font_face)


#endregion
