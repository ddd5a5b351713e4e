"""Render GitHub-style contribution heatmaps and yearly trend charts."""

from contrib_canvas.models.activity import (
    ActivityDataset,
    Contribution,
    InvalidDataset,
    Year,
    YearRange,
)
from contrib_canvas.visualization.canvas import RenderOptions, render_heatmap, render_trend_line
from contrib_canvas.visualization.surface import PillowSurface
from contrib_canvas.visualization.themes import THEMES, Theme, get_theme

__version__ = "0.1.0"

__all__ = [
    "ActivityDataset",
    "Contribution",
    "InvalidDataset",
    "Year",
    "YearRange",
    "RenderOptions",
    "render_heatmap",
    "render_trend_line",
    "PillowSurface",
    "THEMES",
    "Theme",
    "get_theme",
]
