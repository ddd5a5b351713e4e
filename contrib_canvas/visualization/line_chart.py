#region Imports
import math
from dataclasses import dataclass

from contrib_canvas.config.settings import (
    CANVAS_MARGIN,
    HEADER_HEIGHT,
    LINE_CHART_HEIGHT,
    MARKER_SIZE,
    TICK_LENGTH,
    X_AXIS_HEIGHT,
    Y_AXIS_WIDTH,
)
from contrib_canvas.models.activity import ActivityDataset, Year
from contrib_canvas.visualization.surface import RenderingContext
from contrib_canvas.visualization.themes import Theme
#endregion


#region Constants
# Top of the plot area, just under the page header
CHART_TOP = HEADER_HEIGHT + 10

# Pixel band available to the value axis
GRAPH_HEIGHT = LINE_CHART_HEIGHT - X_AXIS_HEIGHT

# y of the horizontal (category) axis
AXIS_Y = LINE_CHART_HEIGHT + CHART_TOP - X_AXIS_HEIGHT

# x of the vertical (value) axis
AXIS_X = Y_AXIS_WIDTH + CANVAS_MARGIN

# Year labels hang below the category axis ticks
YEAR_LABEL_GAP = 50
YEAR_LABEL_SHIFT = 13
#endregion


#region Data Classes


@dataclass
class Point:
    """
    Marker position of one year.

    Attributes:
        x: Horizontal centre of the marker
        y: Top edge of the marker
        total: Year total the marker stands for
    """

    x: float
    y: float
    total: int
#endregion


#region Functions


def category_axis_length(width: float) -> float:
    """Length of the horizontal axis for a surface of the given width."""
    return Y_AXIS_WIDTH + width - 100


def value_offset(total: int, largest: int) -> float:
    """
    Map a year total onto the value axis.

    Args:
        total: Value to place
        largest: Largest total of the chart (top of the axis)

    Returns:
        Distance in pixels above the category axis, 0..GRAPH_HEIGHT
    """
    if largest <= 0:
        return 0.0
    return total * GRAPH_HEIGHT / largest


def chart_years(data: ActivityDataset) -> list[Year]:
    """Years in plotting order: the dataset order reversed, on a copy."""
    return list(reversed(data.years))


def yearly_points(data: ActivityDataset, width: float) -> list[Point]:
    """
    Compute marker positions for every year.

    Args:
        data: Dataset to plot
        width: Logical width of the surface

    Returns:
        One Point per year, in plotting order
    """
    years = chart_years(data)
    if not years:
        return []

    largest = max(year.total for year in years)
    spacing = category_axis_length(width) / len(years)
    return [
        Point(
            x=AXIS_X + spacing * i,
            y=AXIS_Y - MARKER_SIZE / 2 - value_offset(year.total, largest),
            total=year.total,
        )
        for i, year in enumerate(years)
    ]


def draw_line_chart(
    ctx: RenderingContext,
    data: ActivityDataset,
    theme: Theme,
    width: float,
    font_face: str
) -> list[Point]:
    """
    Draw the per-year totals as a line chart.

    Value ticks are drawn once per distinct total. When every year has the
    same total the ladder would be meaningless, so only the label is drawn.
    A total of 0 sits on the category axis and gets no tick either.

    Args:
        ctx: Drawing context
        data: Dataset to plot
        theme: Palette
        width: Logical width of the surface
        font_face: Font family for all text

    Returns:
        The plotted points, in drawing order
    """
    years = chart_years(data)
    points = yearly_points(data, width)
    totals = [year.total for year in years]
    largest = max(totals, default=0)
    smallest = min(totals, default=0)
    degenerate = smallest == largest

    # Value axis
    ctx.begin_path()
    ctx.move_to(AXIS_X, CHART_TOP)
    ctx.line_to(AXIS_X, AXIS_Y + TICK_LENGTH / 2)
    ctx.stroke_style = theme.grade4
    ctx.stroke()

    # Category axis
    ctx.begin_path()
    ctx.move_to(Y_AXIS_WIDTH + 5, AXIS_Y)
    ctx.line_to(category_axis_length(width), AXIS_Y)
    ctx.stroke_style = theme.grade4
    ctx.stroke()

    ctx.save()
    ctx.fill_style = theme.text
    ctx.text_baseline = "hanging"
    ctx.set_font(10, font_face)
    ctx.translate(CANVAS_MARGIN - 15, LINE_CHART_HEIGHT / 2 + CHART_TOP)
    ctx.rotate(-math.pi / 2)
    ctx.fill_text("contributions", 0, 0)
    ctx.restore()

    ctx.text_baseline = "hanging"
    ctx.set_font(10, font_face)

    labelled_totals: set[int] = set()
    for year, point in zip(years, points):
        tick_y = AXIS_Y - value_offset(year.total, largest)

        if year.total not in labelled_totals:
            if not degenerate and year.total != 0:
                ctx.begin_path()
                ctx.move_to(AXIS_X - TICK_LENGTH / 2, tick_y)
                ctx.line_to(AXIS_X + TICK_LENGTH / 2, tick_y)
                ctx.stroke_style = theme.grade3
                ctx.stroke()
            ctx.fill_style = theme.text
            ctx.fill_text(year.total, CANVAS_MARGIN, point.y, max_width=Y_AXIS_WIDTH)
            labelled_totals.add(year.total)

        if point.x != AXIS_X:
            ctx.begin_path()
            ctx.move_to(point.x, AXIS_Y - TICK_LENGTH / 2)
            ctx.line_to(point.x, AXIS_Y + TICK_LENGTH / 2)
            ctx.stroke_style = theme.grade3
            ctx.stroke()

        ctx.fill_style = theme.text
        ctx.fill_text(
            year.year,
            point.x - YEAR_LABEL_SHIFT,
            AXIS_Y + TICK_LENGTH / 2 + YEAR_LABEL_GAP,
        )

        ctx.fill_style = theme.grade1
        ctx.fill_rect(point.x - MARKER_SIZE / 2, point.y, MARKER_SIZE, MARKER_SIZE)

    if len(points) > 1:
        ctx.begin_path()
        ctx.move_to(points[0].x, points[0].y + MARKER_SIZE / 2)
        for point in points[1:]:
            ctx.line_to(point.x, point.y + MARKER_SIZE / 2)
        ctx.stroke_style = theme.grade1
        ctx.stroke()

    return points


#endregion
