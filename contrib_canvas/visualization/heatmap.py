#region Imports
from datetime import date

from contrib_canvas.aggregation.calendar_grid import CalendarGrid, build_calendar_grid
from contrib_canvas.config.settings import BOX_WIDTH, CELL_STRIDE, TEXT_HEIGHT
from contrib_canvas.models.activity import ActivityDataset, Year
from contrib_canvas.utils.calendar import month_abbr
from contrib_canvas.visualization.surface import RenderingContext
from contrib_canvas.visualization.themes import Theme
#endregion


#region Constants
# Year header sits this far above the month labels
YEAR_LABEL_OFFSET = 17
#endregion


#region Functions


def format_year_header(year: Year, today: date) -> str:
    """
    Build the header line of a year block from the year total.

    Args:
        year: Year being drawn
        today: Current date

    Returns:
        Text such as '2021: 1,234 Contributions' or '2024: 1 Contribution (so far)'
    """
    count = year.total
    suffix = "" if count == 1 else "s"
    so_far = " (so far)" if year.year == str(today.year) else ""
    return f"{year.year}: {count:,} Contribution{suffix}{so_far}"


def cell_position(offset_x: float, offset_y: float, column: int, row: int) -> tuple[float, float]:
    """Top-left corner of the grid square at a week column and weekday row."""
    return (
        offset_x + CELL_STRIDE * column,
        offset_y + TEXT_HEIGHT + CELL_STRIDE * row,
    )


def month_label_columns(grid: CalendarGrid) -> list[tuple[int, str]]:
    """
    Find where month labels go along the top of a grid.

    One label per month change in the first row. A December first column
    belongs to the previous year and gets no label.

    Args:
        grid: Calendar grid of one year

    Returns:
        List of (column index, month abbreviation)
    """
    labels = []
    last_counted_month = 0
    for column, cell in enumerate(grid.first_row):
        month = cell.date.month
        first_month_is_december = month == 12 and column == 0
        if month != last_counted_month and not first_month_is_december:
            labels.append((column, month_abbr(cell.date)))
            last_counted_month = month
    return labels


def draw_year(
    ctx: RenderingContext,
    year: Year,
    data: ActivityDataset,
    theme: Theme,
    offset_x: float,
    offset_y: float,
    font_face: str,
    today: date
) -> CalendarGrid:
    """
    Draw one year of the heatmap: header, squares and month labels.

    Args:
        ctx: Drawing context
        year: Year to draw
        data: Dataset holding the daily contributions
        theme: Palette
        offset_x: Left edge of the block
        offset_y: Top of the month label row
        font_face: Font family for all text
        today: Current date

    Returns:
        The grid that was drawn
    """
    grid = build_calendar_grid(year, data, today=today)

    ctx.text_baseline = "hanging"
    ctx.fill_style = theme.text
    ctx.set_font(10, font_face)
    ctx.fill_text(
        format_year_header(year, today),
        offset_x,
        offset_y - YEAR_LABEL_OFFSET,
    )

    for row, cells in enumerate(grid.rows):
        for column, cell in enumerate(cells):
            # No record means no data, which is not the same as a zero count
            if cell.date > grid.cutoff or cell.contribution is None:
                continue
            ctx.fill_style = theme.grade(cell.contribution.intensity)
            x, y = cell_position(offset_x, offset_y, column, row)
            ctx.fill_rect(x, y, BOX_WIDTH, BOX_WIDTH)

    ctx.fill_style = theme.meta
    for column, label in month_label_columns(grid):
        ctx.fill_text(label, offset_x + CELL_STRIDE * column, offset_y)

    return grid


#endregion
