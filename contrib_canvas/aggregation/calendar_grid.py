#region Imports
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from contrib_canvas.config.settings import GRID_DAYS_PER_WEEK
from contrib_canvas.models.activity import ActivityDataset, Contribution, Year
from contrib_canvas.utils.calendar import shift_to_weekday, week_start
#endregion


#region Data Classes


@dataclass(frozen=True)
class GridCell:
    """
    One weekday slot of the heatmap.

    Attributes:
        date: Calendar day of the slot
        contribution: Record for that day, None when there is no data
    """

    date: date
    contribution: Optional[Contribution] = None


@dataclass
class CalendarGrid:
    """
    Weekday-by-week layout of one year.

    Attributes:
        rows: Seven rows (Sunday..Saturday), each with one cell per week column
        cutoff: Last drawable day (today for the current year, year end otherwise)
    """

    rows: list[list[GridCell]]
    cutoff: date

    @property
    def first_row(self) -> list[GridCell]:
        """Sunday row, one cell per week column."""
        return self.rows[0]

    @property
    def week_count(self) -> int:
        """Number of week columns."""
        return len(self.rows[0])

    @property
    def total_count(self) -> int:
        """Sum of counts across every attached contribution."""
        return sum(
            cell.contribution.count
            for row in self.rows
            for cell in row
            if cell.contribution is not None
        )
#endregion


#region Functions


def resolve_cutoff(year: Year, today: date) -> date:
    """
    Get the last drawable day of a year.

    Args:
        year: Year summary
        today: Current date

    Returns:
        today when year is the current year, otherwise the end of its range
    """
    if year.year == str(today.year):
        return today
    return year.range.end


def build_calendar_grid(
    year: Year,
    data: ActivityDataset,
    today: Optional[date] = None
) -> CalendarGrid:
    """
    Lay out one year of contributions as a 7 x N grid.

    Columns are Sunday-started weeks. The grid is anchored on the Saturday
    on or before January 1 and starts the day after it, so a year never
    spans more than 53 columns. When January 1 is itself a Saturday it is
    the anchor and has no cell. Columns are added one week at a time while
    their Sunday does not pass the cutoff.

    Only days inside the target year and on/before the cutoff get a
    contribution attached.

    Args:
        year: Year to lay out
        data: Dataset holding the daily contributions
        today: Current date (defaults to the system date)

    Returns:
        CalendarGrid for that year
    """
    if today is None:
        today = date.today()

    cutoff = resolve_cutoff(year, today)
    year_number = int(year.year)
    jan_first = date(year_number, 1, 1)
    anchor = week_start(jan_first + timedelta(days=1)) - timedelta(days=1)

    def make_cell(day: date) -> GridCell:
        if day.year != year_number or day > cutoff:
            return GridCell(date=day)
        return GridCell(date=day, contribution=data.contribution_for(day))

    first_row: list[GridCell] = []
    next_date = anchor + timedelta(days=1)
    while next_date <= cutoff:
        first_row.append(make_cell(next_date))
        next_date += timedelta(weeks=1)

    rows = [first_row]
    for weekday in range(1, GRID_DAYS_PER_WEEK):
        rows.append([
            make_cell(shift_to_weekday(cell.date, weekday)) for cell in first_row
        ])

    return CalendarGrid(rows=rows, cutoff=cutoff)


#endregion
