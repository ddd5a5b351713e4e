from datetime import date, timedelta

import pytest

from contrib_canvas.aggregation.calendar_grid import build_calendar_grid, resolve_cutoff
from contrib_canvas.config.settings import GRID_WEEKS
from contrib_canvas.models.activity import ActivityDataset
from contrib_canvas.utils.calendar import sunday_weekday
from contrib_canvas.visualization.heatmap import month_label_columns

PAST = date(2024, 5, 1)


def _year(dataset, name):
    return next(year for year in dataset.years if year.year == name)


@pytest.mark.parametrize("name", ["2021", "2023"])
def test_grid_total_matches_year_total(multi_year_dataset, name) -> None:
    year = _year(multi_year_dataset, name)

    grid = build_calendar_grid(year, multi_year_dataset, today=PAST)

    assert grid.total_count == year.total


def test_grid_has_seven_aligned_weekday_rows(multi_year_dataset) -> None:
    grid = build_calendar_grid(_year(multi_year_dataset, "2021"), multi_year_dataset, today=PAST)

    assert len(grid.rows) == 7
    assert grid.week_count == 53
    for weekday, row in enumerate(grid.rows):
        assert len(row) == grid.week_count
        for column, cell in enumerate(row):
            assert (cell.date.weekday() + 1) % 7 == weekday
            assert cell.date - grid.first_row[column].date == timedelta(days=weekday)


def test_first_column_is_the_week_of_january_first(multi_year_dataset) -> None:
    grid = build_calendar_grid(_year(multi_year_dataset, "2021"), multi_year_dataset, today=PAST)

    assert grid.first_row[0].date == date(2020, 12, 27)
    assert grid.rows[5][0].date == date(2021, 1, 1)
    assert grid.rows[5][0].contribution.count == 5


def test_january_first_on_a_saturday_anchors_the_grid(multi_year_dataset) -> None:
    grid = build_calendar_grid(_year(multi_year_dataset, "2022"), multi_year_dataset, today=PAST)

    assert grid.first_row[0].date == date(2022, 1, 2)
    assert grid.week_count == 52
    assert all(cell.date != date(2022, 1, 1) for row in grid.rows for cell in row)
    assert grid.total_count == 4


def test_leap_year_starting_on_saturday_fits_53_columns() -> None:
    dataset = ActivityDataset.from_dict({
        "years": [{"year": "2028", "total": 1, "range": {"start": "2028-01-01", "end": "2028-12-31"}}],
        "contributions": [{"date": "2028-12-31", "count": 1, "intensity": 4}],
    })

    grid = build_calendar_grid(dataset.years[0], dataset, today=PAST)

    assert grid.week_count == GRID_WEEKS
    last = grid.rows[0][-1]
    assert last.date == date(2028, 12, 31)
    assert last.contribution.count == 1


@pytest.mark.parametrize("year_number", range(1995, 2035))
def test_no_year_exceeds_53_columns(year_number) -> None:
    name = str(year_number)
    dataset = ActivityDataset.from_dict({
        "years": [{"year": name, "total": 0, "range": {"start": f"{name}-01-01", "end": f"{name}-12-31"}}],
        "contributions": [],
    })

    grid = build_calendar_grid(dataset.years[0], dataset, today=date(2100, 1, 1))

    assert grid.week_count <= GRID_WEEKS
    assert grid.rows[sunday_weekday(date(year_number, 12, 31))][-1].date == date(year_number, 12, 31)


def test_days_outside_the_year_get_no_contribution(multi_year_dataset) -> None:
    # 2022-01-01 has a record but falls in the last column of the 2021 grid
    grid = build_calendar_grid(_year(multi_year_dataset, "2021"), multi_year_dataset, today=PAST)

    next_year_cell = grid.rows[6][-1]
    assert next_year_cell.date == date(2022, 1, 1)
    assert next_year_cell.contribution is None


def test_zero_count_record_is_attached(multi_year_dataset) -> None:
    grid = build_calendar_grid(_year(multi_year_dataset, "2022"), multi_year_dataset, today=PAST)

    cells = [cell for row in grid.rows for cell in row if cell.date == date(2022, 7, 4)]
    assert len(cells) == 1
    assert cells[0].contribution is not None
    assert cells[0].contribution.count == 0


def test_builder_is_idempotent(multi_year_dataset) -> None:
    year = _year(multi_year_dataset, "2023")

    first = build_calendar_grid(year, multi_year_dataset, today=PAST)
    second = build_calendar_grid(year, multi_year_dataset, today=PAST)

    assert first == second


def test_current_year_is_cut_off_at_today(multi_year_dataset) -> None:
    year = _year(multi_year_dataset, "2023")
    today = date(2023, 3, 14)  # Tuesday

    grid = build_calendar_grid(year, multi_year_dataset, today=today)

    assert grid.cutoff == today
    assert grid.first_row[-1].date == date(2023, 3, 12)
    assert all(cell.contribution is None for row in grid.rows for cell in row if cell.date > today)
    assert grid.total_count == 10


def test_resolve_cutoff(multi_year_dataset) -> None:
    year = _year(multi_year_dataset, "2021")

    assert resolve_cutoff(year, date(2021, 6, 1)) == date(2021, 6, 1)
    assert resolve_cutoff(year, PAST) == date(2021, 12, 31)


def test_december_first_column_has_no_month_label(multi_year_dataset) -> None:
    grid = build_calendar_grid(_year(multi_year_dataset, "2021"), multi_year_dataset, today=PAST)

    labels = month_label_columns(grid)

    assert labels[0] == (1, "Jan")
    assert [name for _, name in labels] == [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ]


def test_january_first_column_is_labelled(multi_year_dataset) -> None:
    grid = build_calendar_grid(_year(multi_year_dataset, "2023"), multi_year_dataset, today=PAST)

    labels = month_label_columns(grid)

    assert labels[0] == (0, "Jan")
    assert len(labels) == 12
