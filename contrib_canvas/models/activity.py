#region Imports
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from contrib_canvas.utils.calendar import parse_date
#endregion


#region Exceptions


class InvalidDataset(ValueError):
    """Raised when an activity dataset is missing fields or malformed."""


#endregion


#region Data Classes


@dataclass(frozen=True)
class YearRange:
    """
    First and last day covered by a year entry.

    Attributes:
        start: First date of the range (usually January 1)
        end: Last date of the range (December 31, or the fetch date)
    """

    start: date
    end: date


@dataclass(frozen=True)
class Year:
    """
    Per-year summary supplied by the data source.

    Attributes:
        year: Four-digit year string (e.g., '2021')
        total: Number of contributions in that year
        range: Date range covered by the year
    """

    year: str
    total: int
    range: YearRange


@dataclass(frozen=True)
class Contribution:
    """
    Activity count for a single day.

    Attributes:
        date: Calendar day
        count: Number of contributions on that day
        intensity: Color bucket pre-classified by the data source (0-4)
    """

    date: date
    count: int
    intensity: int


@dataclass(frozen=True)
class ActivityDataset:
    """
    A user's contribution history.

    Attributes:
        years: Year summaries, in the order the data source lists them
        contributions: Daily records, at most one per date
    """

    years: tuple[Year, ...]
    contributions: tuple[Contribution, ...]
    _by_date: dict[date, Contribution] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "years", tuple(self.years))
        object.__setattr__(self, "contributions", tuple(self.contributions))

        by_date: dict[date, Contribution] = {}
        for contribution in self.contributions:
            if contribution.date in by_date:
                raise InvalidDataset(f"Duplicate contribution date: {contribution.date}")
            by_date[contribution.date] = contribution
        object.__setattr__(self, "_by_date", by_date)

    def contribution_for(self, day: date) -> Optional[Contribution]:
        """Get the contribution recorded for a day, or None if there is none."""
        return self._by_date.get(day)

    @classmethod
    def from_dict(cls, payload: Any) -> "ActivityDataset":
        """
        Build a dataset from its JSON representation.

        Expected shape (extra keys such as "color" are ignored):

            {
              "years": [{"year": "2021", "total": 5,
                         "range": {"start": "2021-01-01", "end": "2021-12-31"}}],
              "contributions": [{"date": "2021-01-01", "count": 5, "intensity": 2}]
            }

        Args:
            payload: Decoded JSON object

        Returns:
            ActivityDataset

        Raises:
            InvalidDataset: If any field is missing or malformed
        """
        if not isinstance(payload, Mapping):
            raise InvalidDataset("Dataset must be a JSON object")

        raw_years = payload.get("years")
        raw_contributions = payload.get("contributions")
        if not isinstance(raw_years, list):
            raise InvalidDataset("Dataset is missing a 'years' list")
        if not isinstance(raw_contributions, list):
            raise InvalidDataset("Dataset is missing a 'contributions' list")

        years = tuple(_parse_year(entry, i) for i, entry in enumerate(raw_years))
        contributions = tuple(
            _parse_contribution(entry, i) for i, entry in enumerate(raw_contributions)
        )
        return cls(years=years, contributions=contributions)


#endregion


#region Functions


def coerce_dataset(value: Any) -> ActivityDataset:
    """
    Accept either a dataset or its JSON representation.

    Args:
        value: ActivityDataset or mapping in the from_dict shape

    Returns:
        ActivityDataset

    Raises:
        InvalidDataset: If value is neither (including None)
    """
    if isinstance(value, ActivityDataset):
        return value
    if isinstance(value, Mapping):
        return ActivityDataset.from_dict(value)
    raise InvalidDataset(
        f"Expected an activity dataset, got {type(value).__name__}"
    )


def _parse_year(entry: Any, index: int) -> Year:
    if not isinstance(entry, Mapping):
        raise InvalidDataset(f"years[{index}] must be an object")

    year = entry.get("year")
    if isinstance(year, int) and not isinstance(year, bool):
        year = str(year)
    if not isinstance(year, str) or len(year) != 4 or not year.isdigit():
        raise InvalidDataset(f"years[{index}].year must be a four-digit year, got {year!r}")

    total = _non_negative_int(entry.get("total"), f"years[{index}].total")

    raw_range = entry.get("range")
    if not isinstance(raw_range, Mapping):
        raise InvalidDataset(f"years[{index}].range must be an object")
    start = _date_field(raw_range.get("start"), f"years[{index}].range.start")
    end = _date_field(raw_range.get("end"), f"years[{index}].range.end")

    return Year(year=year, total=total, range=YearRange(start=start, end=end))


def _parse_contribution(entry: Any, index: int) -> Contribution:
    if not isinstance(entry, Mapping):
        raise InvalidDataset(f"contributions[{index}] must be an object")

    day = _date_field(entry.get("date"), f"contributions[{index}].date")
    count = _non_negative_int(entry.get("count"), f"contributions[{index}].count")
    intensity = _non_negative_int(entry.get("intensity", 0), f"contributions[{index}].intensity")
    return Contribution(date=day, count=count, intensity=intensity)


def _date_field(value: Any, name: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        raise InvalidDataset(f"{name}: {e}") from e


def _non_negative_int(value: Any, name: str) -> int:
    # Some APIs serialize intensity as a string ("2")
    if isinstance(value, str) and value.isdigit():
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidDataset(f"{name} must be a non-negative integer, got {value!r}")
    return value


#endregion
