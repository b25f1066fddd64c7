"""Column layout and constructors for measurement tables.

A measurement series is a DataFrame with one row per month::

    months  temp  location
         1  50.6  Oakland
         2  53.4  Oakland

Annotation (see ``fusion.py``) adds the SourceMetadata fields as extra
columns repeated on every row.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pandas as pd

from temperature_fusion.errors import MissingColumnsError

MONTHS = "months"
TEMP = "temp"
LOCATION = "location"
UNITS = "measurement_units"

SERIES_COLUMNS = (MONTHS, TEMP, LOCATION)

FIRST_MONTH = 1
LAST_MONTH = 12


def measurement_series(
    location: str,
    temps: Sequence[float],
    months: Sequence[int] | None = None,
) -> pd.DataFrame:
    """Build a single-location measurement series.

    Args:
        location: Label repeated on every row.
        temps: Readings in time order.
        months: Month ordinals (1-12) for each reading. Defaults to
            ``1..len(temps)``.

    Returns:
        New DataFrame with ``months``, ``temp`` and ``location`` columns.

    Raises:
        ValueError: If ``months`` and ``temps`` differ in length or a month
            falls outside 1-12.
    """
    if months is None:
        months = list(range(FIRST_MONTH, FIRST_MONTH + len(temps)))
    if len(months) != len(temps):
        msg = f"Got {len(temps)} readings but {len(months)} months for {location!r}"
        raise ValueError(msg)

    bad = [m for m in months if not FIRST_MONTH <= m <= LAST_MONTH]
    if bad:
        msg = f"Months must be between {FIRST_MONTH} and {LAST_MONTH}, got {bad}"
        raise ValueError(msg)

    return pd.DataFrame(
        {
            MONTHS: list(months),
            TEMP: [float(t) for t in temps],
            LOCATION: [location] * len(temps),
        }
    ).astype({MONTHS: "int64", TEMP: "float64"})


def require_columns(table: pd.DataFrame, columns: Iterable[str]) -> None:
    """Raise MissingColumnsError unless every column is present."""
    missing = [c for c in columns if c not in table.columns]
    if missing:
        raise MissingColumnsError(missing)
