"""Per-location statistics over a fused dataset.

Only meaningful once every row shares one unit, so the summary refuses
tables that still mix units.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from temperature_fusion.conversion import detect_unit
from temperature_fusion.tables import LOCATION, TEMP, require_columns

if TYPE_CHECKING:
    import pandas as pd


@dataclass
class LocationSummary:
    """Temperature statistics for one location."""

    location: str
    unit: str
    count: int
    mean: float
    minimum: float
    maximum: float

    @property
    def spread(self) -> float:
        """Difference between the warmest and coldest reading."""
        return self.maximum - self.minimum


def summarize_by_location(fused: pd.DataFrame) -> list[LocationSummary]:
    """Summarize a fused table, one entry per location.

    Args:
        fused: Table with ``location``, ``temp`` and a uniform
            ``measurement_units`` column.

    Returns:
        LocationSummary list in order of each location's first row.

    Raises:
        InconsistentUnitsError: If the table mixes units.
    """
    require_columns(fused, (LOCATION, TEMP))
    unit = detect_unit(fused)
    if unit is None:
        return []

    grouped = fused.groupby(LOCATION, sort=False)[TEMP].agg(["count", "mean", "min", "max"])
    return [
        LocationSummary(
            location=str(location),
            unit=unit,
            count=int(row["count"]),
            mean=float(row["mean"]),
            minimum=float(row["min"]),
            maximum=float(row["max"]),
        )
        for location, row in grouped.iterrows()
    ]


def summaries_to_dict(summaries: list[LocationSummary]) -> list[dict[str, Any]]:
    """Serialize summaries to JSON-compatible dicts, rounded for display."""
    return [
        {
            "location": s.location,
            "unit": s.unit,
            "count": s.count,
            "mean": round(s.mean, 1),
            "min": round(s.minimum, 1),
            "max": round(s.maximum, 1),
            "spread": round(s.spread, 1),
        }
        for s in summaries
    ]
