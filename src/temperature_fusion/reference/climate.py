"""Monthly average temperatures for two cities, published in different units.

Oakland's averages are reported in Fahrenheit, Tangiers' in Celsius. Plotted
side by side without conversion, Tangiers looks roughly 40 degrees colder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from temperature_fusion.schemas import SourceMetadata
from temperature_fusion.tables import measurement_series

if TYPE_CHECKING:
    import pandas as pd

# January through December
OAKLAND_TEMPS_F: tuple[float, ...] = (
    50.6, 53.4, 55.3, 57.5, 60.4, 63.4, 64.5, 65.5, 66.1, 62.9, 56.3, 50.8,
)  # fmt: skip

TANGIERS_TEMPS_C: tuple[float, ...] = (
    16.2, 16.8, 18.3, 19.4, 22.0, 24.8, 27.5, 28.0, 26.4, 23.5, 19.6, 17.1,
)  # fmt: skip

OAKLAND_METADATA = SourceMetadata(
    source="US National Weather Service",
    measurement_type="average temperature",
    measurement_units="fahrenheit",
    measurement_freq="monthly",
    sensor_type="weather station",
)

TANGIERS_METADATA = SourceMetadata(
    source="Direction Generale de la Meteorologie",
    measurement_type="average temperature",
    measurement_units="celsius",
    measurement_freq="monthly",
    sensor_type="weather station",
)


def load_sample_sources() -> list[tuple[pd.DataFrame, SourceMetadata]]:
    """Return fresh (series, metadata) pairs: Oakland first, then Tangiers."""
    return [
        (measurement_series("Oakland", OAKLAND_TEMPS_F), OAKLAND_METADATA),
        (measurement_series("Tangiers", TANGIERS_TEMPS_C), TANGIERS_METADATA),
    ]
