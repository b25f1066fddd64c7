"""Temperature Fusion - combine measurement series reported in different units.

Architecture::

    schemas.py     SourceMetadata record and TemperatureUnit enum
    tables.py      Column names and measurement series constructor
    conversion.py  Unit detection and Celsius/Fahrenheit conversion
    fusion.py      Attach metadata, normalize units, concatenate
    summary.py     Per-location statistics over a fused table
    reference/     Sample sources (Oakland in F, Tangiers in C)
    renderers/     Pure data -> HTML (SVG chart, summary table)
    flows/         Prefect orchestration (build the comparison report)

Data flow: reference -> fusion (conversion) -> summary -> renderers -> site/
"""

__version__ = "0.1.0"

from temperature_fusion.conversion import convert_units, detect_unit
from temperature_fusion.errors import ConversionError, InconsistentUnitsError, MissingColumnsError
from temperature_fusion.fusion import AnnotatedSeries, fuse_datasets, fuse_many
from temperature_fusion.schemas import SourceMetadata, TemperatureUnit
from temperature_fusion.tables import measurement_series

__all__ = [
    "AnnotatedSeries",
    "ConversionError",
    "InconsistentUnitsError",
    "MissingColumnsError",
    "SourceMetadata",
    "TemperatureUnit",
    "__version__",
    "convert_units",
    "detect_unit",
    "fuse_datasets",
    "fuse_many",
    "measurement_series",
]
