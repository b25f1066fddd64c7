"""Fuse measurement series from sources that report in different units.

Each series is paired with exactly one SourceMetadata record, the metadata is
broadcast onto every row, every annotated table is converted to the shared
target unit, and only then are the tables concatenated. A conversion failure
on any input aborts the whole fusion.

Example::

    fused = fuse_datasets(oakland, oakland_meta, tangiers, tangiers_meta, "fahrenheit")
    assert (fused["measurement_units"] == "fahrenheit").all()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import pandas as pd

from temperature_fusion.conversion import convert_units, parse_unit
from temperature_fusion.schemas import SourceMetadata, TemperatureUnit
from temperature_fusion.tables import SERIES_COLUMNS, require_columns

logger = logging.getLogger(__name__)

DEFAULT_TARGET_UNIT = TemperatureUnit.FAHRENHEIT


@dataclass(frozen=True, eq=False)
class AnnotatedSeries:
    """One measurement series joined with the metadata that describes it."""

    metadata: SourceMetadata
    table: pd.DataFrame

    @classmethod
    def from_series(cls, series: pd.DataFrame, metadata: SourceMetadata) -> AnnotatedSeries:
        """Attach ``metadata`` to every row of ``series``.

        The input frame is copied, never modified. Metadata columns overwrite
        any same-named columns already on the series.

        Raises:
            MissingColumnsError: If the series lacks ``months``, ``temp``
                or ``location``.
        """
        require_columns(series, SERIES_COLUMNS)
        table = series.copy().assign(**metadata.as_columns())
        return cls(metadata=metadata, table=table)

    def __len__(self) -> int:
        return len(self.table)

    def to_unit(self, target_unit: str | TemperatureUnit) -> AnnotatedSeries:
        """Return a new AnnotatedSeries with temperatures in ``target_unit``."""
        target = parse_unit(target_unit)
        # The metadata unit is checked even when the table has no rows
        parse_unit(self.metadata.measurement_units)
        converted = convert_units(self.table, target)
        metadata = self.metadata.model_copy(update={"measurement_units": target.value})
        return AnnotatedSeries(metadata=metadata, table=converted)


def fuse_many(
    pairs: Iterable[tuple[pd.DataFrame, SourceMetadata]],
    target_unit: str | TemperatureUnit = DEFAULT_TARGET_UNIT,
) -> pd.DataFrame:
    """Fuse two or more (series, metadata) pairs into one table.

    Args:
        pairs: ``(series, metadata)`` tuples, in output order.
        target_unit: Unit every output row is expressed in.

    Returns:
        New DataFrame: the annotated, converted series concatenated in input
        order with a fresh 0..n-1 index.

    Raises:
        ValueError: If fewer than two pairs are given.
        ConversionError: If any series cannot be converted. No partial
            result is produced.
    """
    target = parse_unit(target_unit)
    pairs = list(pairs)
    if len(pairs) < 2:
        msg = f"Fusion needs at least two series, got {len(pairs)}"
        raise ValueError(msg)
    annotated = [AnnotatedSeries.from_series(series, meta) for series, meta in pairs]

    # All conversions finish before anything is concatenated
    normalized = [a.to_unit(target) for a in annotated]
    fused = pd.concat([n.table for n in normalized], ignore_index=True)

    logger.info(
        "Fused %d sources (%s) into %d rows in %s",
        len(normalized),
        ", ".join(n.metadata.source for n in normalized),
        len(fused),
        target,
    )
    return fused


def fuse_datasets(
    series1: pd.DataFrame,
    meta1: SourceMetadata,
    series2: pd.DataFrame,
    meta2: SourceMetadata,
    target_unit: str | TemperatureUnit = DEFAULT_TARGET_UNIT,
) -> pd.DataFrame:
    """Fuse two measurement series, normalizing both to ``target_unit``.

    Rows of ``series1`` come first, then rows of ``series2``, each in its
    original order. See ``fuse_many`` for errors.
    """
    return fuse_many([(series1, meta1), (series2, meta2)], target_unit)
