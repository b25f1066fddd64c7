"""Temperature unit conversion for measurement tables.

Formulas:

    F = C * 9/5 + 32
    C = (F - 32) * 5/9

A table's unit is read from its ``measurement_units`` column, which must hold
one value for every row. Conversion returns a new table; the input is never
modified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from temperature_fusion.errors import ConversionError, InconsistentUnitsError
from temperature_fusion.schemas import TemperatureUnit
from temperature_fusion.tables import TEMP, UNITS, require_columns

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit. Also accepts a pandas Series."""
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius. Also accepts a pandas Series."""
    return (fahrenheit - 32) * 5 / 9


_CONVERTERS: dict[tuple[TemperatureUnit, TemperatureUnit], Callable[[float], float]] = {
    (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT): celsius_to_fahrenheit,
    (TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS): fahrenheit_to_celsius,
}


def parse_unit(value: str | TemperatureUnit) -> TemperatureUnit:
    """Resolve a unit label (case-insensitive) to a TemperatureUnit.

    Raises:
        ConversionError: If the label is not a supported temperature unit.
    """
    if isinstance(value, TemperatureUnit):
        return value
    try:
        return TemperatureUnit(str(value).strip().lower())
    except ValueError:
        raise ConversionError(f"unsupported unit {value!r}") from None


def detect_unit(table: pd.DataFrame) -> str | None:
    """Return the single unit label shared by every row of ``table``.

    Labels are compared stripped and lower-cased.

    Returns:
        The unit label, or None for an empty table.

    Raises:
        MissingColumnsError: If there is no ``measurement_units`` column.
        InconsistentUnitsError: If rows disagree on the unit.
    """
    require_columns(table, (UNITS,))
    labels = table[UNITS].astype(str).str.strip().str.lower().unique().tolist()
    if not labels:
        return None
    if len(labels) > 1:
        raise InconsistentUnitsError(sorted(labels))
    return labels[0]


def convert_units(table: pd.DataFrame, target_unit: str | TemperatureUnit) -> pd.DataFrame:
    """Return a copy of ``table`` with temperatures expressed in ``target_unit``.

    | detected   | target     | result                                  |
    |------------|------------|-----------------------------------------|
    | celsius    | fahrenheit | temp * 9/5 + 32, units -> fahrenheit    |
    | fahrenheit | celsius    | (temp - 32) * 5/9, units -> celsius     |
    | X          | X          | temps unchanged, units label -> X       |
    | other      | any        | ConversionError                         |

    Args:
        table: DataFrame with ``temp`` and ``measurement_units`` columns.
        target_unit: ``"celsius"`` or ``"fahrenheit"`` (any case).

    Returns:
        New DataFrame. Values are not rounded.

    Raises:
        MissingColumnsError: If ``temp`` or ``measurement_units`` is absent.
        ConversionError: If the detected or target unit is unsupported.
        InconsistentUnitsError: If the table mixes units.
    """
    require_columns(table, (TEMP, UNITS))
    target = parse_unit(target_unit)

    detected_label = detect_unit(table)
    if detected_label is None:
        logger.debug("Empty table, nothing to convert to %s", target)
        return table.copy()

    detected = parse_unit(detected_label)
    if detected is target:
        logger.debug("Table already in %s, passing through %d rows", target, len(table))
        passed = table.copy()
        passed[UNITS] = target.value
        return passed

    logger.debug("Converting %d rows from %s to %s", len(table), detected, target)
    converted = table.copy()
    converted[TEMP] = _CONVERTERS[(detected, target)](converted[TEMP].astype(float))
    converted[UNITS] = target.value
    return converted
