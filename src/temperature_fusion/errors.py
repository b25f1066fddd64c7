"""Exceptions raised while normalizing and fusing measurement tables."""

from __future__ import annotations

CONVERSION_FAILED = "temperature conversion could not be applied"


class ConversionError(ValueError):
    """A table's temperature unit could not be converted to the target unit."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        msg = f"{CONVERSION_FAILED}: {detail}" if detail else CONVERSION_FAILED
        super().__init__(msg)


class InconsistentUnitsError(ConversionError):
    """A single table mixes more than one measurement unit."""

    def __init__(self, units: list[str]) -> None:
        self.units = units
        super().__init__(f"table mixes units {units!r}")


class MissingColumnsError(ValueError):
    """A table is missing columns an operation requires."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"table is missing required columns: {', '.join(missing)}")
