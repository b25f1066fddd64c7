"""
Domain models for temperature fusion.

Pydantic models describing where a measurement series came from. Tables
themselves are pandas DataFrames (see ``tables.py``); these records are
broadcast onto every row of the series they describe.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Units
# =============================================================================


class TemperatureUnit(StrEnum):
    """Temperature units the converter understands."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


# =============================================================================
# Source metadata
# =============================================================================


class SourceMetadata(BaseModel):
    """Provenance of one measurement series.

    ``measurement_units`` is kept as a plain string so that a source reporting
    an unsupported unit can still be described; the converter rejects it.
    """

    model_config = {"str_strip_whitespace": True, "frozen": True}

    source: str = Field(..., description="Who published the readings")
    measurement_type: str = Field(..., description="What was measured (e.g. average temperature)")
    measurement_units: str = Field(..., description="Unit label, e.g. celsius or fahrenheit")
    measurement_freq: str = Field(default="", description="Sampling frequency (informational)")
    sensor_type: str = Field(default="", description="Instrument kind (informational)")

    @field_validator("measurement_units")
    @classmethod
    def _normalize_units(cls, value: str) -> str:
        return value.strip().lower()

    def as_columns(self) -> dict[str, str]:
        """Return the metadata as a column-name -> value mapping."""
        return self.model_dump()
