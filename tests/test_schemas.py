"""Tests for domain models and table constructors."""

from __future__ import annotations

import pydantic
import pytest

from temperature_fusion.errors import MissingColumnsError
from temperature_fusion.reference import load_sample_sources
from temperature_fusion.schemas import SourceMetadata, TemperatureUnit
from temperature_fusion.tables import measurement_series, require_columns


class TestSourceMetadata:
    """Tests for the SourceMetadata model."""

    def test_units_normalized(self) -> None:
        meta = SourceMetadata(
            source="NWS",
            measurement_type="average temperature",
            measurement_units="  Fahrenheit ",
        )
        assert meta.measurement_units == "fahrenheit"

    def test_unrecognized_units_allowed(self) -> None:
        """Unsupported units are described here and rejected at conversion time."""
        meta = SourceMetadata(source="lab", measurement_type="temp", measurement_units="Kelvin")
        assert meta.measurement_units == "kelvin"

    def test_informational_fields_optional(self) -> None:
        meta = SourceMetadata(source="s", measurement_type="t", measurement_units="celsius")
        assert meta.measurement_freq == ""
        assert meta.sensor_type == ""

    def test_required_fields(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SourceMetadata(source="s", measurement_type="t")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        meta = SourceMetadata(source="s", measurement_type="t", measurement_units="celsius")
        with pytest.raises(pydantic.ValidationError):
            meta.measurement_units = "fahrenheit"  # type: ignore[misc]

    def test_as_columns(self) -> None:
        meta = SourceMetadata(
            source="s",
            measurement_type="t",
            measurement_units="celsius",
            measurement_freq="monthly",
            sensor_type="station",
        )
        assert meta.as_columns() == {
            "source": "s",
            "measurement_type": "t",
            "measurement_units": "celsius",
            "measurement_freq": "monthly",
            "sensor_type": "station",
        }


class TestTemperatureUnit:
    """Tests for the TemperatureUnit enum."""

    def test_values(self) -> None:
        assert [u.value for u in TemperatureUnit] == ["celsius", "fahrenheit"]

    def test_str_comparison(self) -> None:
        assert TemperatureUnit.CELSIUS == "celsius"


class TestMeasurementSeries:
    """Tests for the measurement_series constructor."""

    def test_default_months(self) -> None:
        series = measurement_series("Oakland", [50.0, 51.0, 52.0])
        assert list(series.columns) == ["months", "temp", "location"]
        assert series["months"].tolist() == [1, 2, 3]
        assert series["location"].tolist() == ["Oakland"] * 3

    def test_explicit_months(self) -> None:
        series = measurement_series("Oakland", [50.0, 60.0], months=[6, 7])
        assert series["months"].tolist() == [6, 7]

    def test_temps_are_floats(self) -> None:
        series = measurement_series("Oakland", [50, 60])
        assert series["temp"].dtype == float

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="2 readings but 1 months"):
            measurement_series("Oakland", [50.0, 60.0], months=[1])

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_out_of_range(self, month: int) -> None:
        with pytest.raises(ValueError, match="between 1 and 12"):
            measurement_series("Oakland", [50.0], months=[month])

    def test_too_many_readings_for_default_months(self) -> None:
        with pytest.raises(ValueError):
            measurement_series("Oakland", [50.0] * 13)

    def test_empty_series_dtypes(self) -> None:
        series = measurement_series("Oakland", [])
        assert series.empty
        assert series["months"].dtype == "int64"
        assert series["temp"].dtype == "float64"


class TestRequireColumns:
    """Tests for column validation."""

    def test_lists_all_missing(self) -> None:
        series = measurement_series("Oakland", [50.0])
        with pytest.raises(MissingColumnsError) as exc_info:
            require_columns(series, ["temp", "source", "sensor_type"])
        assert exc_info.value.missing == ["source", "sensor_type"]

    def test_present_columns_pass(self) -> None:
        require_columns(measurement_series("Oakland", [50.0]), ["temp", "location"])


class TestSampleSources:
    """Tests for the bundled reference data."""

    def test_two_sources_in_different_units(self) -> None:
        (oakland, oakland_meta), (tangiers, tangiers_meta) = load_sample_sources()
        assert len(oakland) == 12
        assert len(tangiers) == 12
        assert oakland_meta.measurement_units == "fahrenheit"
        assert tangiers_meta.measurement_units == "celsius"
        assert tangiers["temp"].iloc[0] == 16.2

    def test_fresh_frames_each_call(self) -> None:
        first = load_sample_sources()[0][0]
        first.loc[0, "temp"] = -999.0
        assert load_sample_sources()[0][0].loc[0, "temp"] == 50.6
