"""Monthly temperature line chart (inline SVG).

One polyline per location, months on the x axis, temperature on the y axis.
The axis is labelled with the table's single unit; a table that still mixes
units is rejected rather than plotted.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from temperature_fusion.conversion import detect_unit
from temperature_fusion.renderers import render_template
from temperature_fusion.tables import LOCATION, MONTHS, TEMP, require_columns

if TYPE_CHECKING:
    import pandas as pd

# Month abbreviations for x-axis labels (index 1 = Jan)
_MONTH_ABBREVS = [
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# Line colors, assigned to locations in first-appearance order
_PALETTE = ["#d95f02", "#1b9e77", "#7570b3", "#e7298a", "#66a61e", "#e6ab02"]

_UNIT_SYMBOLS = {"celsius": "°C", "fahrenheit": "°F"}


def unit_symbol(unit: str) -> str:
    """Return a display symbol for a unit label (falls back to the label)."""
    return _UNIT_SYMBOLS.get(unit.lower(), unit)


def build_temperature_chart_html(fused: pd.DataFrame, title: str = "") -> str:
    """Build the monthly temperature SVG chart.

    Args:
        fused: Table with ``months``, ``temp``, ``location`` and a uniform
            ``measurement_units`` column.
        title: Optional heading shown above the chart.

    Returns:
        Rendered HTML string with inline SVG chart.

    Raises:
        InconsistentUnitsError: If the table mixes units.
    """
    require_columns(fused, (MONTHS, TEMP, LOCATION))
    unit = detect_unit(fused) or ""
    symbol = unit_symbol(unit)

    # SVG dimensions
    svg_width = 760
    svg_height = 340
    margin_left = 55
    margin_top = 25
    margin_right = 110  # Space for the legend
    margin_bottom = 30
    plot_right = svg_width - margin_right
    plot_bottom = svg_height - margin_bottom
    plot_width = plot_right - margin_left
    plot_height = plot_bottom - margin_top

    temps = fused[TEMP].astype(float).tolist()
    y_min, y_max = _axis_range(temps)

    def x_for_month(month: int) -> float:
        """Convert a month ordinal to SVG x coordinate."""
        return margin_left + (month - 1) / 11.0 * plot_width

    def y_for_temp(temp: float) -> float:
        """Convert a temperature to SVG y coordinate (inverted)."""
        return plot_bottom - (temp - y_min) / (y_max - y_min) * plot_height

    # Y-axis ticks
    n_ticks = 5
    y_ticks = []
    for i in range(n_ticks + 1):
        val = y_min + (y_max - y_min) * i / n_ticks
        y_ticks.append({"y": round(y_for_temp(val), 1), "label": f"{val:.0f}"})

    x_labels = [
        {"x": round(x_for_month(month), 1), "text": _MONTH_ABBREVS[month]}
        for month in range(1, 13)
    ]

    lines = _build_lines(fused, x_for_month, y_for_temp)
    for i, line in enumerate(lines):
        line["legend_y"] = margin_top + 10 + i * 18

    return render_template(
        "temperature_chart.html.j2",
        title=title,
        unit=unit,
        symbol=symbol,
        svg_width=svg_width,
        svg_height=svg_height,
        margin_left=margin_left,
        margin_top=margin_top,
        plot_right=plot_right,
        plot_bottom=plot_bottom,
        y_ticks=y_ticks,
        x_labels=x_labels,
        lines=lines,
    )


def _build_lines(
    fused: pd.DataFrame,
    x_fn: Any,
    y_fn: Any,
) -> list[dict[str, Any]]:
    """Build one SVG polyline entry per location."""
    lines = []
    for i, (location, rows) in enumerate(fused.groupby(LOCATION, sort=False)):
        points = " ".join(
            f"{x_fn(int(month)):.1f},{y_fn(float(temp)):.1f}"
            for month, temp in zip(rows[MONTHS], rows[TEMP], strict=True)
        )
        lines.append(
            {
                "label": str(location),
                "points": points,
                "color": _PALETTE[i % len(_PALETTE)],
            }
        )
    return lines


def _axis_range(temps: list[float]) -> tuple[float, float]:
    """Pad the data range out to multiples of ten for axis scaling."""
    if not temps:
        return 0.0, 100.0
    low = math.floor(min(temps) / 10) * 10
    high = math.ceil(max(temps) / 10) * 10
    if high == low:
        high = low + 10
    return float(low), float(high)
