"""Per-location summary table HTML renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from temperature_fusion.renderers import render_template
from temperature_fusion.renderers.chart import unit_symbol
from temperature_fusion.summary import summaries_to_dict

if TYPE_CHECKING:
    from temperature_fusion.summary import LocationSummary


def build_summary_table_html(summaries: list[LocationSummary]) -> str:
    """Build the comparison table (one row per location).

    Returns:
        Rendered HTML table, or an empty-state message if there is no data.
    """
    rows = summaries_to_dict(summaries)
    symbol = unit_symbol(summaries[0].unit) if summaries else ""
    return render_template("summary_table.html.j2", rows=rows, symbol=symbol)
