"""
Prefect flow for building the temperature comparison report.

Loads the reference sources, fuses them into one unit, and writes a static
HTML page with a chart and a per-location summary.

Run locally:
    python -m temperature_fusion.flows.report
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd
from prefect import flow, task
from prefect.cache_policies import NONE

from temperature_fusion.config import get_settings
from temperature_fusion.conversion import parse_unit
from temperature_fusion.fusion import fuse_many
from temperature_fusion.reference import load_sample_sources
from temperature_fusion.renderers import render_template
from temperature_fusion.renderers.chart import build_temperature_chart_html
from temperature_fusion.renderers.summary_table import build_summary_table_html
from temperature_fusion.schemas import SourceMetadata, TemperatureUnit
from temperature_fusion.summary import summarize_by_location

REPORT_TITLE = "Monthly average temperature"


# =============================================================================
# Tasks
# =============================================================================


@task(name="load-sources", cache_policy=NONE)
def load_sources() -> list[tuple[pd.DataFrame, SourceMetadata]]:
    """Load the reference (series, metadata) pairs."""
    return load_sample_sources()


@task(name="fuse-sources", cache_policy=NONE)
def fuse_sources(
    sources: list[tuple[pd.DataFrame, SourceMetadata]],
    target_unit: TemperatureUnit,
) -> pd.DataFrame:
    """Fuse all sources into one table in ``target_unit``."""
    return fuse_many(sources, target_unit)


@task(name="build-html", cache_policy=NONE)
def build_html(
    fused: pd.DataFrame,
    sources: list[SourceMetadata],
    target_unit: TemperatureUnit,
) -> str:
    """Render the full report page."""
    chart_html = build_temperature_chart_html(fused)
    summary_html = build_summary_table_html(summarize_by_location(fused))
    return render_template(
        "base.html.j2",
        title=REPORT_TITLE,
        updated=datetime.now().strftime("%Y-%m-%d %H:%M"),
        unit=target_unit.value,
        chart_html=chart_html,
        summary_html=summary_html,
        sources=sources,
    )


@task(name="write-report")
def write_report(html: str, output_dir: Path) -> Path:
    """Write HTML to the output directory."""
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-report", log_prints=True)
def build_report(
    target_unit: str | None = None,
    output_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Build the comparison report.

    Args:
        target_unit: Unit for every reported value. Defaults to the
            ``target_unit`` setting.
        output_dir: Destination directory. Defaults to the ``output_dir``
            setting.

    Raises:
        ConversionError: If a source cannot be converted to the target unit.
    """
    settings = get_settings()
    unit = parse_unit(target_unit) if target_unit is not None else settings.target_unit
    destination = output_dir if output_dir is not None else settings.output_dir

    print("Loading sources...")
    sources = load_sources()

    print(f"Fusing {len(sources)} sources into {unit}...")
    fused = fuse_sources(sources, unit)

    print("Building HTML...")
    html = build_html(fused, [meta for _, meta in sources], unit)

    print("Writing report...")
    output_path = write_report(html, destination)

    print(f"Report built: {output_path}")
    return {"rows": len(fused), "unit": unit.value, "output": str(output_path)}


if __name__ == "__main__":
    result = build_report()
    print(f"Flow complete: {result}")
