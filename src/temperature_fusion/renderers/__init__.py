"""Pure rendering functions: fused tables -> HTML strings.

All renderers follow the same pattern:
  - Input: a fused DataFrame or analysis dataclasses
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/report.py which orchestrates the rendering pipeline.

Public API:
  - chart: build_temperature_chart_html
  - summary_table: build_summary_table_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that ends in
   ``render_template("{name}.html.j2", ...)``.
2. Create the Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments; page chrome lives in ``base.html.j2``.
3. Pass the fragment to ``base.html.j2`` from ``flows/report.py``.
4. Add tests asserting the returned HTML contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
