"""
Prefect flows.

Flows:
- report: fuse the sample sources and write an HTML comparison page

Usage (local):
    python -m temperature_fusion.flows.report

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-report/default'
"""
