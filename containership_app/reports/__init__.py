"""
Reporting utilities (text and tabular manifest) for container ships.
"""

from containership_app.reports.simple_text_report import (
    build_container_summary_text,
    build_ship_summary_text,
)
from containership_app.reports.manifest_report import (
    MANIFEST_COLUMNS,
    build_manifest_frame,
    manifest_totals,
)

__all__ = [
    "build_container_summary_text",
    "build_ship_summary_text",
    "MANIFEST_COLUMNS",
    "build_manifest_frame",
    "manifest_totals",
]
