"""
Text reports.

Public API:
    analyze(x, y, kind=..., mode=...)  - full pipeline, returns a Report
    build_report(statistics, trend)    - assemble a Report from parts

Section builders are exported for callers that need one block on its own.
"""

from pysigma.report.sections import (
    ReportSection,
    table_section,
    sums_section,
    correlation_section,
    distribution_section,
    outlier_section,
    trendline_section,
    render_diagnostic,
)
from pysigma.report.report import Report, build_report
from pysigma.report.solvers import analyze

__all__ = [
    "analyze",
    "build_report",
    "Report",
    "ReportSection",
    "table_section",
    "sums_section",
    "correlation_section",
    "distribution_section",
    "outlier_section",
    "trendline_section",
    "render_diagnostic",
]
