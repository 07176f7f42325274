"""
The text report.

A Report is assembled from independently built sections and is immutable
once built. Section order is fixed: table, sums, correlation,
distribution, outliers, trendline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pysigma.core.formatting import FormattingMode, resolve_mode
from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds
from pysigma.descriptive.solution import StatisticsSolution
from pysigma.regression.solution import Diagnostic, TrendSolution
from pysigma.report.sections import (
    ReportSection,
    correlation_section,
    distribution_section,
    outlier_section,
    sums_section,
    table_section,
    trendline_section,
)


@dataclass(frozen=True)
class Report:
    """
    Final report for one analysis.

    Attributes:
        sections: Non-empty sections in report order
        statistics: The statistics the report was built from
        trend: The trendline fit the report was built from
        mode: Formatting mode used for every non-correlation number
    """
    sections: tuple[ReportSection, ...]
    statistics: StatisticsSolution
    trend: TrendSolution
    mode: FormattingMode

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """In-band notes from the trendline fit."""
        return self.trend.diagnostics

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.statistics.warnings + self.trend.warnings

    @property
    def text(self) -> str:
        """Rendered report, newline terminated."""
        lines: list[str] = []
        for section in self.sections:
            if section.separated and lines:
                lines.append("")
            lines.extend(section.lines)
        return "\n".join(lines) + "\n"

    def section(self, name: str) -> ReportSection | None:
        """Look up a section by name; None if absent."""
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def to_dict(self) -> dict[str, Any]:
        """
        Response envelope: report text plus the samples it describes.

        `regression_type` is the kind that was actually fitted, so an
        unrecognized request name appears as 'linear' rather than echoed.
        """
        design = self.statistics.design
        return {
            'text_output': self.text,
            'x': design.x.tolist(),
            'y': design.y.tolist(),
            'regression_type': self.trend.kind.value,
        }

    def __str__(self) -> str:
        return self.text


def build_report(
    statistics: StatisticsSolution,
    trend: TrendSolution,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> Report:
    """
    Assemble a Report from a statistics pass and a trendline fit.

    Raises:
        ValueError: If the two were computed from different sample counts
    """
    mode = resolve_mode(mode)
    if statistics.sums.n != trend.info['n']:
        raise ValueError(
            f"statistics (n={statistics.sums.n}) and trend "
            f"(n={trend.info['n']}) describe different samples"
        )

    sections = (
        table_section(statistics, mode, thresholds=thresholds),
        sums_section(statistics, mode, thresholds=thresholds),
        correlation_section(statistics, thresholds=thresholds),
        distribution_section(statistics, mode, thresholds=thresholds),
        outlier_section(statistics, mode, thresholds=thresholds),
        trendline_section(trend, mode, thresholds=thresholds),
    )
    return Report(
        sections=tuple(s for s in sections if s),
        statistics=statistics,
        trend=trend,
        mode=mode,
    )
