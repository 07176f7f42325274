"""
Report section builders.

Each builder is a pure function of its inputs and the formatting mode and
returns one ReportSection. Wording and column layout are part of the
report's contract: callers may parse them.
"""

from __future__ import annotations

from dataclasses import dataclass

from pysigma.core.formatting import FormattingMode, format_correlation, format_number
from pysigma.core.thresholds import DEFAULT_THRESHOLDS, ReportThresholds
from pysigma.descriptive._classify import CorrelationSign, CorrelationStrength
from pysigma.descriptive.solution import StatisticsSolution
from pysigma.regression.kinds import RegressionKind
from pysigma.regression.solution import Diagnostic, DiagnosticReason, TrendSolution


@dataclass(frozen=True)
class ReportSection:
    """
    A named block of report lines.

    `separated` sections are preceded by a blank line when rendered after
    another section.
    """
    name: str
    lines: tuple[str, ...]
    separated: bool = True

    def __bool__(self) -> bool:
        return bool(self.lines)


# =====================================================================
# Fixed wording
# =====================================================================

_TABLE_HEADER = (
    f"{'Index':<7} {'X':<10} {'Y':<10} {'X^2':<12} {'Y^2':<12} {'XY':<12}"
)

_SIGN_TEXT = {
    CorrelationSign.POSITIVE: "The correlation is positive.",
    CorrelationSign.NEGATIVE: "The correlation is negative.",
    CorrelationSign.NONE: "There is no pos/neg correlation.",
}

_STRENGTH_TEXT = {
    CorrelationStrength.PERFECT: "Perfect correlation.",
    CorrelationStrength.STRONG: "Strong correlation.",
    CorrelationStrength.MODERATE: "Moderate correlation.",
    CorrelationStrength.WEAK: "Weak correlation.",
    CorrelationStrength.NONE: "There is no spectrum correlation.",
}

_EQUATION_LABELS = {
    RegressionKind.LINEAR: "Trendline equation",
    RegressionKind.QUADRATIC: "Quadratic Trendline equation",
    RegressionKind.EXPONENTIAL: "Exponential equation",
    RegressionKind.POWER: "Power equation",
}


# =====================================================================
# Statistics sections
# =====================================================================

def table_section(
    stats: StatisticsSolution,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> ReportSection:
    """Header plus one row per sample, 1-based index, input order."""
    def fmt(value: float) -> str:
        return format_number(value, mode, thresholds=thresholds)

    lines = [_TABLE_HEADER]
    for row in stats.rows:
        lines.append(
            f"{row.index + 1:<7} {fmt(row.x):<10} {fmt(row.y):<10} "
            f"{fmt(row.x2):<12} {fmt(row.y2):<12} {fmt(row.xy):<12}"
        )
    return ReportSection('table', tuple(lines), separated=False)


def sums_section(
    stats: StatisticsSolution,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> ReportSection:
    """Σx, Σy, Σx², Σy², Σxy and n."""
    s = stats.sums
    lines = [
        f"Σx = {format_number(s.sum_x, mode, thresholds=thresholds)}",
        f"Σy = {format_number(s.sum_y, mode, thresholds=thresholds)}",
        f"Σx² = {format_number(s.sum_x2, mode, thresholds=thresholds)}",
        f"Σy² = {format_number(s.sum_y2, mode, thresholds=thresholds)}",
        f"Σxy = {format_number(s.sum_xy, mode, thresholds=thresholds)}",
        f"n = {s.n}",
    ]
    if not s.is_finite():
        lines.append("Some sums are undefined: the values are too large to represent.")
    return ReportSection('sums', tuple(lines))


def correlation_section(
    stats: StatisticsSolution,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> ReportSection:
    """r and r² at fixed precision, then sign and strength sentences."""
    if stats.r is None:
        if stats.r_denominator == 0:
            line = "r is undefined (denominator for r is zero)."
        else:
            line = "r is undefined (the correlation is not a finite number)."
        return ReportSection('correlation', (line,), separated=False)

    r = stats.r
    lines = (
        f"r = {format_correlation(r, thresholds=thresholds)}",
        f"r² = {format_correlation(r * r, thresholds=thresholds)}",
        _SIGN_TEXT[stats.sign],
        _STRENGTH_TEXT[stats.strength],
    )
    return ReportSection('correlation', lines, separated=False)


def distribution_section(
    stats: StatisticsSolution,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> ReportSection:
    """Mean and population standard deviation of y."""
    lines = (
        f"Mean of Y: {format_number(stats.mean_y, mode, thresholds=thresholds)}",
        f"Standard Deviation of Y: {format_number(stats.sd_y, mode, thresholds=thresholds)}",
    )
    return ReportSection('distribution', lines)


def outlier_section(
    stats: StatisticsSolution,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> ReportSection:
    """Flagged samples in ascending index order, 0-based."""
    if not stats.outliers:
        return ReportSection('outliers', ("No outliers detected.",), separated=False)

    lines = ["Outliers detected at the following indices (0-based):"]
    for o in stats.outliers:
        lines.append(
            f"Index {o.index}: "
            f"X = {format_number(o.x, mode, thresholds=thresholds)}, "
            f"Y = {format_number(o.y, mode, thresholds=thresholds)}"
        )
    return ReportSection('outliers', tuple(lines), separated=False)


# =====================================================================
# Trendline section
# =====================================================================

def render_diagnostic(
    diagnostic: Diagnostic,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Sentence explaining a diagnostic."""
    kind = diagnostic.kind.value
    reason = diagnostic.reason

    if reason is DiagnosticReason.NON_POSITIVE_VALUE:
        value = format_number(diagnostic.value, mode, thresholds=thresholds)
        return (
            f"Cannot perform {kind} regression: {diagnostic.variable} value at "
            f"index {diagnostic.index} is not positive ({value})."
        )
    if reason is DiagnosticReason.ZERO_DENOMINATOR:
        return (
            f"Cannot perform {kind} regression: denominator for b is zero "
            "(all X values may be the same)."
        )
    if reason is DiagnosticReason.ZERO_DETERMINANT:
        return f"Could not calculate {kind} regression (determinant is zero)."
    if reason is DiagnosticReason.INVALID_COEFFICIENT:
        if diagnostic.variable is None:
            return (
                f"Could not calculate {kind} regression: coefficients are not "
                "finite numbers (possibly due to data scale or input values)."
            )
        return (
            f"Could not calculate {kind} regression: invalid coefficient "
            f"{diagnostic.variable} (possibly due to data scale or input values)."
        )
    if reason is DiagnosticReason.UNDEFINED_VERTEX:
        if diagnostic.variable == 'a':
            return "Vertex: undefined (a = 0, the fitted curve is a straight line)."
        return "Vertex: undefined (the turning point is not a finite number)."
    raise ValueError(f"Unknown diagnostic reason: {reason!r}")


def trendline_section(
    trend: TrendSolution,
    mode: FormattingMode | str | bool = FormattingMode.ROUNDED,
    *,
    thresholds: ReportThresholds = DEFAULT_THRESHOLDS,
) -> ReportSection:
    """
    Equation, inverse formula, r² and vertex for the fitted model.

    An unfitted model yields only its diagnostics; an unfitted linear
    model yields an empty section, which the report leaves out.
    """
    def fmt(value: float) -> str:
        return format_number(value, mode, thresholds=thresholds)

    lines: list[str] = []
    if trend.is_fitted:
        equation = trend.equation(mode, thresholds=thresholds)
        lines.append(f"{_EQUATION_LABELS[trend.kind]}: {equation}")

        vertex = trend.vertex
        if vertex is not None:
            lines.append(
                f"Vertex: ({fmt(vertex.x)}, {fmt(vertex.y)}) - This is a {vertex.label}"
            )

        inverse = trend.inverse_formula(mode, thresholds=thresholds)
        if inverse is not None:
            lines.append(f"Solving for x: {inverse}")

        if trend.r_squared is not None:
            lines.append(f"r² for {trend.kind.value} fit: {fmt(trend.r_squared)}")

    lines.extend(
        render_diagnostic(d, mode, thresholds=thresholds) for d in trend.diagnostics
    )
    return ReportSection('trendline', tuple(lines))
