"""Threshold evaluation: compare a summary against configured minimums."""

from __future__ import annotations

from dataclasses import dataclass

from lcovgate.config.models import ThresholdConfig
from lcovgate.coverage.models import CoverageKind, CoverageMetrics, CoverageSummary
from lcovgate.coverage.report import format_percentage


@dataclass(frozen=True, slots=True)
class ThresholdResult:
    """Verdict of a threshold check. Failures are ordered, totals first."""

    passed: bool
    failures: tuple[str, ...] = ()


def format_threshold(value: float) -> str:
    """Render a threshold the way it was most likely written: 80, 80.5."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _check_metrics(
    metrics: CoverageMetrics, config: ThresholdConfig, prefix: str = ""
) -> list[str]:
    failures = []
    for kind in CoverageKind:
        threshold = config.threshold(kind)
        if threshold is None:
            continue
        percentage = metrics[kind].percentage
        if percentage < threshold:
            failures.append(
                f"{prefix}{kind.label} coverage {format_percentage(percentage, 2)}% "
                f"is below threshold {format_threshold(threshold)}%"
            )
    return failures


def check_thresholds(summary: CoverageSummary, config: ThresholdConfig) -> ThresholdResult:
    """Check summary totals, and every file when ``per_file`` is set.

    A percentage equal to its threshold passes.
    """
    failures = _check_metrics(summary.total, config)

    if config.per_file:
        for path, metrics in summary.files.items():
            failures.extend(_check_metrics(metrics, config, prefix=f"File {path}: "))

    return ThresholdResult(passed=not failures, failures=tuple(failures))
