"""Reduce LCOV records to per-file and total coverage metrics."""

from __future__ import annotations

from collections.abc import Iterable

from lcovgate.coverage.models import (
    CoverageMetric,
    CoverageMetrics,
    CoverageRecord,
    CoverageSummary,
)


def metric_from_counts(total: int, covered: int) -> CoverageMetric:
    """Build a metric; a kind with nothing to measure counts as fully covered."""
    percentage = (covered / total * 100.0) if total > 0 else 100.0
    return CoverageMetric(total=total, covered=covered, percentage=percentage)


def record_metrics(record: CoverageRecord) -> CoverageMetrics:
    """Metrics for one record, from its reported found/hit counts."""
    return CoverageMetrics(
        lines=metric_from_counts(record.lines.found, record.lines.hit),
        functions=metric_from_counts(record.functions.found, record.functions.hit),
        branches=metric_from_counts(record.branches.found, record.branches.hit),
    )


def summarize(records: Iterable[CoverageRecord]) -> CoverageSummary:
    """Aggregate records into a CoverageSummary.

    A path that appears more than once keeps only its last record in
    ``files``. Totals are summed over every record and their percentages
    recomputed from the sums rather than averaged.
    """
    files: dict[str, CoverageMetrics] = {}
    lines_total = lines_covered = 0
    functions_total = functions_covered = 0
    branches_total = branches_covered = 0

    for record in records:
        metrics = record_metrics(record)
        files[record.file] = metrics

        lines_total += metrics.lines.total
        lines_covered += metrics.lines.covered
        functions_total += metrics.functions.total
        functions_covered += metrics.functions.covered
        branches_total += metrics.branches.total
        branches_covered += metrics.branches.covered

    total = CoverageMetrics(
        lines=metric_from_counts(lines_total, lines_covered),
        functions=metric_from_counts(functions_total, functions_covered),
        branches=metric_from_counts(branches_total, branches_covered),
    )
    return CoverageSummary(total=total, files=files)
