"""LCOV coverage parsing, aggregation, threshold checks and reporting.

Pipeline:
    from lcovgate.coverage import parse_lcov, summarize, check_thresholds, format_summary

    records = parse_lcov(text)
    summary = summarize(records)
    result = check_thresholds(summary, config)
    print(format_summary(summary))
"""

from lcovgate.coverage.models import (
    BranchDetail,
    BranchSection,
    CoverageKind,
    CoverageMetric,
    CoverageMetrics,
    CoverageRecord,
    CoverageSummary,
    FunctionDetail,
    FunctionSection,
    LineDetail,
    LineSection,
)
from lcovgate.coverage.parser import parse_lcov
from lcovgate.coverage.report import format_summary
from lcovgate.coverage.summary import metric_from_counts, summarize
from lcovgate.coverage.thresholds import ThresholdResult, check_thresholds

__all__ = [
    # Models
    "BranchDetail",
    "BranchSection",
    "CoverageKind",
    "CoverageMetric",
    "CoverageMetrics",
    "CoverageRecord",
    "CoverageSummary",
    "FunctionDetail",
    "FunctionSection",
    "LineDetail",
    "LineSection",
    # Pipeline
    "parse_lcov",
    "summarize",
    "metric_from_counts",
    "check_thresholds",
    "ThresholdResult",
    "format_summary",
]
