"""Tests for coverage/summary.py - record aggregation."""

from __future__ import annotations

import itertools

import pytest

from lcovgate.coverage import (
    BranchSection,
    CoverageMetric,
    CoverageRecord,
    FunctionSection,
    LineSection,
    metric_from_counts,
    parse_lcov,
    summarize,
)


def _rec(
    path: str,
    lines: tuple[int, int] = (0, 0),
    functions: tuple[int, int] = (0, 0),
    branches: tuple[int, int] = (0, 0),
) -> CoverageRecord:
    return CoverageRecord(
        file=path,
        lines=LineSection(found=lines[0], hit=lines[1]),
        functions=FunctionSection(found=functions[0], hit=functions[1]),
        branches=BranchSection(found=branches[0], hit=branches[1]),
    )


class TestMetricFromCounts:
    """Percentage rule."""

    def test_given_counts_when_built_then_percentage_computed(self) -> None:
        assert metric_from_counts(4, 1) == CoverageMetric(total=4, covered=1, percentage=25.0)

    @pytest.mark.parametrize("hit", [0, 3, -1])
    def test_given_zero_found_when_built_then_exactly_100(self, hit: int) -> None:
        """A kind with nothing to measure is fully covered, whatever hit says."""
        assert metric_from_counts(0, hit).percentage == 100


class TestSummarize:
    """Per-file and total aggregation."""

    def test_given_no_records_when_summarize_then_all_100(self) -> None:
        summary = summarize([])

        assert summary.files == {}
        for metric in (summary.total.lines, summary.total.functions, summary.total.branches):
            assert metric == CoverageMetric(total=0, covered=0, percentage=100.0)

    def test_given_records_when_summarize_then_per_file_metrics(self) -> None:
        summary = summarize([_rec("src/a.ts", lines=(10, 8), functions=(3, 2), branches=(4, 1))])

        file_metrics = summary.files["src/a.ts"]
        assert file_metrics.lines == CoverageMetric(10, 8, 80.0)
        assert file_metrics.functions.percentage == pytest.approx(200 / 3)
        assert file_metrics.branches == CoverageMetric(4, 1, 25.0)

    def test_given_files_when_summarize_then_total_from_sums_not_average(self) -> None:
        """1/1 and 1/3 give 50% overall, not the 66.7% average."""
        summary = summarize([_rec("a.ts", lines=(1, 1)), _rec("b.ts", lines=(3, 1))])

        assert summary.total.lines == CoverageMetric(total=4, covered=2, percentage=50.0)

    def test_given_files_when_summarize_then_order_preserved(self) -> None:
        summary = summarize([_rec("z.ts"), _rec("a.ts"), _rec("m.ts")])

        assert list(summary.files) == ["z.ts", "a.ts", "m.ts"]

    def test_given_any_order_when_summarize_then_same_totals(self) -> None:
        records = [
            _rec("a.ts", lines=(10, 7), functions=(2, 1), branches=(6, 2)),
            _rec("b.ts", lines=(5, 5), functions=(1, 1), branches=(0, 0)),
            _rec("c.ts", lines=(3, 0), functions=(4, 0), branches=(2, 2)),
        ]
        expected = summarize(records).total

        for perm in itertools.permutations(records):
            assert summarize(perm).total == expected

    def test_given_two_fully_covered_files_when_summarize_then_totals_100(self) -> None:
        text = (
            "SF:src/one.ts\nLF:2\nLH:2\nFNF:0\nFNH:0\nBRF:0\nBRH:0\nend_of_record\n"
            "SF:src/two.ts\nLF:2\nLH:2\nFNF:0\nFNH:0\nBRF:0\nBRH:0\nend_of_record\n"
        )

        summary = summarize(parse_lcov(text))

        assert summary.total.lines.percentage == 100
        assert summary.total.functions.percentage == 100
        assert summary.total.branches.percentage == 100
        assert set(summary.files) == {"src/one.ts", "src/two.ts"}

    def test_given_duplicate_path_when_summarize_then_last_block_wins(self) -> None:
        text = (
            "SF:src/dup.ts\nLF:10\nLH:1\nend_of_record\n"
            "SF:src/other.ts\nLF:1\nLH:1\nend_of_record\n"
            "SF:src/dup.ts\nLF:4\nLH:4\nend_of_record\n"
        )

        summary = summarize(parse_lcov(text))

        assert summary.files["src/dup.ts"].lines == CoverageMetric(4, 4, 100.0)
        assert list(summary.files) == ["src/dup.ts", "src/other.ts"]

    def test_given_generator_when_summarize_then_consumed_once(self) -> None:
        summary = summarize(_rec(p, lines=(2, 1)) for p in ("a.ts", "b.ts"))

        assert summary.total.lines == CoverageMetric(4, 2, 50.0)
