"""Coverage data model.

Two layers:
- Records: one per ``SF`` block of an LCOV report, counts kept exactly as
  reported.
- Metrics: (total, covered, percentage) per coverage kind, per file and
  for the whole report.

Everything here is an immutable value object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CoverageKind(str, Enum):
    """The three measured dimensions, in reporting order."""

    LINES = "lines"
    FUNCTIONS = "functions"
    BRANCHES = "branches"

    @property
    def label(self) -> str:
        """Display name used in failure messages (e.g. 'Lines')."""
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class LineDetail:
    """``DA`` entry: hit count for one line."""

    line: int
    hit: int


@dataclass(frozen=True, slots=True)
class FunctionDetail:
    """``FN``/``FNDA`` entry."""

    name: str
    line: int
    hit: int


@dataclass(frozen=True, slots=True)
class BranchDetail:
    """``BRDA`` entry. ``taken`` is 0 when LCOV reports ``-``."""

    line: int
    block: int
    branch: int
    taken: int


@dataclass(frozen=True, slots=True)
class LineSection:
    found: int = 0
    hit: int = 0
    details: tuple[LineDetail, ...] = ()


@dataclass(frozen=True, slots=True)
class FunctionSection:
    found: int = 0
    hit: int = 0
    details: tuple[FunctionDetail, ...] = ()


@dataclass(frozen=True, slots=True)
class BranchSection:
    found: int = 0
    hit: int = 0
    details: tuple[BranchDetail, ...] = ()


@dataclass(frozen=True, slots=True)
class CoverageRecord:
    """Coverage for a single source file as reported by LCOV.

    ``found``/``hit`` on each section come straight from ``LF``/``LH``,
    ``FNF``/``FNH`` and ``BRF``/``BRH`` and may disagree with the number
    of details.
    """

    file: str
    title: str | None = None
    lines: LineSection = field(default_factory=LineSection)
    functions: FunctionSection = field(default_factory=FunctionSection)
    branches: BranchSection = field(default_factory=BranchSection)


@dataclass(frozen=True, slots=True)
class CoverageMetric:
    """Coverage of one kind: measurable units, units hit, percent hit."""

    total: int
    covered: int
    percentage: float


@dataclass(frozen=True, slots=True)
class CoverageMetrics:
    """Lines, functions and branches metrics for one file or the total."""

    lines: CoverageMetric
    functions: CoverageMetric
    branches: CoverageMetric

    def __getitem__(self, kind: CoverageKind) -> CoverageMetric:
        metric: CoverageMetric = getattr(self, kind.value)
        return metric


@dataclass(frozen=True, slots=True)
class CoverageSummary:
    """Aggregate coverage for a report.

    ``files`` is keyed by source path in report order; ``total`` is summed
    over all records with percentages recomputed from the sums.
    """

    total: CoverageMetrics
    files: dict[str, CoverageMetrics] = field(default_factory=dict)
