"""LCOV record parser.

LCOV format is a plain text format with records like:
- TN:<test name>
- SF:<source file path>
- FN:<line>,<name>
- FNDA:<hit count>,<name>
- FNF:<functions found>
- FNH:<functions hit>
- DA:<line>,<hit count>[,<checksum>]
- LF:<lines found>
- LH:<lines hit>
- BRDA:<line>,<block>,<branch>,<taken>
- BRF:<branches found>
- BRH:<branches hit>
- end_of_record

Parsing is tolerant: unknown tags, directives outside an ``SF`` block and
malformed numbers never raise. A record is only emitted on
``end_of_record``; trailing data without a terminator is dropped.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Any

from lcovgate.core.logging import get_logger
from lcovgate.coverage.models import (
    BranchDetail,
    BranchSection,
    CoverageRecord,
    FunctionDetail,
    FunctionSection,
    LineDetail,
    LineSection,
)

logger = get_logger(__name__)

END_OF_RECORD = "end_of_record"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: str) -> int:
    """Parse the leading integer of ``value``; 0 if there is none.

    Mirrors ``parseInt``: ``"12abc"`` is 12, ``"abc"`` is 0.
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        logger.debug("lcov_bad_integer", value=value)
        return 0
    return int(match.group(1))


@dataclass(slots=True)
class _Section:
    found: int = 0
    hit: int = 0
    details: list[Any] = field(default_factory=list)


@dataclass(slots=True)
class _Accumulator:
    """The record being assembled. Sections stay None until ``SF``."""

    title: str | None = None
    file: str | None = None
    lines: _Section | None = None
    functions: _Section | None = None
    branches: _Section | None = None

    def build(self, file: str) -> CoverageRecord:
        lines = self.lines or _Section()
        functions = self.functions or _Section()
        branches = self.branches or _Section()
        return CoverageRecord(
            file=file,
            title=self.title,
            lines=LineSection(lines.found, lines.hit, tuple(lines.details)),
            functions=FunctionSection(functions.found, functions.hit, tuple(functions.details)),
            branches=BranchSection(branches.found, branches.hit, tuple(branches.details)),
        )


@dataclass(slots=True)
class _ParseState:
    records: list[CoverageRecord] = field(default_factory=list)
    current: _Accumulator = field(default_factory=_Accumulator)


# =============================================================================
# Tag handlers
# =============================================================================

_Handler = Callable[[_Accumulator, str], None]


def _title(acc: _Accumulator, value: str) -> None:
    acc.title = value


def _source_file(acc: _Accumulator, value: str) -> None:
    acc.file = value
    acc.lines = _Section()
    acc.functions = _Section()
    acc.branches = _Section()


def _counter(section_name: str, attr: str) -> _Handler:
    def handler(acc: _Accumulator, value: str) -> None:
        section: _Section | None = getattr(acc, section_name)
        if section is not None:
            setattr(section, attr, parse_int(value))

    return handler


def _function(acc: _Accumulator, value: str) -> None:
    if acc.functions is None:
        return
    line, sep, name = value.partition(",")
    if not sep:
        return
    acc.functions.details.append(FunctionDetail(name=name, line=parse_int(line), hit=0))


def _function_hits(acc: _Accumulator, value: str) -> None:
    if acc.functions is None:
        return
    hits, sep, name = value.partition(",")
    if not sep:
        return
    details = acc.functions.details
    # Only the first function with this name is updated
    for index, fn in enumerate(details):
        if fn.name == name:
            details[index] = replace(fn, hit=parse_int(hits))
            break


def _line(acc: _Accumulator, value: str) -> None:
    if acc.lines is None:
        return
    parts = value.split(",")
    if len(parts) < 2:
        return
    acc.lines.details.append(LineDetail(line=parse_int(parts[0]), hit=parse_int(parts[1])))


def _branch(acc: _Accumulator, value: str) -> None:
    if acc.branches is None:
        return
    parts = value.split(",")
    if len(parts) < 4:
        return
    taken = parts[3].strip()
    acc.branches.details.append(
        BranchDetail(
            line=parse_int(parts[0]),
            block=parse_int(parts[1]),
            branch=parse_int(parts[2]),
            taken=0 if taken == "-" else parse_int(taken),
        )
    )


_HANDLERS: dict[str, _Handler] = {
    "TN": _title,
    "SF": _source_file,
    "FNF": _counter("functions", "found"),
    "FNH": _counter("functions", "hit"),
    "FN": _function,
    "FNDA": _function_hits,
    "LF": _counter("lines", "found"),
    "LH": _counter("lines", "hit"),
    "DA": _line,
    "BRF": _counter("branches", "found"),
    "BRH": _counter("branches", "hit"),
    "BRDA": _branch,
}


def _step(state: _ParseState, raw_line: str) -> _ParseState:
    line = raw_line.strip()
    if not line:
        return state

    tag, _, value = line.partition(":")
    value = value.strip()

    if tag == END_OF_RECORD:
        if file := state.current.file:
            state.records.append(state.current.build(file))
        else:
            logger.debug("lcov_record_without_file")
        state.current = _Accumulator()
        return state

    handler = _HANDLERS.get(tag)
    if handler is None:
        logger.debug("lcov_unknown_tag", tag=tag)
        return state

    handler(state.current, value)
    return state


def parse_lcov(text: str) -> list[CoverageRecord]:
    """Parse LCOV text into per-file records, in report order."""
    state = reduce(_step, text.splitlines(), _ParseState())
    logger.debug("lcov_parsed", records=len(state.records))
    return state.records
