"""Obtain the raw LCOV report.

Either runs the coverage command (``deno coverage --lcov`` by default) and
buffers its stdout, or reads an existing report file. Any failure is
fatal and raised as CollectionError: there is nothing to gate on without
a report.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from lcovgate.core.errors import CollectionError
from lcovgate.core.logging import get_logger

logger = get_logger(__name__)


def build_command(
    base: list[str],
    *,
    coverage_dir: str | None = None,
    include: str | None = None,
    exclude: str | None = None,
) -> list[str]:
    """Coverage command line with the profile dir and patterns appended."""
    cmd = list(base)
    if coverage_dir:
        cmd.append(coverage_dir)
    if include is not None:
        cmd.append(f"--include={include}")
    if exclude is not None:
        cmd.append(f"--exclude={exclude}")
    return cmd


def run_collector(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> str:
    """Run the coverage command and return its stdout.

    Raises:
        CollectionError: If the command cannot start, times out, exits
            non-zero or prints nothing.
    """
    logger.debug("collector_start", command=cmd, cwd=str(cwd) if cwd else None)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise CollectionError.timed_out(cmd, timeout or 0.0) from e
    except OSError as e:
        raise CollectionError.spawn_failed(cmd, str(e)) from e

    logger.debug("collector_done", returncode=result.returncode, stdout_bytes=len(result.stdout))

    if result.returncode != 0:
        raise CollectionError.exit_status(cmd, result.returncode, result.stderr or "")
    if not result.stdout.strip():
        raise CollectionError.no_output(" ".join(cmd))
    return result.stdout


def read_report(path: str) -> str:
    """Read an LCOV report from ``path``, or stdin when ``path`` is ``-``.

    Raises:
        CollectionError: If the file cannot be read or is empty.
    """
    if path == "-":
        content = sys.stdin.read()
        source = "stdin"
    else:
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CollectionError.file_unreadable(path, str(e)) from e
        source = path

    if not content.strip():
        raise CollectionError.no_output(source)
    logger.debug("report_read", source=source, chars=len(content))
    return content
