"""lcov-gate CLI - coverage threshold gate."""

from pathlib import Path

import click

from lcovgate import __version__
from lcovgate.collect import build_command, read_report, run_collector
from lcovgate.config import DEFAULT_CONFIG_FILE, load_settings, load_threshold_config
from lcovgate.core.errors import LcovGateError
from lcovgate.core.logging import configure_logging, get_logger
from lcovgate.coverage import check_thresholds, format_summary, parse_lcov, summarize

logger = get_logger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="lcov-gate")
@click.argument("coverage_dir", required=False)
@click.option("--lines", type=float, default=None, help="Minimum line coverage percent.")
@click.option("--functions", type=float, default=None, help="Minimum function coverage percent.")
@click.option("--branches", type=float, default=None, help="Minimum branch coverage percent.")
@click.option(
    "--per-file/--no-per-file",
    default=None,
    help="Apply thresholds to every file as well as the total.",
)
@click.option("--include", default=None, help="Include pattern passed to the coverage command.")
@click.option("--exclude", default=None, help="Exclude pattern passed to the coverage command.")
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    help="JSON file providing defaults for the options above.",
)
@click.option(
    "--lcov-file",
    default=None,
    help="Read an existing LCOV report instead of running the coverage command ('-' for stdin).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    coverage_dir: str | None,
    lines: float | None,
    functions: float | None,
    branches: float | None,
    per_file: bool | None,
    include: str | None,
    exclude: str | None,
    config_file: Path,
    lcov_file: str | None,
    verbose: bool,
) -> None:
    """Check LCOV coverage against thresholds.

    Prints a coverage table, reports each threshold failure on stderr and
    exits 1 if any threshold is not met. COVERAGE_DIR is passed to the
    coverage command (default: deno coverage --lcov).
    """
    try:
        settings = load_settings()
    except LcovGateError as e:
        raise click.ClickException(e.message) from e

    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_format=settings.log_format == "json",
    )

    cli_values = {
        "lines": lines,
        "functions": functions,
        "branches": branches,
        "per_file": per_file,
        "include": include,
        "exclude": exclude,
    }

    try:
        config = load_threshold_config(cli_values, config_file)
        if lcov_file:
            text = read_report(lcov_file)
        else:
            cmd = build_command(
                settings.command,
                coverage_dir=coverage_dir,
                include=config.include,
                exclude=config.exclude,
            )
            text = run_collector(cmd, timeout=settings.timeout_sec)
    except LcovGateError as e:
        logger.debug("coverage_gate_aborted", **e.to_dict())
        raise click.ClickException(e.message) from e

    summary = summarize(parse_lcov(text))
    click.echo(format_summary(summary))

    result = check_thresholds(summary, config)
    for failure in result.failures:
        click.echo(failure, err=True)

    logger.info("coverage_gate_done", passed=result.passed, failures=len(result.failures))
    ctx.exit(0 if result.passed else 1)


if __name__ == "__main__":
    cli()
