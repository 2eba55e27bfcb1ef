"""Entry point for ``python -m lcovgate``."""

from lcovgate.cli.main import cli

if __name__ == "__main__":
    cli()
