"""lcov-gate - LCOV coverage threshold gate for CI builds."""

__version__ = "0.1.0"
