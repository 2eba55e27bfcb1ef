"""lcov-gate error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Collection (obtaining the LCOV report)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Collection (3xxx)
    COLLECT_SPAWN_FAILED = 3001
    COLLECT_TIMEOUT = 3002
    COLLECT_EXIT_STATUS = 3003
    COLLECT_NO_OUTPUT = 3004
    COLLECT_FILE_UNREADABLE = 3005


@dataclass(frozen=True, slots=True)
class LcovGateError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(LcovGateError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class CollectionError(LcovGateError):
    """The LCOV report could not be obtained. Always fatal."""

    @classmethod
    def spawn_failed(cls, command: list[str], reason: str) -> "CollectionError":
        return cls(
            code=ErrorCode.COLLECT_SPAWN_FAILED,
            message=f"Could not start coverage command {' '.join(command)!r}: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def timed_out(cls, command: list[str], timeout: float) -> "CollectionError":
        return cls(
            code=ErrorCode.COLLECT_TIMEOUT,
            message=f"Coverage command {' '.join(command)!r} timed out after {timeout}s",
            details={"command": command, "timeout": timeout},
        )

    @classmethod
    def exit_status(cls, command: list[str], returncode: int, stderr: str) -> "CollectionError":
        message = f"Coverage command {' '.join(command)!r} exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        return cls(
            code=ErrorCode.COLLECT_EXIT_STATUS,
            message=message,
            details={"command": command, "returncode": returncode, "stderr": stderr},
        )

    @classmethod
    def no_output(cls, source: str) -> "CollectionError":
        return cls(
            code=ErrorCode.COLLECT_NO_OUTPUT,
            message=f"No LCOV data produced by {source}",
            details={"source": source},
        )

    @classmethod
    def file_unreadable(cls, path: str, reason: str) -> "CollectionError":
        return cls(
            code=ErrorCode.COLLECT_FILE_UNREADABLE,
            message=f"Failed to read LCOV file {path}: {reason}",
            details={"path": path, "reason": reason},
        )
