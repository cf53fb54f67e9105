"""treeops error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Files
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Files (3xxx)
    FILE_INVALID_ARGUMENT = 3001
    FILE_IO_FAILURE = 3002
    FILE_ALREADY_EXISTS = 3003
    FILE_UNSUPPORTED_CHILD_TYPE = 3004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(eq=False)
class TreeOpsError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'FILE_IO_FAILURE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TreeOpsError):
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

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class FileOpsError(TreeOpsError):
    """Filesystem operation errors.

    Precondition violations (INVALID_ARGUMENT, ALREADY_EXISTS,
    UNSUPPORTED_CHILD_TYPE) are kept apart from I/O faults (IO_FAILURE).
    """

    @classmethod
    def invalid_argument(cls, message: str, **details: Any) -> "FileOpsError":
        return cls(
            code=ErrorCode.FILE_INVALID_ARGUMENT,
            message=message,
            details={k: str(v) for k, v in details.items()},
        )

    @classmethod
    def io_failure(
        cls, message: str, cause: BaseException | None = None, **details: Any
    ) -> "FileOpsError":
        info = {k: str(v) for k, v in details.items()}
        if cause is not None:
            info["reason"] = str(cause)
        return cls(code=ErrorCode.FILE_IO_FAILURE, message=message, details=info)

    @classmethod
    def already_exists(cls, path: Any) -> "FileOpsError":
        return cls(
            code=ErrorCode.FILE_ALREADY_EXISTS,
            message=f"{path} exists already.",
            details={"path": str(path)},
        )

    @classmethod
    def unsupported_child_type(cls, path: Any) -> "FileOpsError":
        return cls(
            code=ErrorCode.FILE_UNSUPPORTED_CHILD_TYPE,
            message=f"Don't know how to copy file {path}",
            details={"path": str(path)},
        )


class InternalError(TreeOpsError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
