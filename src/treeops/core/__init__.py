"""Core module exports."""

from treeops.core.errors import (
    ConfigError,
    ErrorCode,
    FileOpsError,
    InternalError,
    TreeOpsError,
)
from treeops.core.logging import (
    configure_logging,
    get_log_file_path,
    get_logger,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "FileOpsError",
    "InternalError",
    "TreeOpsError",
    # Logging
    "configure_logging",
    "get_log_file_path",
    "get_logger",
]
