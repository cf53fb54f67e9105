"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TREEOPS__SECTION__KEY)
3. Project YAML (.treeops/config.yaml)
4. Global YAML (~/.config/treeops/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TREEOPS__<SECTION>__<KEY>=<VALUE>

Examples:
    TREEOPS__LOGGING__LEVEL=DEBUG
    TREEOPS__PATHS__SEPARATOR=/
    TREEOPS__HASHING__CHUNK_SIZE=1048576
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TREEOPS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG traces every file operation.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class PathsConfig(BaseModel):
    """Path rendering configuration.

    Env vars:
        TREEOPS__PATHS__SEPARATOR: auto, / or \\
    """

    separator: Literal["auto", "/", "\\"] = Field(
        default="auto",
        description="Separator used when rendering system-dependent paths. "
        "'auto' uses the host separator.",
    )

    def resolve_separator(self) -> str:
        return os.sep if self.separator == "auto" else self.separator


class HashingConfig(BaseModel):
    """Hashing configuration.

    Env vars:
        TREEOPS__HASHING__CHUNK_SIZE: Read buffer size in bytes
    """

    chunk_size: int = Field(
        default=64 * 1024,
        description="Bytes read per chunk when hashing file contents.",
    )

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"chunk_size must be positive, got {v}")
        return v


class TreeOpsConfig(BaseModel):
    """Root configuration for treeops.

    All settings can be configured via:
    1. Environment variables: TREEOPS__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    hashing: HashingConfig = Field(default_factory=HashingConfig)
