"""Config module exports."""

from treeops.config.loader import load_config
from treeops.config.models import (
    HashingConfig,
    LoggingConfig,
    LogOutputConfig,
    PathsConfig,
    TreeOpsConfig,
)
from treeops.config.properties import load_properties, parse_properties, resolve_property

__all__ = [
    "load_config",
    "load_properties",
    "parse_properties",
    "resolve_property",
    "HashingConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "PathsConfig",
    "TreeOpsConfig",
]
