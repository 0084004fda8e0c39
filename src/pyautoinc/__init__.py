"""
PyAutoInc - auto-increment overflow check for MySQL

Reports how close each auto-increment column is to the maximum value of its
integer type, with monitoring-plugin exit codes.
"""

__version__ = "0.1.0"

from .backend import MetadataBackend, MySQLBackend, create_backend
from .config import CheckConfig, parse_config_file, resolve_config
from .core import AutoIncrementChecker
from .exceptions import AutoIncCheckError, ConfigFileError, DatabaseConnectionError
from .limits import TYPE_MAX, max_value, type_key
from .models import ColumnRecord, RunResult, Status, WorstRecord

__all__ = [
    "AutoIncrementChecker",
    "MetadataBackend",
    "MySQLBackend",
    "create_backend",
    "CheckConfig",
    "parse_config_file",
    "resolve_config",
    "AutoIncCheckError",
    "ConfigFileError",
    "DatabaseConnectionError",
    "TYPE_MAX",
    "max_value",
    "type_key",
    "ColumnRecord",
    "RunResult",
    "Status",
    "WorstRecord",
]
