"""
Backend module for auto-increment metadata queries.

Backends share the MetadataBackend interface; create_backend builds the one
matching a resolved configuration.
"""

from ..config import CheckConfig
from .base import MetadataBackend
from .mysql_backend import MySQLBackend

__all__ = [
    "MetadataBackend",
    "MySQLBackend",
    "create_backend",
]


def create_backend(config: CheckConfig) -> MetadataBackend:
    """
    Create the metadata backend for a resolved configuration.

    Args:
        config: Resolved check configuration

    Returns:
        A connected backend instance

    Raises:
        DatabaseConnectionError: If the backend cannot connect
    """
    return MySQLBackend(
        host=config.dbhost,
        user=config.dbuser,
        password=config.dbpass,
        port=config.dbport,
    )
