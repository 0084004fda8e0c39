"""
Exception classes for auto-increment check operations.
"""


class AutoIncCheckError(Exception):
    """Base exception for auto-increment check setup failures."""

    pass


class ConfigFileError(AutoIncCheckError):
    """Exception raised when a config file cannot be read or parsed."""

    pass


class DatabaseConnectionError(AutoIncCheckError):
    """Exception raised when the database connection or metadata query fails."""

    pass
