"""
Abstract base class for schema metadata backends.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..models import ColumnRecord


class MetadataBackend(ABC):
    """
    Abstract base class for auto-increment metadata sources.

    All backend implementations must inherit from this class and implement
    all abstract methods.
    """

    @abstractmethod
    def iter_columns(self) -> Iterator[ColumnRecord]:
        """
        Iterate over all auto-increment columns.

        Records are yielded ordered by catalog, schema, table and column.

        Returns:
            Iterator of ColumnRecord objects

        Raises:
            DatabaseConnectionError: If the metadata query fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the database connection."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
