"""
MySQL backend reading auto-increment counters from information_schema.
"""

import logging
from collections.abc import Iterator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import DatabaseConnectionError
from ..models import ColumnRecord
from .base import MetadataBackend

logger = logging.getLogger(__name__)

AUTO_INCREMENT_QUERY = text(
    """
    SELECT
        c.TABLE_CATALOG,
        c.TABLE_SCHEMA,
        c.TABLE_NAME,
        c.COLUMN_NAME,
        c.DATA_TYPE,
        c.COLUMN_TYPE,
        t.AUTO_INCREMENT
    FROM information_schema.COLUMNS c
    JOIN information_schema.TABLES t
        ON c.TABLE_CATALOG = t.TABLE_CATALOG
        AND c.TABLE_SCHEMA = t.TABLE_SCHEMA
        AND c.TABLE_NAME = t.TABLE_NAME
    WHERE c.EXTRA LIKE :extra
    ORDER BY c.TABLE_CATALOG, c.TABLE_SCHEMA, c.TABLE_NAME, c.COLUMN_NAME
    """
)


def _as_text(value) -> str:
    """Decode information_schema values returned as bytes by some driver versions."""
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return value


class MySQLBackend(MetadataBackend):
    """Backend implementation using SQLAlchemy with mysql-connector."""

    def __init__(
        self,
        host: str = "localhost",
        user: str = "root",
        password: str | None = None,
        port: int = 3306,
        engine: Engine | None = None,
    ):
        """
        Initialize the backend and verify the connection.

        Args:
            host: Database server host name
            user: User to connect as
            password: Password, or None to connect without one
            port: Database server port
            engine: Pre-built SQLAlchemy engine, used instead of building one

        Raises:
            DatabaseConnectionError: If connection fails
        """
        self.host = host
        self.port = port
        self._engine = engine if engine is not None else self._create_engine(host, user, password, port)
        self._check_connection()

    def _create_engine(self, host: str, user: str, password: str | None, port: int) -> Engine:
        """Create and return a SQLAlchemy engine."""
        connection_url = URL.create(
            "mysql+mysqlconnector",
            username=user,
            password=password or None,
            host=host,
            port=port,
            database="information_schema",
        )
        try:
            return create_engine(connection_url)
        except (SQLAlchemyError, ImportError) as e:
            raise DatabaseConnectionError(f"Cannot create engine for {host}:{port}. Error: {e}") from e

    def _check_connection(self) -> None:
        """Open and release a connection so bad credentials fail early."""
        try:
            with self._engine.connect():
                pass
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(f"Cannot connect to {self.host}:{self.port}. Error: {e}") from e
        logger.info("Connected to %s:%s", self.host, self.port)

    def iter_columns(self) -> Iterator[ColumnRecord]:
        """
        Iterate over all auto-increment columns.

        Returns:
            Iterator of ColumnRecord objects in catalog, schema, table, column order

        Raises:
            DatabaseConnectionError: If the query fails
        """
        if self._engine is None:
            raise DatabaseConnectionError("Backend is closed")

        try:
            with self._engine.connect() as conn:
                result = conn.execute(AUTO_INCREMENT_QUERY, {"extra": "%auto_increment%"})
                for row in result:
                    *names, counter = row
                    catalog, schema, table, column, data_type, column_type = map(_as_text, names)
                    yield ColumnRecord(
                        catalog=catalog,
                        schema=schema,
                        table=table,
                        column=column,
                        data_type=data_type,
                        column_type=column_type,
                        counter=None if counter is None else int(counter),
                    )
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(f"Metadata query failed on {self.host}:{self.port}. Error: {e}") from e

    def close(self) -> None:
        """Dispose the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
