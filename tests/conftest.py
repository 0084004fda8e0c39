"""
Shared pytest fixtures and configuration for pyautoinc tests.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from pyautoinc import AutoIncrementChecker, CheckConfig, ColumnRecord, MetadataBackend


class FakeBackend(MetadataBackend):
    """In-memory backend yielding a fixed list of records."""

    def __init__(self, records):
        self.records = list(records)
        self.closed = False

    def iter_columns(self):
        yield from self.records

    def close(self):
        self.closed = True


def _make_record(table="t", column="id", data_type="int", column_type=None, counter=1, schema="app"):
    """Build a ColumnRecord with sensible defaults."""
    if column_type is None:
        column_type = data_type
    return ColumnRecord(
        catalog="def",
        schema=schema,
        table=table,
        column=column,
        data_type=data_type,
        column_type=column_type,
        counter=counter,
    )


@pytest.fixture
def make_record():
    """Factory for ColumnRecord objects."""
    return _make_record


@pytest.fixture
def run_check(capsys):
    """Run a check over records and return (result, printed lines)."""

    def _run(records, **overrides):
        checker = AutoIncrementChecker(CheckConfig(**overrides))
        with FakeBackend(records) as backend:
            result = checker.run(backend)
        return result, capsys.readouterr().out.splitlines()

    return _run


@pytest.fixture
def schema_engine():
    """SQLite engine with an attached information_schema holding sample metadata."""
    engine = create_engine("sqlite://", poolclass=StaticPool)
    with engine.begin() as conn:
        conn.exec_driver_sql("ATTACH DATABASE ':memory:' AS information_schema")
        conn.exec_driver_sql(
            "CREATE TABLE information_schema.COLUMNS ("
            "TABLE_CATALOG TEXT, TABLE_SCHEMA TEXT, TABLE_NAME TEXT, COLUMN_NAME TEXT, "
            "DATA_TYPE TEXT, COLUMN_TYPE TEXT, EXTRA TEXT)"
        )
        conn.exec_driver_sql(
            "CREATE TABLE information_schema.TABLES ("
            "TABLE_CATALOG TEXT, TABLE_SCHEMA TEXT, TABLE_NAME TEXT, AUTO_INCREMENT INTEGER)"
        )
        conn.exec_driver_sql(
            "INSERT INTO information_schema.COLUMNS VALUES "
            "('def', 'shop', 'orders', 'id', 'int', 'int(10) unsigned', 'auto_increment'), "
            "('def', 'shop', 'orders', 'note', 'varchar', 'varchar(255)', ''), "
            "('def', 'app', 'users', 'id', 'tinyint', 'tinyint(4)', 'auto_increment'), "
            "('def', 'app', 'events', 'id', 'bigint', 'bigint(20)', 'auto_increment'), "
            "('def', 'app', 'legacy', 'id', 'int', 'int(11)', 'auto_increment')"
        )
        conn.exec_driver_sql(
            "INSERT INTO information_schema.TABLES VALUES "
            "('def', 'shop', 'orders', 4294967295), "
            "('def', 'app', 'users', 100), "
            "('def', 'app', 'events', 5), "
            "('def', 'app', 'legacy', NULL)"
        )
    yield engine
    engine.dispose()


@pytest.fixture
def patch_backend(monkeypatch):
    """Make the CLI use a FakeBackend over the given records; returns the created backends."""
    created = []

    def _patch(records):
        def factory(config):
            backend = FakeBackend(records)
            backend.config = config
            created.append(backend)
            return backend

        monkeypatch.setattr("pyautoinc.cli.create_backend", factory)
        return created

    return _patch
