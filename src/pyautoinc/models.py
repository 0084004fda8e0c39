"""
Data models for auto-increment check runs.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class Status(IntEnum):
    """Monitoring status, valued as the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass
class ColumnRecord:
    """An auto-increment column and its table's current counter."""

    catalog: str
    schema: str
    table: str
    column: str
    data_type: str
    column_type: str
    counter: int | None

    @property
    def unsigned(self) -> bool:
        """Whether the declared column type is unsigned."""
        return "unsigned" in self.column_type

    @property
    def name(self) -> str:
        """Dotted database.table.column name used in report lines."""
        return f"{self.schema}.{self.table}.{self.column}"


@dataclass
class WorstRecord:
    """The column with the highest fill ratio seen so far."""

    database: str
    table: str
    column: str
    value: int
    max: int
    ratio: float


@dataclass
class RunResult:
    """Aggregate outcome of a check run."""

    warning_count: int = 0
    critical_count: int = 0
    checked_count: int = 0
    worst: WorstRecord | None = field(default=None)

    @property
    def status(self) -> Status:
        """Worst status seen: CRITICAL over WARNING over OK."""
        if self.critical_count > 0:
            return Status.CRITICAL
        if self.warning_count > 0:
            return Status.WARNING
        return Status.OK

    @property
    def exit_code(self) -> int:
        """Process exit code for this run (0, 1 or 2)."""
        return int(self.status)
