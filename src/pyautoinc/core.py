"""
Core AutoIncrementChecker class classifying auto-increment columns.
"""

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from . import report
from .backend.base import MetadataBackend
from .config import CheckConfig
from .limits import max_value, type_key
from .models import ColumnRecord, RunResult, Status, WorstRecord

logger = logging.getLogger(__name__)


class AutoIncrementChecker:
    """
    Classify auto-increment columns by how full their integer type is.

    Each column's fill ratio (counter / type maximum) is compared against the
    configured critical and warning thresholds; the fullest column is tracked
    for the OK summary.
    """

    def __init__(self, config: CheckConfig, stream: TextIO | None = None):
        """
        Args:
            config: Resolved check configuration
            stream: Output stream for report lines (stdout when None)
        """
        self.config = config
        self._stream = stream

    def _emit(self, line: str) -> None:
        """Print one report line to the output stream."""
        print(line, file=self._stream or sys.stdout)

    def classify(self, record: ColumnRecord, result: RunResult) -> Status | None:
        """
        Classify one column and fold it into the running result.

        Args:
            record: Column to classify
            result: Accumulator updated in place

        Returns:
            The column's status, or None if the column was skipped
        """
        key = type_key(record)
        max_val = max_value(key)
        if max_val is None:
            if self.config.verbosity >= 1:
                self._emit(report.format_unknown_type(key, record))
            return None
        if record.counter is None:
            if self.config.verbosity >= 1:
                self._emit(report.format_missing_counter(record))
            return None

        fill = record.counter / max_val
        if self.config.verbosity >= 2:
            self._emit(report.format_detail(record, key, fill))

        status = Status.OK
        if fill >= self.config.critical:
            result.critical_count += 1
            status = Status.CRITICAL
        elif fill >= self.config.warning:
            result.warning_count += 1
            status = Status.WARNING
        if status is not Status.OK:
            self._emit(report.format_alert(status, record, max_val, fill))

        result.checked_count += 1
        # Later columns win ties.
        if result.worst is None or fill >= result.worst.ratio:
            result.worst = WorstRecord(
                database=record.schema,
                table=record.table,
                column=record.column,
                value=record.counter,
                max=max_val,
                ratio=fill,
            )
        return status

    def check_records(self, records: Iterable[ColumnRecord]) -> RunResult:
        """
        Classify all records and print the summary.

        Args:
            records: Columns in query order

        Returns:
            RunResult with counts and the worst column
        """
        result = RunResult()
        for record in records:
            self.classify(record, result)

        for line in report.summary_lines(result):
            self._emit(line)

        logger.info(
            "Checked %d columns: %d critical, %d warning",
            result.checked_count,
            result.critical_count,
            result.warning_count,
        )
        return result

    def run(self, backend: MetadataBackend) -> RunResult:
        """
        Check every auto-increment column the backend reports.

        Raises:
            DatabaseConnectionError: If the metadata query fails
        """
        return self.check_records(backend.iter_columns())
