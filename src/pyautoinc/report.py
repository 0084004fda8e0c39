"""
Text formatting for check results.
"""

from .models import ColumnRecord, RunResult, Status, WorstRecord


def format_alert(status: Status, record: ColumnRecord, max_value: int, fill: float) -> str:
    """
    Format a WARNING or CRITICAL line for a column.

    Args:
        status: WARNING or CRITICAL
        record: Column that crossed the threshold
        max_value: Maximum value of the column's type
        fill: Counter divided by max_value

    Returns:
        Report line
    """
    return f"{status.name}: {record.name} at {fill:.4f} ({record.counter}/{max_value})"


def format_unknown_type(key: str, record: ColumnRecord) -> str:
    """Format the diagnostic line for a column whose type has no known maximum."""
    return f"Unknown type {key} for {record.name}"


def format_missing_counter(record: ColumnRecord) -> str:
    """Format the diagnostic line for a column whose table reports no counter."""
    return f"No auto-increment counter for {record.name}"


def format_detail(record: ColumnRecord, key: str, fill: float) -> str:
    """Tab-separated per-column diagnostic line."""
    fields = [record.catalog, record.schema, record.table, record.column, key, record.counter, fill]
    return "\t".join(str(value) for value in fields)


def format_ok(worst: WorstRecord) -> str:
    """
    Format the OK summary line.

    Args:
        worst: Column with the highest fill ratio

    Returns:
        Line naming the column, its ratio, value and type maximum
    """
    return (
        f"OK: highest is {worst.database}.{worst.table}.{worst.column} "
        f"at {worst.ratio:.4f} ({worst.value}/{worst.max})"
    )


def summary_lines(result: RunResult) -> list[str]:
    """
    Lines to print once all columns are classified.

    Only a clean run with at least one classified column gets an OK line.
    """
    if result.status is Status.OK and result.worst is not None:
        return [format_ok(result.worst)]
    return []
