"""
Maximum values of the MySQL integer column types.
"""

from types import MappingProxyType

from .models import ColumnRecord

TYPE_MAX = MappingProxyType({
    "signed_tinyint": 127,
    "unsigned_tinyint": 255,
    "signed_smallint": 32_767,
    "unsigned_smallint": 65_535,
    "signed_mediumint": 8_388_607,
    "unsigned_mediumint": 16_777_215,
    "signed_int": 2_147_483_647,
    "unsigned_int": 4_294_967_295,
    "signed_integer": 2_147_483_647,
    "unsigned_integer": 4_294_967_295,
    "signed_bigint": 9_223_372_036_854_775_807,
    "unsigned_bigint": 18_446_744_073_709_551_615,
})


def type_key(record: ColumnRecord) -> str:
    """
    Build the lookup key for a column's type.

    Args:
        record: Column whose data type and signedness make up the key

    Returns:
        Key such as "unsigned_int" or "signed_bigint"
    """
    signedness = "unsigned" if record.unsigned else "signed"
    return f"{signedness}_{record.data_type}"


def max_value(key: str) -> int | None:
    """Return the maximum value for a type key, or None if the type is unknown."""
    return TYPE_MAX.get(key)
