"""Normalization of numeric aggregate results across database drivers."""

from decimal import Decimal
from typing import Any


def to_decimal(value: Any) -> Decimal:
    """Normalize a database AVG() result (Decimal, float, int or None).

    asyncpg returns NUMERIC averages as Decimal, aiosqlite as float.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
