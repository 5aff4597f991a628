"""
Contract Validation Module

Модуль для валидации JSON-представления BigInt.
"""

from .validators import (
    BigIntValueValidator,
    ContractValidator,
    SchemaLoader,
    validate_bigint_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntValueValidator",
    # Functions
    "validate_bigint_value",
]
