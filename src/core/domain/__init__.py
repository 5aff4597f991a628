"""
Domain value objects.

Contains the BigInt value type and its immutable snapshot model.
"""

from src.core.domain.bigint import BigInt
from src.core.domain.snapshot import BigIntSnapshot
from src.core.math.sign import Sign

__all__ = [
    "BigInt",
    "BigIntSnapshot",
    "Sign",
]
