"""
Sign — знак целого числа произвольной точности

Знак хранится явно, отдельно от модуля: ноль является самостоятельным
значением знака (в отличие от +0/-0 у float).
"""

from enum import Enum


class Sign(str, Enum):
    """Знак значения BigInt"""

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"

    @classmethod
    def of(cls, number: int) -> "Sign":
        """Знак native int."""
        if number < 0:
            return cls.NEGATIVE
        if number > 0:
            return cls.POSITIVE
        return cls.ZERO

    def negated(self) -> "Sign":
        """Противоположный знак; ZERO остаётся ZERO."""
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.ZERO

    def times(self, other: "Sign") -> "Sign":
        """
        Знак произведения.

        ZERO, если хотя бы один множитель ноль; иначе POSITIVE при
        совпадении знаков и NEGATIVE при различии.
        """
        if self is Sign.ZERO or other is Sign.ZERO:
            return Sign.ZERO
        if self is other:
            return Sign.POSITIVE
        return Sign.NEGATIVE
