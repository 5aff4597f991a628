"""
BigIntSnapshot — неизменяемый снимок значения BigInt

Immutable Pydantic модель (sign, digits), используемая для передачи
значения между компонентами и для сериализации. В отличие от самого
BigInt (изменяемого через +=, -=, *=), снимок не меняется после создания.

Валидаторы повторяют инварианты представления:
- digits непуст, каждая цифра в [0, 9]
- нет старших нулей, кроме [0]
- sign == ZERO тогда и только тогда, когда digits == (0,)
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from src.core.math.digits import MAX_DIGIT, ZERO_DIGIT, render
from src.core.math.sign import Sign


class BigIntSnapshot(BaseModel):
    """
    Снимок значения BigInt.

    digits хранятся от младшей цифры к старшей, как в BigInt.
    """

    sign: Sign = Field(..., description="Знак значения (negative/zero/positive)")
    digits: Tuple[int, ...] = Field(
        ..., min_length=1, description="Десятичные цифры модуля, младшая первой"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Каждая цифра в [0, 9], старшая цифра ненулевая (кроме нуля)."""
        for position, digit in enumerate(v):
            if not (ZERO_DIGIT <= digit <= MAX_DIGIT):
                raise ValueError(f"digit {digit} at position {position} outside [0, {MAX_DIGIT}]")
        if len(v) > 1 and v[-1] == ZERO_DIGIT:
            raise ValueError("most significant digit must not be zero")
        return v

    @field_validator("digits")
    @classmethod
    def validate_sign_consistency(cls, v: Tuple[int, ...], info) -> Tuple[int, ...]:
        """sign == ZERO тогда и только тогда, когда digits == (0,)"""
        if "sign" in info.data:
            is_zero = v == (ZERO_DIGIT,)
            if (info.data["sign"] is Sign.ZERO) != is_zero:
                raise ValueError(
                    f"sign {info.data['sign'].value} inconsistent with digits {v}"
                )
        return v

    def to_decimal(self) -> str:
        """Каноническая десятичная строка."""
        return render(self.sign, list(self.digits))
