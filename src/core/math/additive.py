"""
Additive Kernel — сложение и вычитание с учётом знака

Модуль реализует длинное сложение с переносом (carry) и длинное вычитание
с заёмом (borrow) над векторами цифр (младшая первой), а также
диспетчеризацию по паре знаков операндов.

Сложение (a += b):
    b == 0              → без изменений
    a == 0              → a = b
    знаки совпадают     → сложение модулей, знак сохраняется
    знаки различны      → a - (-b)

Вычитание (a -= b):
    b == 0              → без изменений
    a == 0              → a = -b
    знаки совпадают:
        |a| == |b|      → канонический ноль
        |a| >  |b|      → |a| - |b|, знак a
        |a| <  |b|      → |b| - |a|, знак противоположный a
    знаки различны      → a + (-b)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда нормализован (нет старших нулей)
2. Нулевой модуль всегда получает Sign.ZERO
3. borrow ∈ {0, 1}; переполнение невозможно, длина растёт по необходимости
"""

from typing import List, Tuple

from src.core.math.comparison import compare_magnitudes
from src.core.math.digits import (
    BASE,
    InvariantViolation,
    sign_for_digits,
    strip_high_zeros,
    zero_digits,
)
from src.core.math.sign import Sign


# =============================================================================
# ОПЕРАЦИИ НАД МОДУЛЯМИ
# =============================================================================


def add_magnitudes_inplace(target: List[int], other: List[int]) -> List[int]:
    """
    |target| += |other| in place.

    Параллельный проход по обоим векторам до длины большего: сумма
    разрядов плюс перенос, в разряд пишется sum % 10, перенос sum // 10.
    Ненулевой перенос после прохода добавляет ещё одну цифру.

    Args:
        target: Вектор цифр-накопитель (модифицируется)
        other: Слагаемое (не модифицируется, может совпадать с target)

    Returns:
        target
    """
    target_length = len(target)
    other_length = len(other)
    carry = 0
    for position in range(max(target_length, other_length)):
        total = carry
        if position < target_length:
            total += target[position]
        if position < other_length:
            total += other[position]
        carry, digit = divmod(total, BASE)
        if position < target_length:
            target[position] = digit
        else:
            target.append(digit)
    if carry:
        target.append(carry)
    return target


def subtract_magnitudes_inplace(minuend: List[int], subtrahend: List[int]) -> List[int]:
    """
    |minuend| -= |subtrahend| in place, требуется |minuend| >= |subtrahend|.

    Поразрядное вычитание с заёмом: если разряд уходит в минус, к нему
    прибавляется 10, а заём 1 переносится в следующий разряд.
    После прохода удаляются старшие нули.

    Raises:
        InvariantViolation: Если |subtrahend| > |minuend| (остался заём)
    """
    subtrahend_length = len(subtrahend)
    borrow = 0
    for position in range(len(minuend)):
        if position >= subtrahend_length and borrow == 0:
            break
        value = minuend[position] - borrow
        if position < subtrahend_length:
            value -= subtrahend[position]
        if value < 0:
            value += BASE
            borrow = 1
        else:
            borrow = 0
        minuend[position] = value

    if borrow:
        raise InvariantViolation("subtrahend magnitude exceeds minuend magnitude")
    return strip_high_zeros(minuend)


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ (IN PLACE)
# =============================================================================


def add_inplace(sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]) -> Sign:
    """
    a += b над представлением (sign, digits).

    Args:
        sign: Знак a
        digits: Цифры a (модифицируются на месте)
        other_sign: Знак b
        other_digits: Цифры b (не модифицируются)

    Returns:
        Новый знак a; digits уже содержит новый модуль
    """
    if other_sign is Sign.ZERO:
        return sign

    if sign is Sign.ZERO:
        digits[:] = other_digits
        return other_sign

    if sign is other_sign:
        add_magnitudes_inplace(digits, other_digits)
        return sign

    return subtract_inplace(sign, digits, other_sign.negated(), other_digits)


def subtract_inplace(
    sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]
) -> Sign:
    """
    a -= b над представлением (sign, digits).

    Returns:
        Новый знак a; digits уже содержит новый модуль
    """
    if other_sign is Sign.ZERO:
        return sign

    if sign is Sign.ZERO:
        digits[:] = other_digits
        return other_sign.negated()

    if sign is not other_sign:
        return add_inplace(sign, digits, other_sign.negated(), other_digits)

    order = compare_magnitudes(digits, other_digits)
    if order == 0:
        digits[:] = zero_digits()
        return Sign.ZERO

    if order > 0:
        subtract_magnitudes_inplace(digits, other_digits)
        return sign_for_digits(digits, sign)

    result = list(other_digits)
    subtract_magnitudes_inplace(result, digits)
    digits[:] = result
    return sign_for_digits(digits, sign.negated())


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ (ЧИСТЫЕ)
# =============================================================================


def signed_add(
    sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]
) -> Tuple[Sign, List[int]]:
    """a + b без изменения операндов."""
    result = list(digits)
    return add_inplace(sign, result, other_sign, other_digits), result


def signed_subtract(
    sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]
) -> Tuple[Sign, List[int]]:
    """a - b без изменения операндов."""
    result = list(digits)
    return subtract_inplace(sign, result, other_sign, other_digits), result
