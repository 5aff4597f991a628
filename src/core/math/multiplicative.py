"""
Multiplicative Kernel — умножение в столбик (schoolbook)

Для каждой цифры внешнего операнда (позиция i) строится частичное
произведение на все цифры внутреннего операнда с переносом, сдвинутое
на i разрядов (i нулей в младших позициях), и прибавляется к накопителю
через add_magnitudes_inplace.

Выбор внешнего операнда (короче по длине) не влияет на результат,
только на порядок обхода. Сложность O(len(a) * len(b)).
"""

from typing import List, Tuple

from src.core.math.additive import add_magnitudes_inplace
from src.core.math.digits import BASE, ZERO_DIGIT, is_zero_digits, zero_digits
from src.core.math.sign import Sign


def partial_product(inner: List[int], multiplier: int, shift: int) -> List[int]:
    """
    Частичное произведение inner * multiplier * 10**shift.

    Args:
        inner: Цифры множимого (младшая первой)
        multiplier: Одна цифра [1, 9]
        shift: Сдвиг в десятичных разрядах

    Returns:
        Новый вектор цифр
    """
    partial = [ZERO_DIGIT] * shift
    carry = 0
    for digit in inner:
        carry, product_digit = divmod(digit * multiplier + carry, BASE)
        partial.append(product_digit)
    if carry:
        partial.append(carry)
    return partial


def multiply_magnitudes(digits: List[int], other_digits: List[int]) -> List[int]:
    """
    |a| * |b| в новом векторе цифр.

    Если один из операндов ноль, возвращается [0] без вычислений.
    """
    if is_zero_digits(digits) or is_zero_digits(other_digits):
        return zero_digits()

    if len(digits) <= len(other_digits):
        outer, inner = digits, other_digits
    else:
        outer, inner = other_digits, digits

    total = zero_digits()
    for shift, multiplier in enumerate(outer):
        # нулевая цифра даёт нулевое частичное произведение
        if multiplier == ZERO_DIGIT:
            continue
        add_magnitudes_inplace(total, partial_product(inner, multiplier, shift))
    return total


def multiply_inplace(
    sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]
) -> Sign:
    """
    a *= b над представлением (sign, digits).

    Returns:
        Знак произведения; digits уже содержит модуль произведения
    """
    if sign is Sign.ZERO or other_sign is Sign.ZERO:
        digits[:] = zero_digits()
        return Sign.ZERO

    digits[:] = multiply_magnitudes(digits, other_digits)
    return sign.times(other_sign)


def signed_multiply(
    sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]
) -> Tuple[Sign, List[int]]:
    """a * b без изменения операндов."""
    result = list(digits)
    return multiply_inplace(sign, result, other_sign, other_digits), result
