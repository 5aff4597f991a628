"""
Comparison — равенство и полный порядок над представлениями (sign, digits)

Сравнение модулей опирается на канонический вид: старшие нули не хранятся,
поэтому длина вектора цифр является корректной оценкой порядка величины.
"""

from typing import List

from src.core.math.sign import Sign


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(digits: List[int], other_digits: List[int]) -> int:
    """
    Трёхстороннее сравнение модулей.

    Сначала длины, при равенстве длин — поразрядно от старшей цифры,
    первое различие определяет результат.

    Returns:
        -1, 0 или 1
    """
    if len(digits) != len(other_digits):
        return 1 if len(digits) > len(other_digits) else -1

    for position in range(len(digits) - 1, -1, -1):
        if digits[position] != other_digits[position]:
            return 1 if digits[position] > other_digits[position] else -1
    return 0


def is_abs_greater(digits: List[int], other_digits: List[int]) -> bool:
    """True, если |a| > |b| (строго)."""
    return compare_magnitudes(digits, other_digits) > 0


# =============================================================================
# РАВЕНСТВО И ПОРЯДОК
# =============================================================================


def equals(sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]) -> bool:
    """Совпадение знаков и векторов цифр (длина и содержимое)."""
    return sign is other_sign and digits == other_digits


def less_than(sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]) -> bool:
    """
    Строгое a < b с диспетчеризацией по паре знаков.

    - равные значения никогда не меньше друг друга
    - neg / neg → обратный порядок модулей
    - neg / (zero | pos) → True
    - zero / pos → True, zero / neg → False
    - pos / (zero | neg) → False
    - pos / pos → прямой порядок модулей
    """
    if equals(sign, digits, other_sign, other_digits):
        return False

    if sign is Sign.NEGATIVE:
        if other_sign is Sign.NEGATIVE:
            return is_abs_greater(digits, other_digits)
        return True

    if sign is Sign.ZERO:
        return other_sign is Sign.POSITIVE

    if other_sign is Sign.POSITIVE:
        return is_abs_greater(other_digits, digits)
    return False


def compare(sign: Sign, digits: List[int], other_sign: Sign, other_digits: List[int]) -> int:
    """
    Трёхстороннее сравнение значений.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b
    """
    if equals(sign, digits, other_sign, other_digits):
        return 0
    if less_than(sign, digits, other_sign, other_digits):
        return -1
    return 1
