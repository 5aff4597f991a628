"""
Digits — представление модуля числа в виде вектора десятичных цифр

Модуль содержит примитивы, на которых построены все остальные операции BigInt:
- Вектор цифр хранится от младшего разряда к старшему (index 0 = единицы)
- Канонический ноль: digits == [0], sign == ZERO
- Нормализация (удаление старших нулей)
- Разложение native int на цифры и рендеринг цифр в строку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits никогда не пуст
2. Нет старших нулей, кроме канонического нуля [0]
3. sign == ZERO тогда и только тогда, когда digits == [0]
4. Каждая цифра в диапазоне [0, 9]
"""

from typing import Final, List

from src.core.math.sign import Sign

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления для всех операций над цифрами
BASE: Final[int] = 10

# Единственная цифра канонического нуля
ZERO_DIGIT: Final[int] = 0

# Максимальное значение одной цифры
MAX_DIGIT: Final[int] = BASE - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvariantViolation(Exception):
    """
    Нарушение инварианта представления (sign, digits).

    Возникает только при ручной сборке значения из внешних данных
    (snapshot, dict) или при ошибке в ядре арифметики.
    """

    pass


# =============================================================================
# КОНСТРУКТОРЫ ВЕКТОРА ЦИФР
# =============================================================================


def zero_digits() -> List[int]:
    """Новый (не разделяемый) вектор цифр канонического нуля."""
    return [ZERO_DIGIT]


def digits_from_int(number: int) -> List[int]:
    """
    Разложение модуля native int на десятичные цифры (младшая первой).

    Повторное деление на BASE, как в длинной арифметике.

    Args:
        number: Целое число (знак игнорируется)

    Returns:
        Вектор цифр модуля; для 0 возвращает [0]

    Examples:
        >>> digits_from_int(0)
        [0]
        >>> digits_from_int(-1204)
        [4, 0, 2, 1]
    """
    magnitude = abs(number)
    if magnitude == 0:
        return zero_digits()

    digits: List[int] = []
    while magnitude != 0:
        magnitude, digit = divmod(magnitude, BASE)
        digits.append(digit)
    return digits


def digits_to_int(digits: List[int]) -> int:
    """Сборка модуля в native int (Горнер от старшей цифры)."""
    value = 0
    for digit in reversed(digits):
        value = value * BASE + digit
    return value


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_high_zeros(digits: List[int]) -> List[int]:
    """
    Удаление старших нулей in place.

    Никогда не укорачивает вектор меньше одной цифры: полностью нулевой
    вектор превращается в [0].

    Args:
        digits: Вектор цифр (младшая первой), модифицируется

    Returns:
        Тот же список (для удобства цепочек)
    """
    while len(digits) > 1 and digits[-1] == ZERO_DIGIT:
        digits.pop()
    return digits


def is_zero_digits(digits: List[int]) -> bool:
    """True, если вектор — канонический ноль."""
    return len(digits) == 1 and digits[0] == ZERO_DIGIT


def sign_for_digits(digits: List[int], nonzero_sign: Sign) -> Sign:
    """
    Знак результата после нормализации.

    Нулевой модуль всегда даёт Sign.ZERO, независимо от nonzero_sign.
    """
    if is_zero_digits(digits):
        return Sign.ZERO
    return nonzero_sign


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def render_digits(digits: List[int]) -> str:
    """Цифры модуля от старшей к младшей, без разделителей."""
    return "".join(str(digit) for digit in reversed(digits))


def render(sign: Sign, digits: List[int]) -> str:
    """
    Каноническая строковая форма значения.

    - ноль → "0"
    - отрицательное → "-" + цифры
    - положительное → цифры без "+"

    Examples:
        >>> render(Sign.NEGATIVE, [1, 2])
        '-21'
        >>> render(Sign.ZERO, [0])
        '0'
    """
    if sign is Sign.ZERO:
        return "0"
    text = render_digits(digits)
    if sign is Sign.NEGATIVE:
        return "-" + text
    return text


# =============================================================================
# ВАЛИДАЦИЯ ИНВАРИАНТОВ
# =============================================================================


def check_invariants(sign: Sign, digits: List[int]) -> None:
    """
    Проверка всех инвариантов представления.

    Args:
        sign: Знак значения
        digits: Вектор цифр (младшая первой)

    Raises:
        InvariantViolation: Если хотя бы один инвариант нарушен
    """
    if not digits:
        raise InvariantViolation("digits must not be empty")

    for position, digit in enumerate(digits):
        if type(digit) is not int or not (ZERO_DIGIT <= digit <= MAX_DIGIT):
            raise InvariantViolation(
                f"digit {digit!r} at position {position} is outside [0, {MAX_DIGIT}]"
            )

    if len(digits) > 1 and digits[-1] == ZERO_DIGIT:
        raise InvariantViolation(
            f"most significant digit is zero (length {len(digits)})"
        )

    if (sign is Sign.ZERO) != is_zero_digits(digits):
        raise InvariantViolation(
            f"sign {sign.value} is inconsistent with digits {render_digits(digits)}"
        )
