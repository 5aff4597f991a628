"""
Тесты для Additive Kernel — сложение и вычитание с учётом знака

Проверяемые инварианты:
1. Перенос (carry) через все разряды и дополнительная старшая цифра
2. Заём (borrow) через цепочку нулей
3. Все девять комбинаций знаков для сложения и вычитания
4. Нулевой результат всегда канонический (Sign.ZERO, [0])
5. Операнды чистых функций не меняются
"""

import pytest

from src.core.math.additive import (
    add_inplace,
    add_magnitudes_inplace,
    signed_add,
    signed_subtract,
    subtract_inplace,
    subtract_magnitudes_inplace,
)
from src.core.math.digits import InvariantViolation, check_invariants, render
from src.core.math.parsing import parse_decimal_strict
from src.core.math.sign import Sign


def add(left: str, right: str) -> str:
    sign, digits = signed_add(*parse_decimal_strict(left), *parse_decimal_strict(right))
    check_invariants(sign, digits)
    return render(sign, digits)


def sub(left: str, right: str) -> str:
    sign, digits = signed_subtract(*parse_decimal_strict(left), *parse_decimal_strict(right))
    check_invariants(sign, digits)
    return render(sign, digits)


# =============================================================================
# ТЕСТЫ: Операции над модулями
# =============================================================================


class TestAddMagnitudes:
    """Тесты add_magnitudes_inplace"""

    def test_carry_appends_digit(self) -> None:
        # 999 + 1 = 1000
        assert add_magnitudes_inplace([9, 9, 9], [1]) == [0, 0, 0, 1]

    def test_shorter_target_grows(self) -> None:
        # 5 + 995 = 1000
        assert add_magnitudes_inplace([5], [5, 9, 9]) == [0, 0, 0, 1]

    def test_in_place(self) -> None:
        target = [1, 2]
        result = add_magnitudes_inplace(target, [3])
        assert result is target
        assert target == [4, 2]

    def test_aliased_operand(self) -> None:
        """a += a при совпадающих списках"""
        digits = [5, 9]
        add_magnitudes_inplace(digits, digits)
        assert digits == [0, 9, 1]  # 95 + 95 = 190


class TestSubtractMagnitudes:
    """Тесты subtract_magnitudes_inplace"""

    def test_borrow_through_zeros(self) -> None:
        # 1000 - 1 = 999
        assert subtract_magnitudes_inplace([0, 0, 0, 1], [1]) == [9, 9, 9]

    def test_strips_high_zeros(self) -> None:
        # 100000 - 99999 = 1
        assert subtract_magnitudes_inplace([0, 0, 0, 0, 0, 1], [9, 9, 9, 9, 9]) == [1]

    def test_equal_magnitudes_collapse_to_zero(self) -> None:
        assert subtract_magnitudes_inplace([3, 2, 1], [3, 2, 1]) == [0]

    def test_larger_subtrahend_rejected(self) -> None:
        with pytest.raises(InvariantViolation):
            subtract_magnitudes_inplace([1], [2])


# =============================================================================
# ТЕСТЫ: Сложение со знаком
# =============================================================================


class TestSignedAdd:
    """Тесты сложения по парам знаков"""

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            # other == 0
            ("-5", "0", "-5"),
            ("0", "0", "0"),
            ("5", "0", "5"),
            # this == 0
            ("0", "-5", "-5"),
            ("0", "5", "5"),
            # одинаковые знаки
            ("99999999999999999999", "1", "100000000000000000000"),
            ("-123", "-877", "-1000"),
            # разные знаки
            ("-999", "1000", "1"),
            ("5", "-12", "-7"),
            ("12", "-5", "7"),
            ("-12", "5", "-7"),
            ("-5", "12", "7"),
            ("7", "-7", "0"),
            ("-7", "7", "0"),
        ],
    )
    def test_sign_pairs(self, left, right, expected) -> None:
        assert add(left, right) == expected

    def test_mixed_sign_large(self) -> None:
        assert (
            add("12345678910111213141516", "-161718192021222324252627")
            == "-149372513111111111111111"
        )
        assert (
            add("295712491461964816498164981", "-343284521048104795104781")
            == "295369206940916711703060200"
        )

    def test_operands_untouched(self) -> None:
        left = parse_decimal_strict("999")
        right = parse_decimal_strict("1")
        signed_add(*left, *right)
        assert left == (Sign.POSITIVE, [9, 9, 9])
        assert right == (Sign.POSITIVE, [1])


# =============================================================================
# ТЕСТЫ: Вычитание со знаком
# =============================================================================


class TestSignedSubtract:
    """Тесты вычитания по парам знаков"""

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            # other == 0
            ("-5", "0", "-5"),
            ("5", "0", "5"),
            ("0", "0", "0"),
            # this == 0 → -other
            ("0", "5", "-5"),
            ("0", "-5", "5"),
            # одинаковые знаки, равные модули
            ("42", "42", "0"),
            ("-42", "-42", "0"),
            # одинаковые знаки, |this| > |other|
            ("1000", "999", "1"),
            ("-1000", "-999", "-1"),
            # одинаковые знаки, |this| < |other|
            ("5", "12", "-7"),
            ("-5", "-12", "7"),
            # разные знаки
            ("5", "-12", "17"),
            ("-5", "12", "-17"),
        ],
    )
    def test_sign_pairs(self, left, right, expected) -> None:
        assert sub(left, right) == expected

    def test_borrow_across_word_size(self) -> None:
        assert sub("10000000000000000000000", "1") == "9999999999999999999999"

    def test_negative_minus_positive(self) -> None:
        assert (
            sub("-10000000000000000000000", "10000000000000000000000")
            == "-20000000000000000000000"
        )

    def test_near_equal_values(self) -> None:
        assert sub("1234567890123456789", "1234567890123456788") == "1"
        assert sub("1234567890123456788", "1234567890123456789") == "-1"


class TestInPlaceKernel:
    """Тесты in-place форм"""

    def test_add_inplace_mutates_digits(self) -> None:
        sign, digits = parse_decimal_strict("-1")
        new_sign = add_inplace(sign, digits, *parse_decimal_strict("1"))
        assert new_sign is Sign.ZERO
        assert digits == [0]

    def test_subtract_inplace_flips_sign(self) -> None:
        sign, digits = parse_decimal_strict("3")
        new_sign = subtract_inplace(sign, digits, *parse_decimal_strict("10"))
        assert new_sign is Sign.NEGATIVE
        assert digits == [7]

    def test_zero_receiver_copies_other(self) -> None:
        """Цифры копируются, а не разделяются"""
        other_sign, other_digits = parse_decimal_strict("25")
        digits = [0]
        new_sign = add_inplace(Sign.ZERO, digits, other_sign, other_digits)
        digits.append(7)
        assert new_sign is Sign.POSITIVE
        assert other_digits == [5, 2]
