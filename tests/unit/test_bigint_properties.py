"""
Property-based тесты BigInt (hypothesis)

Каждое свойство сверяется с native int Python как эталоном.

Проверяемые инварианты:
1. Разбор → рендеринг возвращает исходную строку ('+' нормализуется)
2. a - a == 0, a + (-a) == 0
3. Коммутативность и ассоциативность сложения, коммутативность умножения,
   дистрибутивность
4. Строгий полный порядок, согласованный с равенством
5. Умножение на ноль и правило знака произведения
6. Инварианты представления после каждой операции
"""

from hypothesis import given, strategies as st

from src.core.domain import BigInt, Sign

# Значения далеко за пределами 64-битного слова
big_ints = st.integers(min_value=-(10**60), max_value=10**60)

decimal_literals = st.builds(
    lambda sign, body: sign + body,
    st.sampled_from(["", "+", "-"]),
    st.one_of(
        st.just("0"),
        st.from_regex(r"[1-9][0-9]{0,50}", fullmatch=True),
    ),
)


def expected_text(text: str) -> str:
    body = text.lstrip("+-")
    if body == "0":
        return "0"
    return text.lstrip("+")


@given(decimal_literals)
def test_parse_render_round_trip(text):
    value = BigInt(text)
    value.check_invariants()
    assert str(value) == expected_text(text)


@given(big_ints)
def test_native_int_round_trip(number):
    value = BigInt(number)
    value.check_invariants()
    assert int(value) == number
    assert str(value) == str(number)


@given(big_ints)
def test_self_cancellation(number):
    a = BigInt(number)
    difference = a - a
    total = a + (-a)
    assert difference.sign is Sign.ZERO
    assert difference.digits == (0,)
    assert total == BigInt()
    total.check_invariants()


@given(big_ints, big_ints)
def test_addition_matches_native(x, y):
    result = BigInt(x) + BigInt(y)
    result.check_invariants()
    assert int(result) == x + y


@given(big_ints, big_ints)
def test_subtraction_matches_native(x, y):
    result = BigInt(x) - BigInt(y)
    result.check_invariants()
    assert int(result) == x - y


@given(big_ints, big_ints)
def test_multiplication_matches_native(x, y):
    result = BigInt(x) * BigInt(y)
    result.check_invariants()
    assert int(result) == x * y


@given(big_ints, big_ints, big_ints)
def test_addition_commutative_and_associative(x, y, z):
    a, b, c = BigInt(x), BigInt(y), BigInt(z)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)


@given(big_ints, big_ints, big_ints)
def test_multiplication_commutative_and_distributive(x, y, z):
    a, b, c = BigInt(x), BigInt(y), BigInt(z)
    assert a * b == b * a
    assert a * (b + c) == a * b + a * c


@given(big_ints, big_ints)
def test_strict_total_order(x, y):
    a, b = BigInt(x), BigInt(y)
    outcomes = [a < b, a == b, a > b]
    assert outcomes.count(True) == 1
    assert (a < b) == (x < y)
    assert (a <= b) == (x <= y)
    assert (a >= b) == (x >= y)


@given(big_ints)
def test_multiply_by_zero(x):
    result = BigInt(x) * BigInt()
    assert result.sign is Sign.ZERO
    assert result.digits == (0,)
    assert (BigInt() * BigInt(x)).is_zero


@given(big_ints, big_ints)
def test_product_sign_rule(x, y):
    product = BigInt(x) * BigInt(y)
    if x == 0 or y == 0:
        assert product.sign is Sign.ZERO
    elif (x > 0) == (y > 0):
        assert product.sign is Sign.POSITIVE
    else:
        assert product.sign is Sign.NEGATIVE


@given(big_ints, big_ints)
def test_inplace_matches_pure(x, y):
    a = BigInt(x)
    a += BigInt(y)
    assert a == BigInt(x) + BigInt(y)
    a -= BigInt(y)
    assert a == x
    a *= BigInt(y)
    assert a == BigInt(x) * BigInt(y)
    a.check_invariants()
