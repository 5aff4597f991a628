"""
Core math modules для BigInt

Представление (sign, digits) и алгоритмы над ним: разбор, сравнение,
сложение/вычитание с переносом и заёмом, умножение в столбик.
"""

# Sign
from src.core.math.sign import Sign

# Digits — представление и инварианты
from src.core.math.digits import (
    BASE,
    MAX_DIGIT,
    ZERO_DIGIT,
    InvariantViolation,
    check_invariants,
    digits_from_int,
    digits_to_int,
    is_zero_digits,
    render,
    render_digits,
    sign_for_digits,
    strip_high_zeros,
    zero_digits,
)

# Parsing
from src.core.math.parsing import (
    DEFAULT_PARSE_CONFIG,
    BigIntParseError,
    ParseConfig,
    ParseErrorKind,
    ParseResult,
    parse_decimal,
    parse_decimal_strict,
    parse_native,
)

# Comparison
from src.core.math.comparison import (
    compare,
    compare_magnitudes,
    equals,
    is_abs_greater,
    less_than,
)

# Additive Kernel
from src.core.math.additive import (
    add_inplace,
    add_magnitudes_inplace,
    signed_add,
    signed_subtract,
    subtract_inplace,
    subtract_magnitudes_inplace,
)

# Multiplicative Kernel
from src.core.math.multiplicative import (
    multiply_inplace,
    multiply_magnitudes,
    partial_product,
    signed_multiply,
)

__all__ = [
    # Sign
    "Sign",
    # Digits — Constants
    "BASE",
    "MAX_DIGIT",
    "ZERO_DIGIT",
    # Digits — Exceptions
    "InvariantViolation",
    # Digits — Functions
    "check_invariants",
    "digits_from_int",
    "digits_to_int",
    "is_zero_digits",
    "render",
    "render_digits",
    "sign_for_digits",
    "strip_high_zeros",
    "zero_digits",
    # Parsing — Config
    "DEFAULT_PARSE_CONFIG",
    "ParseConfig",
    # Parsing — Errors
    "BigIntParseError",
    "ParseErrorKind",
    # Parsing — Types
    "ParseResult",
    # Parsing — Functions
    "parse_decimal",
    "parse_decimal_strict",
    "parse_native",
    # Comparison
    "compare",
    "compare_magnitudes",
    "equals",
    "is_abs_greater",
    "less_than",
    # Additive Kernel
    "add_inplace",
    "add_magnitudes_inplace",
    "signed_add",
    "signed_subtract",
    "subtract_inplace",
    "subtract_magnitudes_inplace",
    # Multiplicative Kernel
    "multiply_inplace",
    "multiply_magnitudes",
    "partial_product",
    "signed_multiply",
]
