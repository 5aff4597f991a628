"""
Parsing — построение валидного представления из native int или строки

Грамматика входной строки (только ASCII):

    [+-]? ( "0" | [1-9][0-9]* )

Модуль обеспечивает:
- Разбор native int (повторное деление, младшая цифра первой)
- Разбор десятичной строки с полной валидацией ДО записи любых цифр
- Явный результат разбора (ParseResult) без исключений для вызывающих,
  которым нужна проверка без try/except
- Исключение BigIntParseError для конструкторов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. При ошибке не существует частично заполненного представления
2. Каждая ошибка — новый экземпляр BigIntParseError (kind + message)
3. Никакой молчаливой коррекции входа (обрезка хвоста, пробелы и т.п.)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, List, Optional, Tuple

from src.core.math.digits import digits_from_int, zero_digits
from src.core.math.sign import Sign

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ГРАММАТИКИ
# =============================================================================

PLUS_SIGN: Final[str] = "+"
MINUS_SIGN: Final[str] = "-"
SIGN_CHARS: Final[str] = PLUS_SIGN + MINUS_SIGN

ASCII_DIGITS: Final[str] = "0123456789"


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ParseConfig:
    """Конфигурация разбора десятичных строк.

    - allow_signed_zero: "+0" и "-0" принимаются как канонический ноль.
      Если False, такие литералы отклоняются как LEADING_ZEROS.
    """

    allow_signed_zero: bool = True


DEFAULT_PARSE_CONFIG: Final[ParseConfig] = ParseConfig()


# =============================================================================
# ОШИБКИ РАЗБОРА
# =============================================================================


class ParseErrorKind(str, Enum):
    """Категория ошибки разбора"""

    EMPTY_INPUT = "empty_input"
    LEADING_ZEROS = "leading_zeros"
    NON_DIGIT_CHARACTER = "non_digit_character"


_MESSAGES: Final[dict] = {
    ParseErrorKind.EMPTY_INPUT: "The input string is empty",
    ParseErrorKind.LEADING_ZEROS: "The input number cannot have leading zeros",
    ParseErrorKind.NON_DIGIT_CHARACTER: "The input string contains non digit characters",
}


class BigIntParseError(ValueError):
    """
    Ошибка разбора десятичной строки.

    Создаётся заново в каждой точке отказа: экземпляры не разделяются
    между вызовами.

    Attributes:
        kind: Категория ошибки (ParseErrorKind)
        text: Исходная строка
        message: Человекочитаемое описание
    """

    def __init__(self, kind: ParseErrorKind, text: str, detail: str = ""):
        self.kind = kind
        self.text = text
        message = f"{_MESSAGES[kind]}: {text!r}"
        if detail:
            message = f"{message} ({detail})"
        self.message = message
        super().__init__(message)


# =============================================================================
# РЕЗУЛЬТАТ РАЗБОРА
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора: либо (sign, digits), либо error."""

    sign: Optional[Sign] = None
    digits: List[int] = field(default_factory=list)
    error: Optional[BigIntParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Tuple[Sign, List[int]]:
        """
        Извлечение успешного результата.

        Returns:
            Кортеж (sign, копия digits)

        Raises:
            BigIntParseError: Если разбор завершился ошибкой
        """
        if self.error is not None:
            raise self.error
        return self.sign, list(self.digits)


def _failure(kind: ParseErrorKind, text: str, detail: str = "") -> ParseResult:
    error = BigIntParseError(kind, text, detail)
    logger.debug("Rejected decimal literal: kind=%s text=%r", kind.value, text)
    return ParseResult(error=error)


# =============================================================================
# РАЗБОР NATIVE INT
# =============================================================================


def parse_native(number: int) -> Tuple[Sign, List[int]]:
    """
    Представление native int.

    Args:
        number: Целое число любого размера

    Returns:
        Кортеж (sign, digits), digits младшая первой

    Raises:
        TypeError: Если number не int (bool тоже отклоняется)

    Examples:
        >>> parse_native(-31642)
        (<Sign.NEGATIVE: 'negative'>, [2, 4, 6, 1, 3])
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Expected int, got {type(number).__name__}")
    if number == 0:
        return Sign.ZERO, zero_digits()
    return Sign.of(number), digits_from_int(number)


# =============================================================================
# РАЗБОР СТРОКИ
# =============================================================================


def _is_ascii_digits(run: str) -> bool:
    # str.isdigit() принимает не-ASCII цифры ("٣", "²"), поэтому проверка явная
    return all(char in ASCII_DIGITS for char in run)


def parse_decimal(text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> ParseResult:
    """
    Разбор десятичной строки без исключений.

    Порядок проверок:
    1. Пустая строка → EMPTY_INPUT
    2. Необязательный знак '+' / '-' снимается и фиксирует знак
    3. "0" (в т.ч. "+0"/"-0" при allow_signed_zero) → канонический ноль
    4. '0' с последующими символами → LEADING_ZEROS
    5. Любой символ вне 0-9 (или пустой остаток после знака) → NON_DIGIT_CHARACTER
    6. Цифры записываются от младшей к старшей

    Args:
        text: Входная строка
        config: Конфигурация разбора

    Returns:
        ParseResult с (sign, digits) или с error

    Raises:
        TypeError: Если text не str
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if len(text) == 0:
        return _failure(ParseErrorKind.EMPTY_INPUT, text)

    sign = Sign.POSITIVE
    run = text
    has_sign_prefix = text[0] in SIGN_CHARS
    if has_sign_prefix:
        if text[0] == MINUS_SIGN:
            sign = Sign.NEGATIVE
        run = text[1:]

    if run == "0":
        if has_sign_prefix and not config.allow_signed_zero:
            return _failure(ParseErrorKind.LEADING_ZEROS, text, "signed zero")
        return ParseResult(sign=Sign.ZERO, digits=zero_digits())

    if run.startswith("0"):
        return _failure(ParseErrorKind.LEADING_ZEROS, text)

    if not run or not _is_ascii_digits(run):
        return _failure(ParseErrorKind.NON_DIGIT_CHARACTER, text)

    digits = [ord(char) - ord("0") for char in reversed(run)]
    return ParseResult(sign=sign, digits=digits)


def parse_decimal_strict(
    text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG
) -> Tuple[Sign, List[int]]:
    """
    Разбор десятичной строки с исключением при ошибке.

    Raises:
        BigIntParseError: EMPTY_INPUT / LEADING_ZEROS / NON_DIGIT_CHARACTER
    """
    return parse_decimal(text, config).unwrap()
