"""
BigInt — целое число произвольной точности со знаком

Значение хранится как (sign, digits): явный знак и вектор десятичных цифр
модуля от младшей к старшей. Все операции делегируются ядрам из
src.core.math; класс отвечает за приведение операндов, атомарность
присваиваний и Python-протоколы (операторы, str/repr, int).

Изменяемый объект: +=, -=, *=, set() и assign() меняют значение на месте,
поэтому BigInt не хешируется. Каждый экземпляр владеет своим вектором цифр.
Для неизменяемого представления используйте snapshot().
"""

from typing import Any, Dict, List, Optional, TextIO, Tuple, Union

from src.core.contracts.validators import validate_bigint_value
from src.core.domain.snapshot import BigIntSnapshot
from src.core.math.additive import add_inplace, subtract_inplace
from src.core.math.comparison import equals, less_than
from src.core.math.digits import (
    InvariantViolation,
    check_invariants,
    digits_to_int,
    render,
    zero_digits,
)
from src.core.math.multiplicative import multiply_inplace
from src.core.math.parsing import (
    DEFAULT_PARSE_CONFIG,
    BigIntParseError,
    ParseConfig,
    parse_decimal,
    parse_native,
)
from src.core.math.sign import Sign

BigIntLike = Union["BigInt", int]


class BigInt:
    """
    Целое число произвольной точности.

    Examples:
        >>> BigInt("10000000000000000000000") - 1
        BigInt('9999999999999999999999')
        >>> str(BigInt(-31642))
        '-31642'
    """

    __slots__ = ("_sign", "_digits")

    # Изменяемый объект
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: Union["BigInt", int, str, None] = None,
        config: ParseConfig = DEFAULT_PARSE_CONFIG,
    ):
        """
        Args:
            value: None (канонический ноль), int, десятичная строка или BigInt
            config: Конфигурация разбора строк

        Raises:
            BigIntParseError: Если строка не проходит валидацию
            TypeError: Если тип value не поддерживается
        """
        if value is None:
            self._sign = Sign.ZERO
            self._digits = zero_digits()
        else:
            self._sign, self._digits = self._resolve(value, config)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @staticmethod
    def _resolve(value: Any, config: ParseConfig) -> Tuple[Sign, List[int]]:
        # Возвращает новое представление, не трогая никакой экземпляр
        if isinstance(value, BigInt):
            return value._sign, list(value._digits)
        if isinstance(value, str):
            return parse_decimal(value, config).unwrap()
        return parse_native(value)

    @classmethod
    def _from_parts(cls, sign: Sign, digits: List[int]) -> "BigInt":
        instance = cls.__new__(cls)
        instance._sign = sign
        instance._digits = digits
        return instance

    @classmethod
    def from_int(cls, number: int) -> "BigInt":
        """Значение из native int."""
        return cls._from_parts(*parse_native(number))

    @classmethod
    def from_string(cls, text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> "BigInt":
        """
        Значение из десятичной строки.

        Raises:
            BigIntParseError: EMPTY_INPUT / LEADING_ZEROS / NON_DIGIT_CHARACTER
        """
        return cls._from_parts(*parse_decimal(text, config).unwrap())

    @classmethod
    def try_parse(
        cls, text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG
    ) -> Tuple[Optional["BigInt"], Optional[BigIntParseError]]:
        """
        Разбор без исключения.

        Returns:
            (value, None) при успехе или (None, error) при ошибке
        """
        result = parse_decimal(text, config)
        if not result.ok:
            return None, result.error
        return cls._from_parts(*result.unwrap()), None

    # =========================================================================
    # ПРИСВАИВАНИЕ
    # =========================================================================

    def set(self, value: Union["BigInt", int, str], config: ParseConfig = DEFAULT_PARSE_CONFIG) -> "BigInt":
        """
        Замена значения на месте.

        Новое представление полностью строится до записи в экземпляр:
        при ошибке разбора значение остаётся прежним.

        Raises:
            BigIntParseError: Если строка не проходит валидацию
            TypeError: Если тип value не поддерживается
        """
        sign, digits = self._resolve(value, config)
        self._sign, self._digits = sign, digits
        return self

    def assign(self, other: "BigInt") -> "BigInt":
        """Копирование значения другого BigInt (без разделения цифр)."""
        if other is not self:
            self._sign = other._sign
            self._digits = list(other._digits)
        return self

    def copy(self) -> "BigInt":
        return self._from_parts(self._sign, list(self._digits))

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> "BigInt":
        return self.copy()

    # =========================================================================
    # ДОСТУП К ПРЕДСТАВЛЕНИЮ
    # =========================================================================

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def digits(self) -> Tuple[int, ...]:
        """Цифры модуля, младшая первой (копия)."""
        return tuple(self._digits)

    @property
    def is_zero(self) -> bool:
        return self._sign is Sign.ZERO

    def check_invariants(self) -> None:
        """
        Raises:
            InvariantViolation: Если представление не каноническое
        """
        check_invariants(self._sign, self._digits)

    # =========================================================================
    # УНАРНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def __neg__(self) -> "BigInt":
        return self._from_parts(self._sign.negated(), list(self._digits))

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        if self._sign is Sign.NEGATIVE:
            return -self
        return self.copy()

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @staticmethod
    def _coerce(other: Any) -> Optional["BigInt"]:
        # Строки не приводятся неявно: только BigInt и int
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInt.from_int(other)
        return None

    def __iadd__(self, other: BigIntLike) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        self._sign = add_inplace(self._sign, self._digits, operand._sign, operand._digits)
        return self

    def __isub__(self, other: BigIntLike) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        self._sign = subtract_inplace(self._sign, self._digits, operand._sign, operand._digits)
        return self

    def __imul__(self, other: BigIntLike) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        self._sign = multiply_inplace(self._sign, self._digits, operand._sign, operand._digits)
        return self

    def __add__(self, other: BigIntLike) -> "BigInt":
        if self._coerce(other) is None:
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: BigIntLike) -> "BigInt":
        if self._coerce(other) is None:
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: BigIntLike) -> "BigInt":
        if self._coerce(other) is None:
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __radd__(self, other: int) -> "BigInt":
        return self.__add__(other)

    def __rsub__(self, other: int) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand - self

    def __rmul__(self, other: int) -> "BigInt":
        return self.__mul__(other)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return equals(self._sign, self._digits, operand._sign, operand._digits)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigIntLike) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return less_than(self._sign, self._digits, operand._sign, operand._digits)

    def __gt__(self, other: BigIntLike) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self.__lt__(operand) and not self.__eq__(operand)

    def __ge__(self, other: BigIntLike) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self.__lt__(operand)

    def __le__(self, other: BigIntLike) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self.__gt__(operand)

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def __bool__(self) -> bool:
        return self._sign is not Sign.ZERO

    def __int__(self) -> int:
        magnitude = digits_to_int(self._digits)
        return -magnitude if self._sign is Sign.NEGATIVE else magnitude

    def __str__(self) -> str:
        return render(self._sign, self._digits)

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"

    def write_to(self, stream: TextIO, end: str = "") -> None:
        """
        Запись канонической формы в текстовый поток.

        Args:
            stream: Поток с методом write (файл, sys.stdout, io.StringIO)
            end: Суффикс после числа; перевод строки решает вызывающий
        """
        stream.write(str(self) + end)

    # =========================================================================
    # СНИМКИ И СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def snapshot(self) -> BigIntSnapshot:
        """Неизменяемый снимок текущего значения."""
        return BigIntSnapshot(sign=self._sign, digits=tuple(self._digits))

    @classmethod
    def from_snapshot(cls, snapshot: BigIntSnapshot) -> "BigInt":
        return cls._from_parts(snapshot.sign, list(snapshot.digits))

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление (контракт bigint_value).

        Returns:
            {"sign": str, "digits": [int, ...], "decimal": str}
        """
        return {
            "sign": self._sign.value,
            "digits": list(self._digits),
            "decimal": str(self),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BigInt":
        """
        Значение из документа bigint_value.

        Raises:
            ValidationError: Если документ не соответствует схеме
            InvariantViolation: Если sign/digits/decimal несогласованы
        """
        validate_bigint_value(data)

        sign = Sign(data["sign"])
        digits = list(data["digits"])
        check_invariants(sign, digits)

        instance = cls._from_parts(sign, digits)
        if str(instance) != data["decimal"]:
            raise InvariantViolation(
                f"decimal {data['decimal']!r} does not match digits ({instance})"
            )
        return instance
