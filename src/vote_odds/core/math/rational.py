"""
ExactRational — Canonical Arbitrary-Precision Fractions

Immutable value object для точной рациональной арифметики. Используется как
"валюта" вероятностей во всём движке: ни одна операция не проходит через float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Ноль всегда представлен как 0/1
4. Каноническая форма: два значения равны ⇔ равны пары (numerator, denominator)
5. Единственный режим отказа — нулевой знаменатель (RationalDivisionByZero)

Python int имеет произвольную точность, поэтому переполнение невозможно.
"""

import math
from dataclasses import dataclass
from typing import Final, Union


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RationalDivisionByZero(ZeroDivisionError):
    """
    Попытка построить дробь с нулевым знаменателем.

    Для валидной таблицы весов (непустой, все веса > 0) недостижимо:
    каждый знаменатель в движке — сумма или произведение положительных чисел.
    Возникновение означает нарушение внутреннего инварианта.
    """

    pass


# =============================================================================
# EXACT RATIONAL
# =============================================================================


@dataclass(frozen=True)
class ExactRational:
    """
    Неизменяемая дробь numerator/denominator в канонической форме.

    Нормализация выполняется в конструкторе, поэтому любой экземпляр
    уже сокращён и имеет положительный знаменатель:

    Examples:
        >>> ExactRational(6, -4)
        ExactRational(numerator=-3, denominator=2)
        >>> str(ExactRational(0, 7))
        '0'
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        n = self.numerator
        d = self.denominator

        if d == 0:
            raise RationalDivisionByZero(
                f"Denominator of rational is zero (numerator={n})"
            )

        if d < 0:
            n, d = -n, -d

        # math.gcd(0, d) == d, поэтому ноль сворачивается в 0/1
        g = math.gcd(n, d)
        object.__setattr__(self, "numerator", n // g)
        object.__setattr__(self, "denominator", d // g)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def make(cls, n: int, d: int = 1) -> "ExactRational":
        """
        Построение дроби n/d с сокращением.

        Raises:
            RationalDivisionByZero: если d == 0
        """
        return cls(n, d)

    @classmethod
    def from_percent(cls, percent: int) -> "ExactRational":
        """
        Конверсия целого процента в долю: percent/100.

        Диапазон не проверяется: 130% или -5% дают корректные дроби.
        """
        return cls(percent, PERCENT_DENOMINATOR)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "ExactRational") -> "ExactRational":
        """a/b + c/d = (a*d + c*b) / (b*d)"""
        return ExactRational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def negate(self) -> "ExactRational":
        return ExactRational(-self.numerator, self.denominator)

    def subtract(self, other: "ExactRational") -> "ExactRational":
        return self.add(other.negate())

    def multiply(self, other: "ExactRational") -> "ExactRational":
        """a/b * c/d = (a*c) / (b*d)"""
        return ExactRational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def compare_to(self, other: "ExactRational") -> int:
        """
        Точное сравнение через перекрёстное умножение.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        # Знаменатели положительны, поэтому знак неравенства сохраняется
        lhs = self.numerator * other.denominator
        rhs = other.numerator * self.denominator
        if lhs < rhs:
            return -1
        if lhs > rhs:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self.numerator == 0

    def to_string(self) -> str:
        """
        Строковое представление: "n" если знаменатель 1, иначе "n/d".
        """
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "RationalLike") -> "ExactRational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    __radd__ = __add__

    def __sub__(self, other: "RationalLike") -> "ExactRational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.subtract(rhs)

    def __rsub__(self, other: "RationalLike") -> "ExactRational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.subtract(self)

    def __mul__(self, other: "RationalLike") -> "ExactRational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply(rhs)

    __rmul__ = __mul__

    def __neg__(self) -> "ExactRational":
        return self.negate()

    def __lt__(self, other: "ExactRational") -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) < 0

    def __le__(self, other: "ExactRational") -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) <= 0

    def __gt__(self, other: "ExactRational") -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) > 0

    def __ge__(self, other: "ExactRational") -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare_to(rhs) >= 0

    def __str__(self) -> str:
        return self.to_string()


RationalLike = Union[ExactRational, int]


def _coerce(value: object) -> ExactRational | None:
    """int → n/1; ExactRational без изменений; остальное не поддерживается."""
    if isinstance(value, ExactRational):
        return value
    # bool не принимается как операнд
    if isinstance(value, int) and not isinstance(value, bool):
        return ExactRational(value, 1)
    return None


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Знаменатель процентных параметров (discard/continuation chance)
PERCENT_DENOMINATOR: Final[int] = 100

ZERO: Final[ExactRational] = ExactRational(0, 1)
ONE: Final[ExactRational] = ExactRational(1, 1)
