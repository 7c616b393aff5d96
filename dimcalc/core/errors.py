"""
Exceptions — таксономия ошибок движка единиц

Все ошибки обнаруживаются в точке конструирования или комбинирования значений
и пропагируют к вызывающему коду. Ни одна ошибка не подменяется нулём или NaN.

Иерархия:
    DimcalcError
    ├── InvalidDomainError        (ValueError)      — аргумент вне области определения
    ├── RationalOverflowError     (OverflowError)   — выход за допустимый диапазон Rational
    ├── IncompatibleDimensionError (TypeError)      — несовместимые размерности
    ├── IncompatibleScaleError    (TypeError)       — несовместимые шкалы (linear/decibel)
    └── DivideByZeroError         (ZeroDivisionError)
"""

from typing import Any


class DimcalcError(Exception):
    """Базовое исключение dimcalc."""

    pass


class InvalidDomainError(DimcalcError, ValueError):
    """
    Аргумент вне области определения операции.

    Примеры: отрицательный Rational в ratio_sqrt, нулевой ratio у
    ConversionFactor, NaN/Inf значение, float вместо точного рационального.
    """

    pass


class RationalOverflowError(DimcalcError, OverflowError):
    """
    Числитель или знаменатель Rational вышел за допустимый диапазон.

    Означает некорректное статическое определение единицы (ошибка автора
    каталога), а не плохой runtime-ввод.
    """

    pass


class IncompatibleDimensionError(DimcalcError, TypeError):
    """
    Операция требует совместимых размерностей, но они различаются.

    Например: конверсия метров в секунды, сложение длины и массы.
    """

    def __init__(self, message: str, lhs: Any = None, rhs: Any = None) -> None:
        super().__init__(message)
        self.lhs = lhs
        self.rhs = rhs


class IncompatibleScaleError(DimcalcError, TypeError):
    """Операция не определена для данной комбинации шкал."""

    pass


class DivideByZeroError(DimcalcError, ZeroDivisionError):
    """Деление на нулевой Rational или обращение нуля."""

    pass
