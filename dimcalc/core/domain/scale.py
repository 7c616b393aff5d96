"""
Scale — числовая шкала Quantity

Шкала определяет связь между хранимым (линеаризованным) значением и
отображаемым значением, а также правило сложения/вычитания:

    LINEAR:   linearize(x) = x                 display(x) = x
    DECIBEL:  linearize(x) = 10^(x / 10)       display(x) = 10 * log10(x)

Decibel-величина хранит линеаризованное значение (отношение мощностей):
сложение dB ⇔ умножение линеаризованных значений, вычитание ⇔ деление.
"""

import math
from enum import Enum

from dimcalc.core.config import DECIBEL_BASE, DECIBEL_FACTOR
from dimcalc.core.errors import InvalidDomainError


class Scale(str, Enum):
    """Числовая шкала величины"""

    LINEAR = "linear"
    DECIBEL = "decibel"

    def linearize(self, value: float) -> float:
        """
        Отображаемое значение → линеаризованное (хранимое).

        Raises:
            InvalidDomainError: Для DECIBEL, если 10^(x/10) вне диапазона float
        """
        if self is Scale.DECIBEL:
            try:
                return DECIBEL_BASE ** (value / DECIBEL_FACTOR)
            except OverflowError as e:
                raise InvalidDomainError(
                    f"Decibel value {value} is out of float range when linearized"
                ) from e
        return value

    def display(self, value: float) -> float:
        """
        Линеаризованное значение → отображаемое.

        Raises:
            InvalidDomainError: Для DECIBEL при value <= 0
        """
        if self is Scale.DECIBEL:
            if value <= 0:
                raise InvalidDomainError(
                    f"Decibel display requires a positive linearized value, got {value}"
                )
            # log10 точнее math.log(x, base): log10(1000) == 3.0 ровно
            return DECIBEL_FACTOR * math.log10(value) / math.log10(DECIBEL_BASE)
        return value
