"""
Unit Definitions — декларация именованных единиц каталога

Каждая единица объявляется ровно один раз: UnitDefinition (pydantic, frozen)
валидирует параметры, derive_unit строит ConversionFactor, UnitRegistry
хранит результат под уникальным именем.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Имя единицы уникально в реестре → повтор = ValueError
2. ratio_num != 0, все знаменатели > 0 (валидация pydantic)
3. После заполнения при импорте реестр только читается
"""

import logging
from typing import Final, Iterator

from pydantic import BaseModel, Field, field_validator

from dimcalc.core.domain.conversion_factor import ConversionFactor, derive_unit

logger = logging.getLogger(__name__)


# =============================================================================
# METRIC PREFIXES
# =============================================================================

# Префикс → (числитель, знаменатель) множителя
METRIC_PREFIXES: Final[dict[str, tuple[int, int]]] = {
    "femto": (1, 10**15),
    "pico": (1, 10**12),
    "nano": (1, 10**9),
    "micro": (1, 10**6),
    "milli": (1, 10**3),
    "centi": (1, 10**2),
    "deci": (1, 10),
    "deca": (10, 1),
    "hecto": (10**2, 1),
    "kilo": (10**3, 1),
    "mega": (10**6, 1),
    "giga": (10**9, 1),
    "tera": (10**12, 1),
    "peta": (10**15, 1),
}

BINARY_PREFIXES: Final[dict[str, tuple[int, int]]] = {
    "kibi": (2**10, 1),
    "mebi": (2**20, 1),
    "gibi": (2**30, 1),
    "tebi": (2**40, 1),
    "pebi": (2**50, 1),
    "exbi": (2**60, 1),
}


# =============================================================================
# UNIT DEFINITION MODEL
# =============================================================================


class UnitDefinition(BaseModel):
    """
    Параметры единицы относительно существующей base.

    value [unit] == value * (ratio_num/ratio_den) * π^(pi_num/pi_den) [base]
                    + translation_num/translation_den [base]

    Сама base в модель не входит: модель валидирует только целочисленные
    параметры, apply(base) строит ConversionFactor.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Уникальное имя единицы (например, 'feet')")

    ratio_num: int = Field(..., strict=True, description="Числитель множителя (ненулевой)")
    ratio_den: int = Field(1, strict=True, gt=0, description="Знаменатель множителя")
    pi_num: int = Field(0, strict=True, description="Числитель показателя степени π")
    pi_den: int = Field(1, strict=True, gt=0, description="Знаменатель показателя степени π")
    translation_num: int = Field(0, strict=True, description="Числитель аддитивного сдвига")
    translation_den: int = Field(1, strict=True, gt=0, description="Знаменатель сдвига")

    model_config = {"frozen": True}  # Immutable

    @field_validator("ratio_num")
    @classmethod
    def validate_ratio_nonzero(cls, v: int) -> int:
        """Нулевой множитель сделал бы конверсию необратимой."""
        if v == 0:
            raise ValueError("ratio_num must be nonzero")
        return v

    def apply(self, base: ConversionFactor) -> ConversionFactor:
        """
        ConversionFactor новой единицы, построенный через derive_unit.

        Raises:
            TypeError: Если base не ConversionFactor
        """
        if not isinstance(base, ConversionFactor):
            raise TypeError(
                f"Unit {self.name!r} base must be a ConversionFactor, got {type(base).__name__}"
            )
        return derive_unit(
            base,
            self.ratio_num,
            self.ratio_den,
            self.pi_num,
            self.pi_den,
            self.translation_num,
            self.translation_den,
        )


# =============================================================================
# UNIT REGISTRY
# =============================================================================


class UnitRegistry:
    """
    Реестр именованных единиц.

    Examples:
        >>> registry = UnitRegistry()
        >>> meters = registry.register("meters", base_factor(LENGTH))
        >>> feet = registry.define("feet", meters, 381, 1250)
        >>> registry.get("feet") is feet
        True
    """

    def __init__(self) -> None:
        self._units: dict[str, ConversionFactor] = {}

    def register(self, name: str, factor: ConversionFactor) -> ConversionFactor:
        """
        Регистрация готового ConversionFactor (например, составной единицы).

        Raises:
            ValueError: Если имя пустое или уже занято
            TypeError: Если factor не ConversionFactor
        """
        if not name:
            raise ValueError("Unit name must be non-empty")
        if not isinstance(factor, ConversionFactor):
            raise TypeError(f"Unit {name!r} must be a ConversionFactor, got {type(factor).__name__}")
        if name in self._units:
            raise ValueError(f"Unit {name!r} is already defined")

        self._units[name] = factor
        logger.debug(
            "Registered unit %s: dimension=[%s] ratio=%s pi=%s translation=%s",
            name,
            factor.dimension,
            factor.ratio,
            factor.pi_exponent,
            factor.translation,
        )
        return factor

    def define(
        self,
        name: str,
        base: ConversionFactor,
        ratio_num: int,
        ratio_den: int = 1,
        pi_num: int = 0,
        pi_den: int = 1,
        translation_num: int = 0,
        translation_den: int = 1,
    ) -> ConversionFactor:
        """
        Объявление единицы относительно base (см. UnitDefinition).

        Raises:
            pydantic.ValidationError: Некорректные параметры определения
            ValueError: Если имя уже занято
        """
        if name in self._units:
            raise ValueError(f"Unit {name!r} is already defined")
        definition = UnitDefinition(
            name=name,
            ratio_num=ratio_num,
            ratio_den=ratio_den,
            pi_num=pi_num,
            pi_den=pi_den,
            translation_num=translation_num,
            translation_den=translation_den,
        )
        return self.register(definition.name, definition.apply(base))

    def define_prefixed(
        self,
        name: str,
        base: ConversionFactor,
        prefixes: dict[str, tuple[int, int]] = METRIC_PREFIXES,
    ) -> dict[str, ConversionFactor]:
        """
        Объявление семейства единиц с префиксами: kilo{name}, milli{name}, ...

        Returns:
            Отображение полного имени → ConversionFactor
        """
        return {
            prefix + name: self.define(prefix + name, base, num, den)
            for prefix, (num, den) in prefixes.items()
        }

    def get(self, name: str) -> ConversionFactor:
        """
        Raises:
            KeyError: Если единица не определена
        """
        try:
            return self._units[name]
        except KeyError:
            raise KeyError(f"Unknown unit: {name!r}") from None

    def names(self) -> list[str]:
        return sorted(self._units)

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)


# =============================================================================
# DEFAULT REGISTRY
# =============================================================================

REGISTRY = UnitRegistry()


def define_unit(
    name: str,
    base: ConversionFactor,
    ratio_num: int,
    ratio_den: int = 1,
    pi_num: int = 0,
    pi_den: int = 1,
    translation_num: int = 0,
    translation_den: int = 1,
) -> ConversionFactor:
    """Объявление единицы в реестре по умолчанию."""
    return REGISTRY.define(
        name, base, ratio_num, ratio_den, pi_num, pi_den, translation_num, translation_den
    )


def register_unit(name: str, factor: ConversionFactor) -> ConversionFactor:
    """Регистрация готового ConversionFactor в реестре по умолчанию."""
    return REGISTRY.register(name, factor)


def get_unit(name: str) -> ConversionFactor:
    return REGISTRY.get(name)


def define_prefixed_units(
    name: str,
    base: ConversionFactor,
    prefixes: dict[str, tuple[int, int]] = METRIC_PREFIXES,
) -> dict[str, ConversionFactor]:
    """Семейство единиц с префиксами в реестре по умолчанию."""
    return REGISTRY.define_prefixed(name, base, prefixes)
