"""
Physical Constants — физические константы как готовые Quantity

Измеренные константы задаются значением (CODATA 2014) в своей единице.
Производные константы вычисляются арифметикой Quantity из измеренных и
конвертируются в объявленную единицу: несовпадение размерности выражения
и объявленной единицы приводит к IncompatibleDimensionError при импорте.
"""

from dimcalc.catalog.units import (
    amperes,
    coulombs,
    farads,
    joules,
    kelvin,
    kilograms,
    meters,
    meters_per_second,
    moles,
    newtons,
    ohms,
    scalar,
    seconds,
    square_meters,
    teslas,
    watts,
)
from dimcalc.core.domain.conversion_factor import compound, derive_unit
from dimcalc.core.domain.quantity import Quantity

# Безразмерная единица со степенью π = 1: Quantity(1, pi_unit) == π
pi_unit = derive_unit(scalar, 1, pi_num=1)

# =============================================================================
# ИЗМЕРЕННЫЕ КОНСТАНТЫ
# =============================================================================

# Отношение длины окружности к диаметру
PI = Quantity(1.0, pi_unit)

# Скорость света в вакууме
C = Quantity(299_792_458.0, meters_per_second)

# Гравитационная постоянная
G = Quantity(
    6.67408e-11,
    compound(meters.cubed(), kilograms.inverse(), seconds.squared().inverse()),
)

# Постоянная Планка
H = Quantity(6.626070040e-34, joules * seconds)

# Элементарный заряд
E = Quantity(1.6021766208e-19, coulombs)

# Масса электрона / протона
M_E = Quantity(9.10938356e-31, kilograms)
M_P = Quantity(1.672621898e-27, kilograms)

# Число Авогадро
N_A = Quantity(6.022140857e23, moles.inverse())

# Универсальная газовая постоянная
R = Quantity(8.3144598, compound(joules, kelvin.inverse(), moles.inverse()))

# =============================================================================
# ПРОИЗВОДНЫЕ КОНСТАНТЫ
# =============================================================================

# Магнитная постоянная (проницаемость вакуума)
MU0 = Quantity(
    PI * 4.0e-7 * Quantity(1.0, newtons) / Quantity(1.0, amperes) ** 2,
    newtons / amperes.squared(),
)

# Электрическая постоянная (диэлектрическая проницаемость вакуума)
EPSILON0 = Quantity(1.0 / (MU0 * C**2), farads / meters)

# Волновое сопротивление вакуума
Z0 = Quantity(MU0 * C, ohms)

# Постоянная Кулона
K_E = Quantity(
    1.0 / (4 * PI * EPSILON0),
    compound(newtons, square_meters, coulombs.squared().inverse()),
)

# Магнетон Бора
MU_B = Quantity(E * H / (4 * PI * M_E), joules / teslas)

# Постоянная Больцмана
K_B = Quantity(R / N_A, joules / kelvin)

# Постоянная Фарадея
F = Quantity(N_A * E, coulombs / moles)

# Постоянная Стефана-Больцмана
SIGMA = Quantity(
    (2 * PI**5 * R**4) / (15 * H**3 * C**2 * N_A**4),
    compound(watts, square_meters.inverse(), kelvin.power(4).inverse()),
)
