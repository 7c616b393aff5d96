"""
Derived Dimensions — производные размерности каталога

Все производные размерности строятся композицией базовых векторов
(dimcalc.core.domain.dimension), без ручного задания показателей.
"""

from dimcalc.core.domain.dimension import (
    ANGLE,
    CURRENT,
    DATA,
    DIMENSIONLESS,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    SUBSTANCE,
    TEMPERATURE,
    TIME,
)

# =============================================================================
# МЕХАНИКА
# =============================================================================

AREA = LENGTH**2
VOLUME = LENGTH**3
VELOCITY = LENGTH / TIME
ACCELERATION = VELOCITY / TIME
JERK = ACCELERATION / TIME
FORCE = MASS * ACCELERATION
PRESSURE = FORCE / AREA
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
TORQUE = FORCE * LENGTH
DENSITY = MASS / VOLUME
FREQUENCY = DIMENSIONLESS / TIME

# =============================================================================
# УГЛЫ
# =============================================================================

SOLID_ANGLE = ANGLE**2
ANGULAR_VELOCITY = ANGLE / TIME

# =============================================================================
# ЭЛЕКТРОМАГНЕТИЗМ
# =============================================================================

CHARGE = TIME * CURRENT
VOLTAGE = POWER / CURRENT
CAPACITANCE = CHARGE / VOLTAGE
IMPEDANCE = VOLTAGE / CURRENT
CONDUCTANCE = CURRENT / VOLTAGE
MAGNETIC_FLUX = VOLTAGE * TIME
MAGNETIC_FIELD_STRENGTH = MAGNETIC_FLUX / AREA
INDUCTANCE = IMPEDANCE * TIME

# =============================================================================
# ПРОЧЕЕ
# =============================================================================

LUMINOUS_FLUX = LUMINOUS_INTENSITY * SOLID_ANGLE
ILLUMINANCE = LUMINOUS_FLUX / AREA
LUMINANCE = LUMINOUS_INTENSITY / AREA
CONCENTRATION = SUBSTANCE / VOLUME
MOLAR_ENERGY = ENERGY / SUBSTANCE
ENTROPY = ENERGY / TEMPERATURE
DATA_TRANSFER_RATE = DATA / TIME
