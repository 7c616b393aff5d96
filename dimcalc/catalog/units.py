"""
Units — каталог именованных единиц

Каждая единица объявляется ровно один раз через define_unit / register_unit
и доступна как атрибут модуля и через REGISTRY.get(name).

Базовые единицы (ratio=1): meters, kilograms, seconds, radians, amperes,
kelvin, moles, candelas, bytes. Все остальные выводятся из них.

Источники точных коэффициентов:
- feet = 0.3048 m (международный фут 1959)
- pounds = 0.45359237 kg
- standard_gravity = 9.80665 m/s²
- celsius = kelvin + 273.15
"""

from dimcalc.catalog import dimensions
from dimcalc.catalog.definitions import (
    BINARY_PREFIXES,
    define_prefixed_units,
    define_unit,
    register_unit,
)
from dimcalc.core.domain.conversion_factor import base_factor
from dimcalc.core.domain.dimension import (
    ANGLE,
    CURRENT,
    DATA,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    SUBSTANCE,
    TEMPERATURE,
    TIME,
)
from dimcalc.core.domain.quantity import SCALAR

# =============================================================================
# DIMENSIONLESS / CONCENTRATION
# =============================================================================

scalar = register_unit("scalar", SCALAR)
percent = define_unit("percent", scalar, 1, 100)
parts_per_million = define_unit("parts_per_million", scalar, 1, 1_000_000)
parts_per_billion = define_unit("parts_per_billion", parts_per_million, 1, 1000)
parts_per_trillion = define_unit("parts_per_trillion", parts_per_billion, 1, 1000)

# =============================================================================
# LENGTH
# =============================================================================

meters = register_unit("meters", base_factor(LENGTH))
_meters_prefixed = define_prefixed_units("meters", meters)
nanometers = _meters_prefixed["nanometers"]
micrometers = _meters_prefixed["micrometers"]
millimeters = _meters_prefixed["millimeters"]
centimeters = _meters_prefixed["centimeters"]
decimeters = _meters_prefixed["decimeters"]
kilometers = _meters_prefixed["kilometers"]

feet = define_unit("feet", meters, 381, 1250)
inches = define_unit("inches", feet, 1, 12)
mils = define_unit("mils", inches, 1, 1000)
yards = define_unit("yards", feet, 3)
miles = define_unit("miles", feet, 5280)
nautical_miles = define_unit("nautical_miles", meters, 1852)
astronomical_units = define_unit("astronomical_units", meters, 149_597_870_700)
lightyears = define_unit("lightyears", meters, 9_460_730_472_580_800)
parsecs = define_unit("parsecs", astronomical_units, 648_000, pi_num=-1)
angstroms = define_unit("angstroms", nanometers, 1, 10)
cubits = define_unit("cubits", inches, 18)
fathoms = define_unit("fathoms", feet, 6)
chains = define_unit("chains", feet, 66)
furlongs = define_unit("furlongs", chains, 10)
hands = define_unit("hands", inches, 4)
leagues = define_unit("leagues", miles, 3)

# =============================================================================
# MASS
# =============================================================================

# Базовая единица массы: килограмм; grams объявлены относительно неё,
# kilograms появляются как префиксная форма grams с ratio == 1
grams = define_unit("grams", base_factor(MASS), 1, 1000)
_grams_prefixed = define_prefixed_units("grams", grams)
micrograms = _grams_prefixed["micrograms"]
milligrams = _grams_prefixed["milligrams"]
kilograms = _grams_prefixed["kilograms"]

tonnes = define_unit("tonnes", kilograms, 1000)
pounds = define_unit("pounds", kilograms, 45_359_237, 100_000_000)
long_tons = define_unit("long_tons", pounds, 2240)
short_tons = define_unit("short_tons", pounds, 2000)
stone = define_unit("stone", pounds, 14)
ounces = define_unit("ounces", pounds, 1, 16)
carats = define_unit("carats", milligrams, 200)
slugs = define_unit("slugs", kilograms, 145_939_029, 10_000_000)

# =============================================================================
# TIME
# =============================================================================

seconds = register_unit("seconds", base_factor(TIME))
_seconds_prefixed = define_prefixed_units("seconds", seconds)
nanoseconds = _seconds_prefixed["nanoseconds"]
microseconds = _seconds_prefixed["microseconds"]
milliseconds = _seconds_prefixed["milliseconds"]

minutes = define_unit("minutes", seconds, 60)
hours = define_unit("hours", minutes, 60)
days = define_unit("days", hours, 24)
weeks = define_unit("weeks", days, 7)
years = define_unit("years", days, 365)
julian_years = define_unit("julian_years", seconds, 31_557_600)
gregorian_years = define_unit("gregorian_years", seconds, 31_556_952)

# =============================================================================
# ANGLE
# =============================================================================

radians = register_unit("radians", base_factor(ANGLE))
degrees = define_unit("degrees", radians, 1, 180, pi_num=1)
arcminutes = define_unit("arcminutes", degrees, 1, 60)
arcseconds = define_unit("arcseconds", arcminutes, 1, 60)
milliarcseconds = define_unit("milliarcseconds", arcseconds, 1, 1000)
turns = define_unit("turns", radians, 2, pi_num=1)
gradians = define_unit("gradians", turns, 1, 400)

# =============================================================================
# SOLID ANGLE
# =============================================================================

steradians = register_unit("steradians", base_factor(dimensions.SOLID_ANGLE))
degrees_squared = register_unit("degrees_squared", degrees.squared())
spats = define_unit("spats", steradians, 4, pi_num=1)

# =============================================================================
# CURRENT / SUBSTANCE / LUMINOUS INTENSITY
# =============================================================================

amperes = register_unit("amperes", base_factor(CURRENT))
_amperes_prefixed = define_prefixed_units("amperes", amperes)
milliamperes = _amperes_prefixed["milliamperes"]

moles = register_unit("moles", base_factor(SUBSTANCE))
candelas = register_unit("candelas", base_factor(LUMINOUS_INTENSITY))

# =============================================================================
# TEMPERATURE
# =============================================================================

kelvin = register_unit("kelvin", base_factor(TEMPERATURE))
celsius = define_unit("celsius", kelvin, 1, translation_num=27315, translation_den=100)
fahrenheit = define_unit("fahrenheit", celsius, 5, 9, translation_num=-160, translation_den=9)
rankine = define_unit("rankine", kelvin, 5, 9)
reaumur = define_unit("reaumur", celsius, 5, 4)

# =============================================================================
# AREA / VOLUME
# =============================================================================

square_meters = register_unit("square_meters", meters.squared())
square_centimeters = register_unit("square_centimeters", centimeters.squared())
square_kilometers = register_unit("square_kilometers", kilometers.squared())
square_feet = register_unit("square_feet", feet.squared())
square_inches = register_unit("square_inches", inches.squared())
square_miles = register_unit("square_miles", miles.squared())
hectares = define_unit("hectares", square_meters, 10_000)
acres = define_unit("acres", square_feet, 43_560)

cubic_meters = register_unit("cubic_meters", meters.cubed())
cubic_feet = register_unit("cubic_feet", feet.cubed())
cubic_inches = register_unit("cubic_inches", inches.cubed())
liters = register_unit("liters", decimeters.cubed())
milliliters = define_unit("milliliters", liters, 1, 1000)
gallons = define_unit("gallons", cubic_inches, 231)
quarts = define_unit("quarts", gallons, 1, 4)
pints = define_unit("pints", quarts, 1, 2)
cups = define_unit("cups", pints, 1, 2)
fluid_ounces = define_unit("fluid_ounces", cups, 1, 8)
barrels = define_unit("barrels", gallons, 42)

# =============================================================================
# FREQUENCY
# =============================================================================

hertz = register_unit("hertz", base_factor(dimensions.FREQUENCY))
_hertz_prefixed = define_prefixed_units("hertz", hertz)
kilohertz = _hertz_prefixed["kilohertz"]
megahertz = _hertz_prefixed["megahertz"]
gigahertz = _hertz_prefixed["gigahertz"]

# =============================================================================
# VELOCITY / ACCELERATION
# =============================================================================

meters_per_second = register_unit("meters_per_second", meters / seconds)
feet_per_second = register_unit("feet_per_second", feet / seconds)
miles_per_hour = register_unit("miles_per_hour", miles / hours)
kilometers_per_hour = register_unit("kilometers_per_hour", kilometers / hours)
knots = register_unit("knots", nautical_miles / hours)

radians_per_second = register_unit("radians_per_second", radians / seconds)
degrees_per_second = register_unit("degrees_per_second", degrees / seconds)
revolutions_per_minute = define_unit("revolutions_per_minute", radians_per_second, 2, 60, pi_num=1)
revolutions_per_second = define_unit("revolutions_per_second", radians_per_second, 2, pi_num=1)

meters_per_second_squared = register_unit(
    "meters_per_second_squared", base_factor(dimensions.ACCELERATION)
)
feet_per_second_squared = register_unit("feet_per_second_squared", feet / seconds.squared())
standard_gravity = define_unit("standard_gravity", meters_per_second_squared, 980_665, 100_000)
gals = register_unit("gals", centimeters / seconds.squared())

# =============================================================================
# FORCE / PRESSURE
# =============================================================================

newtons = register_unit("newtons", base_factor(dimensions.FORCE))
dynes = define_unit("dynes", newtons, 1, 100_000)
pounds_force = register_unit("pounds_force", slugs * feet / seconds.squared())
kiloponds = register_unit("kiloponds", standard_gravity * kilograms)
poundals = register_unit("poundals", pounds * feet / seconds.squared())

pascals = register_unit("pascals", base_factor(dimensions.PRESSURE))
_pascals_prefixed = define_prefixed_units("pascals", pascals)
kilopascals = _pascals_prefixed["kilopascals"]
bars = define_unit("bars", kilopascals, 100)
millibars = define_unit("millibars", bars, 1, 1000)
atmospheres = define_unit("atmospheres", pascals, 101_325)
pounds_per_square_inch = register_unit("pounds_per_square_inch", pounds_force / square_inches)
torrs = define_unit("torrs", atmospheres, 1, 760)
mmHg = define_unit("mmHg", pascals, 26_664_477_483, 200_000_000)

# =============================================================================
# ENERGY / POWER / TORQUE
# =============================================================================

joules = register_unit("joules", base_factor(dimensions.ENERGY))
_joules_prefixed = define_prefixed_units("joules", joules)
kilojoules = _joules_prefixed["kilojoules"]
megajoules = _joules_prefixed["megajoules"]

calories = define_unit("calories", joules, 4184, 1000)
_calories_prefixed = define_prefixed_units("calories", calories)
kilocalories = _calories_prefixed["kilocalories"]

kilowatt_hours = define_unit("kilowatt_hours", megajoules, 36, 10)
watt_hours = define_unit("watt_hours", kilowatt_hours, 1, 1000)
british_thermal_units = define_unit("british_thermal_units", joules, 105_505_585_262, 100_000_000)
electron_volts = define_unit("electron_volts", joules, 160_217_653, 10**27)

watts = register_unit("watts", base_factor(dimensions.POWER))
_watts_prefixed = define_prefixed_units("watts", watts)
milliwatts = _watts_prefixed["milliwatts"]
kilowatts = _watts_prefixed["kilowatts"]
megawatts = _watts_prefixed["megawatts"]
horsepower = define_unit("horsepower", watts, 7457, 10)

newton_meters = register_unit("newton_meters", newtons * meters)
foot_pounds = register_unit("foot_pounds", feet * pounds_force)

# =============================================================================
# ELECTROMAGNETISM
# =============================================================================

coulombs = register_unit("coulombs", base_factor(dimensions.CHARGE))
ampere_hours = register_unit("ampere_hours", amperes * hours)
volts = register_unit("volts", base_factor(dimensions.VOLTAGE))
statvolts = define_unit("statvolts", volts, 1_000_000, 299_792_458)
abvolts = define_unit("abvolts", volts, 1, 100_000_000)
farads = register_unit("farads", base_factor(dimensions.CAPACITANCE))
ohms = register_unit("ohms", base_factor(dimensions.IMPEDANCE))
siemens = register_unit("siemens", base_factor(dimensions.CONDUCTANCE))
webers = register_unit("webers", base_factor(dimensions.MAGNETIC_FLUX))
maxwells = define_unit("maxwells", webers, 1, 100_000_000)
teslas = register_unit("teslas", base_factor(dimensions.MAGNETIC_FIELD_STRENGTH))
gauss = register_unit("gauss", maxwells / square_centimeters)
henries = register_unit("henries", base_factor(dimensions.INDUCTANCE))

# =============================================================================
# PHOTOMETRY
# =============================================================================

lumens = register_unit("lumens", candelas * steradians)
lux = register_unit("lux", base_factor(dimensions.ILLUMINANCE))
footcandles = register_unit("footcandles", lumens / square_feet)
phots = register_unit("phots", lumens / square_centimeters)

# =============================================================================
# DENSITY / CONCENTRATION
# =============================================================================

kilograms_per_cubic_meter = register_unit("kilograms_per_cubic_meter", kilograms / cubic_meters)
grams_per_milliliter = register_unit("grams_per_milliliter", grams / milliliters)
pounds_per_cubic_foot = register_unit("pounds_per_cubic_foot", pounds / cubic_feet)
moles_per_liter = register_unit("moles_per_liter", moles / liters)

# =============================================================================
# DATA
# =============================================================================

bytes_ = register_unit("bytes", base_factor(DATA))
_bytes_prefixed = define_prefixed_units("bytes", bytes_)
_bytes_binary = define_prefixed_units("bytes", bytes_, BINARY_PREFIXES)
kilobytes = _bytes_prefixed["kilobytes"]
megabytes = _bytes_prefixed["megabytes"]
gigabytes = _bytes_prefixed["gigabytes"]
kibibytes = _bytes_binary["kibibytes"]
mebibytes = _bytes_binary["mebibytes"]
gibibytes = _bytes_binary["gibibytes"]
bits = define_unit("bits", bytes_, 1, 8)

bytes_per_second = register_unit("bytes_per_second", bytes_ / seconds)
bits_per_second = register_unit("bits_per_second", bits / seconds)
