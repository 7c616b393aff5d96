"""
Core dimension algebra, conversion engine and numerical primitives.

Модуль не зависит от каталога единиц: каталог (dimcalc.catalog) строится
поверх core через derive_unit.
"""
