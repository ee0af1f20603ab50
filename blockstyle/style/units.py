"""Constants and helpers for units."""

import collections

from .tokens import RegistryError

UnitDefinition = collections.namedtuple(
    'UnitDefinition', ['symbol', 'dimension_group'])

DIMENSION_GROUPS = ('length', 'percentage', 'angle', 'flex')

# Sets of units.
# https://drafts.csswg.org/css-values-4/#lengths
ABSOLUTE_UNITS = {'px', 'cm', 'mm', 'q', 'in', 'pt', 'pc'}
FONT_UNITS = {'em', 'ex', 'cap', 'ch', 'ic', 'lh'}
FONT_UNITS |= {f'r{unit}' for unit in FONT_UNITS}
VIEWPORT_UNITS = {
    f'{prefix}{unit}' for prefix in ('', 's', 'l', 'd')
    for unit in ('vw', 'vh', 'vi', 'vb', 'vmin', 'vmax')}
CONTAINER_UNITS = {'cqw', 'cqh', 'cqi', 'cqb', 'cqmin', 'cqmax'}
LENGTH_UNITS = ABSOLUTE_UNITS | FONT_UNITS | VIEWPORT_UNITS | CONTAINER_UNITS
# https://drafts.csswg.org/css-values-4/#angles
ANGLE_UNITS = {'deg', 'grad', 'rad', 'turn'}
# https://drafts.csswg.org/css-grid/#fr-unit
FLEX_UNITS = {'fr'}
PERCENTAGE_UNITS = {'%'}


def create_unit_table(definitions):
    """Create a mapping of unit symbols to unit definitions.

    ``definitions`` is an iterable of ``(symbol, dimension_group)`` pairs.
    Symbols are case-insensitive and stored lower-cased.

    """
    units = {}
    for symbol, dimension_group in definitions:
        if dimension_group not in DIMENSION_GROUPS:
            raise RegistryError(
                f'Unknown dimension group {dimension_group!r} '
                f'for unit {symbol!r}')
        symbol = symbol.lower()
        defined = units.get(symbol)
        if defined and defined.dimension_group != dimension_group:
            raise RegistryError(
                f'Unit {symbol!r} defined for both '
                f'{defined.dimension_group!r} and {dimension_group!r}')
        units[symbol] = UnitDefinition(symbol, dimension_group)
    return units


UNITS = create_unit_table(
    (unit, dimension_group)
    for dimension_group, symbols in (
        ('length', LENGTH_UNITS),
        ('percentage', PERCENTAGE_UNITS),
        ('angle', ANGLE_UNITS),
        ('flex', FLEX_UNITS))
    for unit in sorted(symbols))


def get_unit_dimension(symbol, units=UNITS):
    """Get the dimension group of the unit called ``symbol``, or ``None``."""
    unit = units.get(symbol.lower())
    if unit is not None:
        return unit.dimension_group
