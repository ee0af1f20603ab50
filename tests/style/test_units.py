"""Test the unit table."""

import pytest

from blockstyle import RegistryError
from blockstyle.style.units import (
    DIMENSION_GROUPS, UNITS, create_unit_table, get_unit_dimension)


@pytest.mark.parametrize('symbol, dimension_group', (
    ('px', 'length'),
    ('PX', 'length'),
    ('rem', 'length'),
    ('q', 'length'),
    ('Q', 'length'),
    ('vmin', 'length'),
    ('dvh', 'length'),
    ('cqw', 'length'),
    ('%', 'percentage'),
    ('deg', 'angle'),
    ('turn', 'angle'),
    ('fr', 'flex'),
))
def test_get_unit_dimension(symbol, dimension_group):
    assert get_unit_dimension(symbol) == dimension_group


@pytest.mark.parametrize('symbol', ('', 'pixels', 'foo', 'ms', 'dpi'))
def test_get_unit_dimension_unknown(symbol):
    assert get_unit_dimension(symbol) is None


def test_units_groups():
    assert {unit.dimension_group for unit in UNITS.values()} == set(
        DIMENSION_GROUPS)
    for symbol, unit in UNITS.items():
        assert symbol == unit.symbol == symbol.lower()


def test_create_unit_table():
    units = create_unit_table((('PX', 'length'), ('px', 'length')))
    assert list(units) == ['px']
    assert get_unit_dimension('Px', units) == 'length'
    assert get_unit_dimension('em', units) is None


def test_create_unit_table_conflict():
    with pytest.raises(RegistryError):
        create_unit_table((('px', 'length'), ('px', 'angle')))


def test_create_unit_table_unknown_group():
    with pytest.raises(RegistryError):
        create_unit_table((('s', 'time'),))
