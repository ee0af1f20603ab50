"""Shorthand properties and the longhand properties they set."""

from .tokens import ClassificationError, RegistryError
from .utils import split

FOUR_SIDES = ('top', 'right', 'bottom', 'left')
CORNERS = ('top-left', 'top-right', 'bottom-right', 'bottom-left')


def four_sides(name, sides=FOUR_SIDES):
    """Get the names of the longhands set by a four-sides shorthand."""
    names = []
    for side in sides:
        if (i := name.rfind('-')) == -1:
            names.append(f'{name}-{side}')
        else:
            # eg. border-color becomes border-*-color, not border-color-*
            names.append(f'{name[:i]}-{side}{name[i:]}')
    return tuple(names)


SHORTHANDS = {
    'margin': four_sides('margin'),
    'padding': four_sides('padding'),
    'inset': FOUR_SIDES,
    'border-width': four_sides('border-width'),
    'border-style': four_sides('border-style'),
    'border-color': four_sides('border-color'),
    'border-radius': four_sides('border-radius', CORNERS),
    'gap': ('row-gap', 'column-gap'),
    'overflow': ('overflow-x', 'overflow-y'),
}


def check_shorthands(shorthands):
    """Check that each longhand is set by one shorthand at most.

    Return a mapping of longhand names to their shorthand names.

    """
    longhands = {}
    for shorthand, names in shorthands.items():
        if not names:
            raise RegistryError(f'Shorthand {shorthand!r} has no longhand')
        for name in names:
            if name in longhands:
                raise RegistryError(
                    f'Longhand {name!r} set by both {longhands[name]!r} '
                    f'and {shorthand!r}')
            longhands[name] = shorthand
    return longhands


def resolve_longhand(values, mixed='mixed'):
    """Get the value displayed for a shorthand whose longhands have ``values``.

    Empty values are ignored. Return an empty string when no longhand is
    set, the common value when all the set longhands agree, and ``mixed``
    otherwise.

    """
    distinct = set(value for value in values if value)
    if not distinct:
        return ''
    elif len(distinct) == 1:
        value, = distinct
        return value
    return mixed


def expand_shorthand(longhands, value):
    """Yield ``(longhand, value)`` for each longhand set by ``value``.

    Four-sides shorthands follow the top, right, bottom, left rule with 1
    to 4 values, other shorthands take a single value for all their
    longhands or one value for each of them.

    Raise :exc:`ClassificationError` if the number of values is invalid.

    """
    values = split(value, ' ')
    count = len(longhands)

    # Make sure we have one value per longhand.
    if len(values) == 1:
        values *= count
    elif count == 4:
        if len(values) == 2:
            values *= 2  # (bottom, left) defaults to (top, right)
        elif len(values) == 3:
            values.append(values[1])  # left defaults to right
        elif len(values) != 4:
            raise ClassificationError(
                f'expected 1 to 4 values, got {len(values)}')
    elif len(values) != count:
        raise ClassificationError(
            f'expected 1 or {count} values, got {len(values)}')
    yield from zip(longhands, values)
