"""Styles scoped by device, orientation and pseudo-state.

Styles are nested mappings: ``styles[device][orientation][pseudo]`` is a
mapping of property names to raw values. Values set for the default scope
(``'all'`` unless configured otherwise) apply when the selected scope sets
nothing.

"""

import itertools

from .logger import LOGGER
from .style.tokens import ClassificationError

DEFAULT_SCOPE = ('all', 'all', 'all')


def cascade_style(styles, key, device, orientation, pseudo,
                  default_scope=DEFAULT_SCOPE):
    """Get the raw value of ``key`` for the given scope.

    The selected device wins over the selected orientation, that wins over
    the selected pseudo-state. Return an empty string if no scope sets the
    property.

    """
    default_device, default_orientation, default_pseudo = default_scope
    scopes = itertools.product(
        (device, default_device),
        (orientation, default_orientation),
        (pseudo, default_pseudo))
    for device, orientation, pseudo in scopes:
        value = (
            styles.get(device, {}).get(orientation, {}).get(pseudo, {})
            .get(key))
        if value is not None:
            return value
    return ''


def cascade_styles(styles, device, orientation, pseudo,
                   default_scope=DEFAULT_SCOPE):
    """Get the raw values of all the properties set in ``styles``.

    Properties set in any scope are included, with their value for the
    given scope.

    """
    keys = dict.fromkeys(
        key
        for device_styles in styles.values()
        for orientation_styles in device_styles.values()
        for pseudo_styles in orientation_styles.values()
        for key in pseudo_styles)
    return {
        key: cascade_style(
            styles, key, device, orientation, pseudo, default_scope)
        for key in keys}


def resolve_style(registry, styles, key, device, orientation, pseudo):
    """Get the value displayed for ``key`` in the given scope.

    Shorthands get the common value of their longhands, or the mixed value
    when their longhands disagree.

    """
    scope = (device, orientation, pseudo)
    if registry.is_shorthand(key):
        return registry.resolve_longhand(
            cascade_style(styles, longhand, *scope, registry.default_scope)
            for longhand in registry.get_longhands(key))
    return cascade_style(styles, key, *scope, registry.default_scope)


def apply_style(registry, styles, key, value, device, orientation, pseudo):
    """Set the raw ``value`` of ``key`` in the given scope.

    Shorthands set their longhands. Return new styles, ``styles`` is left
    untouched. Invalid values are ignored and ``styles`` is returned, empty
    values reset properties.

    """
    if registry.is_shorthand(key):
        try:
            updates = dict(registry.expand_shorthand(key, value))
        except ClassificationError as exception:
            LOGGER.warning('Ignored `%s: %s`, %s.', key, value, exception)
            return styles
    else:
        updates = {key: value}
    for longhand, longhand_value in updates.items():
        # Resolving logs why values are invalid.
        if isinstance(registry.resolve(longhand, longhand_value), Exception):
            return styles

    device_styles = dict(styles.get(device, {}))
    orientation_styles = dict(device_styles.get(orientation, {}))
    orientation_styles[pseudo] = {
        **orientation_styles.get(pseudo, {}), **updates}
    device_styles[orientation] = orientation_styles
    return {**styles, device: device_styles}
