"""Registry of the tables used to resolve style values.

A registry holds the units, the token types, the shorthands and the
property definitions. It is filled when the application starts, and then
only read.

"""

from . import DEFAULT_OPTIONS
from .logger import LOGGER
from .style import resolve
from .style.matchers import TOKEN_TYPES
from .style.properties import STYLE_PROPERTIES, create_property
from .style.shorthands import (
    SHORTHANDS, check_shorthands, expand_shorthand, resolve_longhand)
from .style.syntax import TOKEN_DEFINITIONS, expand_tokens, parse_syntax
from .style.tokens import RegistryError
from .style.units import UNITS, create_unit_table, get_unit_dimension
from .style.utils import join, parse_function, split


class Registry:
    """Units, token types, shorthands and properties.

    :type units: :class:`dict`
    :param units:
        A mapping of unit symbols to dimension groups, replacing the
        built-in units.
    :type shorthands: :class:`dict`
    :param shorthands:
        A mapping of shorthand names to the tuple of their longhand names,
        replacing the built-in shorthands.
    :type token_definitions: :class:`dict`
    :param token_definitions:
        A mapping of composite data types such as ``<length-percentage>``
        to their syntaxes, replacing the built-in definitions.
    :param options:
        The ``options`` parameter includes by default the
        :data:`DEFAULT_OPTIONS` values.

    """
    def __init__(self, units=None, shorthands=None, token_definitions=None,
                 **options):
        for unknown in set(options) - set(DEFAULT_OPTIONS):
            LOGGER.warning('Unknown registry option: %s.', unknown)
        self.options = DEFAULT_OPTIONS.copy()
        self.options.update(
            (key, value) for key, value in options.items()
            if key in DEFAULT_OPTIONS)

        if units is None:
            self.units = UNITS
        else:
            self.units = create_unit_table(units.items())
        self.shorthands = dict(
            SHORTHANDS if shorthands is None else shorthands)
        self._longhands = check_shorthands(self.shorthands)
        self.token_definitions = dict(
            TOKEN_DEFINITIONS if token_definitions is None
            else token_definitions)

        self._token_types = {}
        self.token_types = ()
        self.properties = {}

    def __repr__(self):
        return (
            f'<{type(self).__name__} {len(self._token_types)} token types, '
            f'{len(self.properties)} properties>')

    @property
    def default_scope(self):
        """Device, orientation and pseudo-state used when none is set."""
        return (
            self.options['default_device'],
            self.options['default_orientation'],
            self.options['default_pseudo'])

    def register_token_type(self, token_type):
        """Add ``token_type``, replacing the one with the same key."""
        if token_type.key in self._token_types:
            LOGGER.debug('Token type %r replaced', token_type.key)
        self._token_types[token_type.key] = token_type
        self.token_types = tuple(sorted(
            self._token_types.values(), key=lambda type_: type_.priority))

    def get_token_type(self, key):
        try:
            return self._token_types[key]
        except KeyError:
            raise RegistryError(f'Unknown token type {key!r}') from None

    def get_unit_dimension(self, symbol):
        return get_unit_dimension(symbol, self.units)

    def is_shorthand(self, key):
        return key in self.shorthands

    def get_longhands(self, key):
        try:
            return self.shorthands[key]
        except KeyError:
            raise RegistryError(f'Unknown shorthand {key!r}') from None

    def get_shorthand(self, key):
        """Get the shorthand setting the longhand ``key``, or ``None``."""
        return self._longhands.get(key)

    def parse_syntax(self, syntax):
        """Get the flat variations of ``syntax``, composite types expanded."""
        return parse_syntax(
            expand_tokens(syntax, self.token_definitions),
            self.options['max_repetitions'])

    def create_options(self, token):
        """Create the options of the first token type recognizing ``token``.

        Raise :exc:`RegistryError` if no token type recognizes ``token``.

        """
        for token_type in self.token_types:
            if token_type.recognizes(token):
                return token_type.create_options(token, self)
        raise RegistryError(f'No token type for {token!r}')

    def default_value(self, syntax):
        """Get the simplest value allowed by ``syntax``."""
        variations = sorted(filter(None, self.parse_syntax(syntax)), key=len)
        if variations:
            return self._default_value(variations[0])
        return ''

    def _default_value(self, variation):
        for separator in (',', '/', ' '):
            parts = split(variation, separator)
            if len(parts) > 1:
                return join(
                    [self._default_value(part) for part in parts], separator)
        if function := parse_function(variation):
            name, arguments = function
            return f'{name}({self.default_value(arguments)})'
        for token_type in self.token_types:
            if token_type.recognizes(variation):
                return token_type.default_for(variation)
        raise RegistryError(f'No token type for {variation!r}')

    def register_property(self, key, syntax):
        """Build and add the definition of the property called ``key``."""
        self.properties[key] = definition = create_property(self, key, syntax)
        return definition

    def get_property(self, key):
        try:
            return self.properties[key]
        except KeyError:
            raise RegistryError(f'Unknown property {key!r}') from None

    def resolve(self, key, value):
        """Resolve the raw ``value`` of the property called ``key``.

        ``key`` can also be a :class:`PropertyDefinition`.

        Return a :class:`ResolvedValue`, or the exception telling why
        ``value`` can't be resolved.

        """
        if isinstance(key, str):
            try:
                definition = self.get_property(key)
            except RegistryError as exception:
                LOGGER.warning('Ignored `%s: %s`, %s.', key, value, exception)
                return exception
        else:
            definition = key
        return resolve(self, definition, value)

    def resolve_longhand(self, values):
        return resolve_longhand(values, self.options['mixed_value'])

    def expand_shorthand(self, key, value):
        """Get the ``(longhand, value)`` pairs set by a shorthand value."""
        return list(expand_shorthand(self.get_longhands(key), value))


def create_registry(**options):
    """Create a registry with the built-in token types and properties."""
    registry = Registry(**options)
    for token_type in TOKEN_TYPES.values():
        registry.register_token_type(token_type(registry.units))
    for key, syntax in STYLE_PROPERTIES.items():
        registry.register_property(key, syntax)
    return registry
