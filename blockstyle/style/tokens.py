"""Token types of style values."""

import collections
from abc import ABC, abstractmethod

OptionDefinition = collections.namedtuple(
    'OptionDefinition',
    ['name', 'value', 'category', 'type', 'min', 'max', 'syntax'],
    defaults=(None, None, None, None))

TokenMatch = collections.namedtuple('TokenMatch', ['key', 'option'])

CATEGORIES = ('keyword', 'function', 'dimension', 'other')


class ClassificationError(ValueError):  # noqa: N818
    """Style value not matching the syntax of its property."""
    def __init__(self, message, slot=None, position=None):
        super().__init__(message)
        self.slot = slot
        self.position = position


class RegistryError(LookupError):  # noqa: N818
    """Unregistered token type, unit, shorthand or property."""


class TokenType(ABC):
    """Category of value syntax, with its own matching and canonical form.

    Token types are tried in ascending :attr:`priority` order, the first
    one matching a slot gives the slot its type.

    """
    #: Unique name of the token type.
    key = None
    #: Lower priorities are tried first.
    priority = None
    #: Category of the options created by the token type.
    category = 'other'
    #: Value of new options, or ``None`` when it depends on the syntax.
    default = None

    def __init__(self, units=None):
        self.units = units

    def __repr__(self):
        return f'<{type(self).__name__} {self.key!r} ({self.priority})>'

    @abstractmethod
    def classify(self, slot, options):
        """Match ``slot`` against the token type.

        ``options`` is the list of options admitted by the slot, an empty
        list meaning that the slot is not constrained.

        Return a :class:`TokenMatch` or ``None``.

        """
        raise NotImplementedError

    @abstractmethod
    def canonicalize(self, slot):
        """Get the normalized textual representation of ``slot``."""
        raise NotImplementedError

    def create_option(self, name, value, **meta):
        """Create an option of this token type."""
        return OptionDefinition(name, value, self.category, self.key, **meta)

    def recognizes(self, token):
        """Whether ``token``, taken from a property syntax, is of this type."""
        return False

    def default_for(self, token):
        """Get a value of this type matching ``token``."""
        return token if self.default is None else self.default

    def create_options(self, token, registry):
        """Create the options offered for ``token`` in a property syntax."""
        return [self.create_option(token, self.default_for(token))]

    def admitted(self, options):
        """Get the options created by this token type in ``options``.

        Return ``None`` when ``options`` is empty and the slot is not
        constrained.

        """
        if options:
            return [option for option in options if option.type == self.key]


def in_range(option, value):
    """Whether the numeric ``value`` is in the range allowed by ``option``."""
    if option is None:
        return True
    if option.min is not None and value < option.min:
        return False
    if option.max is not None and value > option.max:
        return False
    return True
