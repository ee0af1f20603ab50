"""Resolve style values into typed and normalized slots.

A raw value is split into slots with the separator of its property, each
slot is then matched against the token types in priority order, with the
options allowed by the property at the slot position.

This module does this in more than one step:

- :mod:`.syntax` parses the value definition syntax of properties;
- :mod:`.properties` builds the options allowed for each slot;
- :func:`resolve` gives each slot of a value its type and canonical form.

"""

import collections

from ..logger import LOGGER
from .tokens import ClassificationError
from .utils import SEPARATORS, join, split

Slot = collections.namedtuple('Slot', ['raw', 'token_type', 'canonical'])


class ResolvedValue(tuple):
    """Slots of a resolved value, in order."""
    def __new__(cls, slots=(), separator='space'):
        value = super().__new__(cls, slots)
        value.separator = separator
        return value

    def __repr__(self):
        return f'<{type(self).__name__} {self.serialize()!r}>'

    @property
    def canonical(self):
        """Canonical forms of the slots."""
        return [slot.canonical for slot in self]

    def serialize(self):
        """Get the canonical string of the whole value."""
        return join(self.canonical, SEPARATORS[self.separator])


def classify(registry, slot, options=(), position=0):
    """Give ``slot`` the type of the first token type matching it.

    Return a :class:`Slot`, or raise :exc:`ClassificationError`.

    """
    for token_type in registry.token_types:
        if token_type.classify(slot, options):
            return Slot(slot, token_type.key, token_type.canonicalize(slot))
    raise ClassificationError(
        f'invalid value {slot!r} at position {position}', slot, position)


def _resolve_slots(registry, definition, value):
    if not value.strip():
        return
    slots = split(value, SEPARATORS[definition.separator])
    if not definition.slot_options:
        raise ClassificationError('no value allowed')
    elif len(slots) < definition.min_slots:
        raise ClassificationError(
            f'expected at least {definition.min_slots} values, '
            f'got {len(slots)}')
    # Extra slots are checked against the options of the last position.
    last = len(definition.slot_options) - 1
    for position, slot in enumerate(slots):
        options = definition.slot_options[min(position, last)]
        yield classify(registry, slot, options, position)


def resolve(registry, definition, value):
    """Resolve the raw ``value`` of the property described by ``definition``.

    Return a :class:`ResolvedValue`, empty for blank values, or the
    :exc:`ClassificationError` telling why ``value`` is invalid.

    """
    try:
        return ResolvedValue(
            _resolve_slots(registry, definition, value), definition.separator)
    except ClassificationError as exception:
        LOGGER.warning(
            'Ignored `%s: %s`, %s.', definition.key, value, exception)
        return exception
