"""Helpers for raw style value strings."""

from decimal import Decimal, InvalidOperation

import tinycss2

#: Characters of the separators allowed between the slots of a value.
SEPARATORS = {
    'space': ' ',
    'comma': ',',
    'slash': '/',
}

OPENING_BRACKETS = '[({'
CLOSING_BRACKETS = '])}'


def split(string, separator):
    """Split ``string`` on ``separator`` found out of any brackets.

    Separators between ``[]`` brackets, ``()`` parentheses or ``{}`` braces
    are kept in the current slot. Unbalanced brackets never raise: closing
    brackets without opening ones are ignored, and unterminated content
    goes to the last slot.

    When ``separator`` is whitespace, any run of whitespace separates two
    slots.

    Return a list of stripped slots, with at least one element.

    """
    string = string.strip()
    if not separator:
        return [string]
    collapse = separator.isspace()

    slots = []
    depth = start = index = 0
    while index < len(string):
        character = string[index]
        if character in OPENING_BRACKETS:
            depth += 1
        elif character in CLOSING_BRACKETS:
            depth = max(depth - 1, 0)
        elif depth == 0:
            if collapse and character.isspace():
                slots.append(string[start:index].strip())
                while index + 1 < len(string) and string[index + 1].isspace():
                    index += 1
                start = index + 1
            elif not collapse and string.startswith(separator, index):
                slots.append(string[start:index].strip())
                index += len(separator)
                start = index
                continue
        index += 1
    slots.append(string[start:].strip())
    return slots


def join(slots, separator):
    """Join ``slots`` with ``separator``, the way values are written."""
    if separator.isspace():
        return ' '.join(slots)
    elif separator == ',':
        return ', '.join(slots)
    return f' {separator} '.join(slots)


def split_on_comma(tokens):
    """Split a list of tokens on commas, ie ``LiteralToken(',')``.

    Commas inside functions or blocks are not splitting points.

    """
    parts = [[]]
    for token in tokens:
        if token.type == 'literal' and token.value == ',':
            parts.append([])
        else:
            parts[-1].append(token)
    return parts


def get_function_token(string):
    """Get the tinycss2 function token of a ``name(arguments)`` string.

    Return ``None`` if ``string`` is not a single closed function call.

    """
    string = string.strip()
    if not string.endswith(')'):
        return
    token = tinycss2.parse_one_component_value(string, skip_comments=True)
    if token.type == 'function':
        return token


def parse_function(string):
    """Parse a ``name(arguments)`` string.

    Return ``(name, arguments)``, with the serialized arguments, or
    ``None`` if ``string`` is not a single function call.

    """
    token = get_function_token(string)
    if token is not None:
        return token.name, tinycss2.serialize(token.arguments)


def _serialize_argument(tokens):
    serialized = []
    for token in tokens:
        if token.type in ('whitespace', 'comment'):
            if serialized and serialized[-1] != ' ':
                serialized.append(' ')
        elif token.type == 'function':
            serialized.append(_serialize_function(token))
        else:
            serialized.append(tinycss2.serialize([token]))
    return ''.join(serialized).strip()


def _serialize_function(token):
    arguments = [
        _serialize_argument(part) for part in split_on_comma(token.arguments)]
    if arguments == ['']:
        arguments = []
    return f'{token.name}({", ".join(arguments)})'


def normalize_function(string):
    """Normalize whitespace of a ``name(arguments)`` string.

    Arguments are separated by ``', '`` and whitespace between tokens is
    reduced to single spaces, recursively in nested functions. Strings are
    serialized with double quotes, their content is kept.

    """
    token = get_function_token(string)
    if token is None:
        return string.strip()
    return _serialize_function(token)


def format_number(representation):
    """Serialize a numeric literal without superfluous characters.
    Leading zeros and signs, trailing zeros and decimal points are
    removed, exponents are expanded and negative zero becomes ``0``.

    """
    try:
        number = Decimal(representation)
    except InvalidOperation:
        return representation
    if number == 0:
        return '0'
    return format(number.normalize(), 'f')
