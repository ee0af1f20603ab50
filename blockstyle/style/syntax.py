"""Parse value definition syntaxes of style properties.

See https://drafts.csswg.org/css-values-4/#value-defs

Syntaxes are expanded into the list of their flat variations, each
variation being a sequence of data types (``<length [0,∞]>``), keywords
and functions joined by spaces, commas or slashes.

"""

import itertools
import re
from math import inf

from .utils import split

# Composite data types and the syntaxes they stand for.
TOKEN_DEFINITIONS = {
    '<length-percentage>': '<length> | <percentage>',
    '<line-width>': '<length [0,∞]> | thin | medium | thick',
    '<line-style>': (
        'none | hidden | dotted | dashed | solid | double | groove | ridge | '
        'inset | outset'),
    '<overflow-block>': 'visible | hidden | clip | scroll | auto',
    '<ratio>': '<number [0,∞]> [ / <number [0,∞]> ]?',
    '<image>': '<link>',
    '<bg-image>': 'none | <image>',
    '<bg-size>': '<length-percentage [0,∞]> | auto | cover | contain',

    # Grid tracks
    '<track-list>': '[ <track-size> | <track-repeat> ]+',
    '<track-size>': (
        '<track-breadth> | minmax(<inflexible-breadth>, <track-breadth>) | '
        'fit-content(<length-percentage [0,∞]>)'),
    '<track-breadth>': (
        '<length-percentage [0,∞]> | <flex [0,∞]> | min-content | '
        'max-content | auto'),
    '<inflexible-breadth>': (
        '<length-percentage [0,∞]> | min-content | max-content | auto'),
    '<track-repeat>': 'repeat(<integer [1,∞]>, [ <track-size> ]+)',

    # Transforms
    '<transform-function>': (
        'translate(<length-percentage>, <length-percentage>?) | '
        'translateX(<length-percentage>) | translateY(<length-percentage>) | '
        'translate3d(<length-percentage>, <length-percentage>, <length>) | '
        'scale(<number>, <number>?) | '
        'scale3d(<number>, <number>, <number>) | '
        'rotate(<angle>) | rotateX(<angle>) | rotateY(<angle>) | '
        'rotateZ(<angle>) | rotate3d(<number>, <number>, <number>, <angle>) | '
        'skew(<angle>, <angle>?) | perspective(<length [0,∞]>)'),

    # Fonts
    '<generic-family>': '<generic-complete> | <generic-incomplete>',
    '<generic-complete>': (
        'serif | sans-serif | system-ui | cursive | fantasy | math | '
        'monospace'),
    '<generic-incomplete>': (
        'ui-serif | ui-sans-serif | ui-monospace | ui-rounded'),

    # Text decorations
    '<text-decoration-line>': 'none | underline | overline | line-through',
    '<text-decoration-style>': 'solid | double | dotted | dashed | wavy',
    '<text-decoration-thickness>': 'auto | from-font | <length-percentage>',
}

DATA_TYPE_RE = re.compile(r'<([a-zA-Z0-9-]+)\s*(\[[^\]]*\])?>')
RANGE_BOUND_RE = re.compile(r'^([+-]?)(∞|inf|\d*\.?\d+)')
MULTIPLIER_RE = re.compile(
    r'^(.+?)(?:([?*+#])|\{(\d+)(?:(,)(\d*))?\})$', re.DOTALL)


def parse_range(string):
    """Parse a ``[min,max]`` range.

    Units of the bounds are ignored, ``∞`` is infinity. Return
    ``(minimum, maximum)``, with ``None`` for missing or invalid bounds.

    """
    bounds = string.strip().lstrip('[').rstrip(']').split(',')
    if len(bounds) != 2:
        return None, None
    result = []
    for bound in bounds:
        match = RANGE_BOUND_RE.match(bound.strip())
        if match is None:
            result.append(None)
            continue
        sign, number = match.groups()
        number = inf if number in ('∞', 'inf') else float(number)
        result.append(-number if sign == '-' else number)
    return tuple(result)


def parse_data_type(token):
    """Parse a ``<name [min,max]>`` data type.

    Return ``(name, (minimum, maximum))``, or ``None`` if ``token`` is
    not a data type.

    """
    match = DATA_TYPE_RE.fullmatch(token.strip())
    if match is None:
        return
    name, range_ = match.groups()
    return name, parse_range(range_) if range_ else (None, None)


def normalize_syntax(syntax):
    """Normalize whitespace in ``syntax``."""
    # Keep ranges stuck to their data types, and multipliers to what
    # they multiply.
    syntax = re.sub(r'<([a-zA-Z0-9-]+)\s+\[', r'<\1[', syntax)
    syntax = re.sub(r'\s+(?=[?*+#{])', '', syntax)
    return ' '.join(syntax.split())


def expand_tokens(syntax, definitions=TOKEN_DEFINITIONS, seen=frozenset()):
    """Replace the composite data types of ``syntax`` by their syntaxes.

    Expansions are grouped in brackets, ranges are given to the data types
    of the expansion that don't have one. Recursive definitions are left
    as they are.

    """
    def expand(match):
        name, range_ = match.groups()
        key = f'<{name}>'
        if key in seen or key not in definitions:
            return match.group(0)
        expanded = expand_tokens(definitions[key], definitions, seen | {key})
        if range_:
            expanded = DATA_TYPE_RE.sub(
                lambda match: match.group(0) if match.group(2)
                else f'<{match.group(1)} {range_}>', expanded)
        return f'[ {expanded} ]'

    return DATA_TYPE_RE.sub(expand, syntax)


def _unique(variations):
    return list(dict.fromkeys(variations))


def _join(parts, separator):
    if separator.isspace():
        return separator.join(part for part in parts if part)
    # Empty parts around literal commas and slashes are kept, dangling
    # separators are removed by _clean once the whole syntax is parsed.
    return separator.join(parts)


def _clean(variation):
    variation = re.sub(r'\s*([,/])\s*', r'\1', variation)
    variation = re.sub(r'[,/]+(?=[,/])', '', variation)
    return variation.strip(',/ ')


def _sequence(parts, separator, max_repetitions):
    """Get the variations of ``parts`` juxtaposed with ``separator``."""
    parsed_parts = [_parse_syntax(part, max_repetitions) for part in parts]
    return _unique(
        _join(product, separator)
        for product in itertools.product(*parsed_parts))


def _repeat(variations, minimum, maximum, separator):
    """Get ``minimum`` to ``maximum`` repetitions of ``variations``."""
    return _unique(
        _join(product, separator)
        for count in range(minimum, maximum + 1)
        for product in itertools.product(variations, repeat=count))


def _split_alternatives(syntax):
    # Split on "|" but not on "||".
    return [
        part.replace('\0', '||')
        for part in split(syntax.replace('||', '\0'), '|')]


def parse_syntax(syntax, max_repetitions=3):
    """Get the list of flat variations allowed by ``syntax``.

    Combinators are handled from the lowest to the highest precedence:
    ``|``, ``||``, ``&&`` and juxtaposition. Multipliers without upper
    bound are repeated at most ``max_repetitions`` times. An empty string
    in the result means that the syntax allows no value at all.

    """
    return _unique(
        _clean(variation)
        for variation in _parse_syntax(syntax, max_repetitions))


def _parse_syntax(syntax, max_repetitions):
    syntax = normalize_syntax(syntax)
    if not syntax:
        return ['']

    if len(parts := _split_alternatives(syntax)) > 1:
        return _unique(
            variation for part in parts
            for variation in _parse_syntax(part, max_repetitions))

    if len(parts := split(syntax, '||')) > 1:
        # One or more of the parts, in any order.
        return _unique(
            variation
            for count in range(1, len(parts) + 1)
            for permutation in itertools.permutations(parts, count)
            for variation in _sequence(permutation, ' ', max_repetitions))

    if len(parts := split(syntax, '&&')) > 1:
        # All the parts, in any order.
        return _unique(
            variation
            for permutation in itertools.permutations(parts)
            for variation in _sequence(permutation, ' ', max_repetitions))

    for separator in (',', '/', ' '):
        if len(parts := split(syntax, separator)) > 1:
            return _sequence(parts, separator, max_repetitions)

    if match := MULTIPLIER_RE.match(syntax):
        base, symbol, minimum, comma, maximum = match.groups()
        variations = _parse_syntax(base, max_repetitions)
        separator = ' '
        if symbol == '?':
            minimum, maximum = 0, 1
        elif symbol == '*':
            minimum, maximum = 0, max_repetitions
        elif symbol in ('+', '#'):
            minimum, maximum = 1, max_repetitions
            if symbol == '#':
                separator = ','
        else:
            minimum = int(minimum)
            if not comma:
                maximum = minimum
            elif maximum:
                maximum = int(maximum)
            else:
                maximum = max(minimum, max_repetitions)
        return _repeat(variations, minimum, maximum, separator)

    if syntax.startswith('[') and syntax.endswith(']'):
        return _parse_syntax(syntax[1:-1], max_repetitions)

    return [syntax]
