"""Built-in token types.

Each token type tells whether a slot of a style value is of its type, and
gives the canonical form of the slots it matches. Token types are tried in
ascending priority order:

====  ==========  ================================================
 10   keyword     identifiers listed in the options of the slot
 20   length      numbers with a unit, unitless zero lengths
 30   link        ``url()`` functions, quoted and bare URLs
 40   color       hex colors, color functions and named colors
 50   function    functions listed in the options of the slot
 60   integer     numbers without fractional part
 70   number      any number
====  ==========  ================================================

"""

import re

import tinycss2
from tinycss2.color4 import parse_color
from tinycss2.serializer import serialize_string_value

from .syntax import parse_data_type
from .tokens import TokenMatch, TokenType, in_range
from .units import DIMENSION_GROUPS, UNITS, get_unit_dimension
from .utils import format_number, normalize_function, parse_function

TOKEN_TYPES = {}

KEYWORD_RE = re.compile(r'^-?[a-zA-Z_][a-zA-Z0-9_-]*$')
HEX_COLOR_RE = re.compile(
    r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')
BARE_URL_RE = re.compile(
    r'^(?:[a-zA-Z][a-zA-Z0-9.+-]*:|\.{0,2}/)[^\s"\'()]+$')
QUOTED_URL_CHARACTERS_RE = re.compile(r'[\s"\'()\\]')

COLOR_FUNCTIONS = {'rgb', 'rgba', 'hsl', 'hsla'}


def token_type(cls):
    """Decorator adding a token type class to ``TOKEN_TYPES``."""
    assert cls.key not in TOKEN_TYPES, cls.key
    TOKEN_TYPES[cls.key] = cls
    return cls


def parse_numeric(slot):
    """Parse a number, percentage or dimension slot.

    Return a tinycss2 token, or ``None``.

    """
    token = tinycss2.parse_one_component_value(slot, skip_comments=True)
    if token.type in ('number', 'percentage', 'dimension'):
        return token


def get_unit(token):
    """Get the lower-cased unit of a numeric token, ``None`` for numbers."""
    if token.type == 'dimension':
        return token.lower_unit
    elif token.type == 'percentage':
        return '%'


def get_link(slot):
    """Parse a link slot.

    Return ``(form, url)``, where ``form`` is ``'url'``, ``'string'`` or
    ``'bare'``, or ``None`` if the slot is not a link.

    """
    slot = slot.strip()
    if BARE_URL_RE.match(slot):
        return 'bare', slot
    token = tinycss2.parse_one_component_value(slot, skip_comments=True)
    if token.type == 'url' and token.value:
        return 'url', token.value
    elif token.type == 'function' and token.lower_name == 'url':
        arguments = [
            argument for argument in token.arguments
            if argument.type not in ('whitespace', 'comment')]
        if len(arguments) == 1 and arguments[0].type == 'string':
            if arguments[0].value:
                return 'url', arguments[0].value
    elif token.type == 'string' and BARE_URL_RE.match(token.value):
        return 'string', token.value


@token_type
class KeywordType(TokenType):
    """Identifiers such as ``auto`` or ``solid``."""
    key = 'keyword'
    priority = 10
    category = 'keyword'

    def recognizes(self, token):
        return bool(KEYWORD_RE.match(token))

    def classify(self, slot, options):
        # Keywords are never free-form.
        keyword = slot.strip().lower()
        for option in options:
            if option.category == 'keyword' and option.name.lower() == keyword:
                return TokenMatch(self.key, option)

    def canonicalize(self, slot):
        return slot.strip().lower()


@token_type
class LengthType(TokenType):
    """Lengths, percentages, angles and flex values."""
    key = 'length'
    priority = 20
    category = 'dimension'
    default = '0px'
    defaults = {
        'length': '0px',
        'percentage': '0%',
        'angle': '0deg',
        'flex': '1fr',
    }

    def __init__(self, units=None):
        super().__init__(UNITS if units is None else units)

    def recognizes(self, token):
        data_type = parse_data_type(token)
        return data_type is not None and data_type[0] in DIMENSION_GROUPS

    def default_for(self, token):
        dimension_group, _ = parse_data_type(token)
        return self.defaults[dimension_group]

    def create_options(self, token, registry):
        dimension_group, (minimum, maximum) = parse_data_type(token)
        return [
            self.create_option(
                unit.symbol, f'0{unit.symbol}',
                min=minimum, max=maximum, syntax=token)
            for unit in self.units.values()
            if unit.dimension_group == dimension_group]

    def classify(self, slot, options):
        token = parse_numeric(slot)
        if token is None:
            return
        unit = get_unit(token)
        if unit is None:
            # Only zero lengths can be unitless.
            if token.value != 0:
                return
        elif unit not in self.units:
            return

        admitted = self.admitted(options)
        if admitted is None:
            return TokenMatch(self.key, None)
        for option in admitted:
            if unit is None:
                dimension_group = get_unit_dimension(option.name, self.units)
                if dimension_group == 'length' and in_range(option, 0):
                    return TokenMatch(self.key, option)
            elif option.name.lower() == unit and in_range(option, token.value):
                return TokenMatch(self.key, option)

    def canonicalize(self, slot):
        token = parse_numeric(slot)
        if token is None:
            return slot.strip()
        return f'{format_number(token.representation)}{get_unit(token) or ""}'


@token_type
class LinkType(TokenType):
    """URLs of images and other external resources."""
    key = 'link'
    priority = 30
    default = 'url(https://example.com/image.png)'

    def recognizes(self, token):
        return token in ('<link>', '<url>')

    def create_options(self, token, registry):
        return [self.create_option('link', self.default, syntax=token)]

    def classify(self, slot, options):
        admitted = self.admitted(options)
        if admitted == [] or get_link(slot) is None:
            return
        return TokenMatch(self.key, admitted[0] if admitted else None)

    def canonicalize(self, slot):
        link = get_link(slot)
        if link is None:
            return slot.strip()
        form, url = link
        if form == 'url':
            if QUOTED_URL_CHARACTERS_RE.search(url):
                return f'url("{serialize_string_value(url)}")'
            return f'url({url})'
        elif form == 'string':
            return f'"{serialize_string_value(url)}"'
        return url


@token_type
class ColorType(TokenType):
    """Hex colors, color functions and named colors."""
    key = 'color'
    priority = 40
    default = '#ffffff'

    def recognizes(self, token):
        return token == '<color>'

    def create_options(self, token, registry):
        return [self.create_option('color', self.default, syntax=token)]

    def classify(self, slot, options):
        admitted = self.admitted(options)
        if admitted == []:
            return
        option = admitted[0] if admitted else None
        slot = slot.strip()
        if HEX_COLOR_RE.match(slot):
            return TokenMatch(self.key, option)
        function = parse_function(slot)
        if function is not None:
            if function[0].lower() in COLOR_FUNCTIONS:
                if parse_color(slot) is not None:
                    return TokenMatch(self.key, option)
            return
        # Named colors are only accepted when listed in the options.
        for option in admitted or ():
            if option.name.lower() == slot.lower():
                if parse_color(slot) is not None:
                    return TokenMatch(self.key, option)

    def canonicalize(self, slot):
        slot = slot.strip()
        if parse_function(slot) is not None:
            return normalize_function(slot)
        return slot.lower()


@token_type
class FunctionType(TokenType):
    """Functions such as ``minmax()`` or ``translate()``."""
    key = 'function'
    priority = 50
    category = 'function'

    def recognizes(self, token):
        return parse_function(token) is not None

    def create_options(self, token, registry):
        name, arguments = parse_function(token)
        return [self.create_option(
            name, registry.default_value(token), syntax=arguments.strip())]

    def classify(self, slot, options):
        # Arguments are not checked against the syntax of the option.
        function = parse_function(slot)
        if function is None:
            return
        name = function[0].lower()
        for option in self.admitted(options) or ():
            if option.name.lower() == name:
                return TokenMatch(self.key, option)

    def canonicalize(self, slot):
        return normalize_function(slot)


@token_type
class NumberType(TokenType):
    """Numbers without unit."""
    key = 'number'
    priority = 70
    default = '0'

    def recognizes(self, token):
        data_type = parse_data_type(token)
        return data_type is not None and data_type[0] == self.key

    def default_for(self, token):
        _, (minimum, maximum) = parse_data_type(token)
        if minimum is not None and 0 < minimum < float('inf'):
            return format_number(repr(minimum))
        return self.default

    def create_options(self, token, registry):
        _, (minimum, maximum) = parse_data_type(token)
        return [self.create_option(
            self.key, self.default_for(token),
            min=minimum, max=maximum, syntax=token)]

    def accepts(self, token):
        return token.type == 'number'

    def classify(self, slot, options):
        token = parse_numeric(slot)
        if token is None or not self.accepts(token):
            return
        admitted = self.admitted(options)
        if admitted is None:
            return TokenMatch(self.key, None)
        for option in admitted:
            if in_range(option, token.value):
                return TokenMatch(self.key, option)

    def canonicalize(self, slot):
        token = parse_numeric(slot)
        if token is None or token.type != 'number':
            return slot.strip()
        number = format_number(token.representation)
        if not token.is_integer and '.' not in number:
            # Numbers written with a fraction or an exponent stay numbers.
            number += '.0'
        return number


@token_type
class IntegerType(NumberType):
    """Numbers without unit nor fractional part."""
    key = 'integer'
    priority = 60

    def accepts(self, token):
        return token.type == 'number' and token.is_integer
