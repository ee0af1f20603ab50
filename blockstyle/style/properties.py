"""Style properties and their value definition syntaxes."""

import collections

from .shorthands import CORNERS, FOUR_SIDES
from .tokens import RegistryError
from .utils import SEPARATORS, split

PropertyDefinition = collections.namedtuple(
    'PropertyDefinition',
    ['key', 'syntax', 'slot_options', 'separator', 'min_slots'],
    defaults=('space', 1))

COLOR = '<color> | currentcolor | transparent'
SIZE = '<length-percentage [0,∞]> | min-content | max-content'

STYLE_PROPERTIES = {
    # Display
    'display': (
        'block | inline | inline-block | flex | inline-flex | grid | '
        'inline-grid | flow-root | contents | none'),
    'visibility': 'visible | hidden | collapse',
    'opacity': '<number [0,1]> | <percentage [0,100]>',
    'overflow': '<overflow-block>{1,2}',
    'overflow-x': '<overflow-block>',
    'overflow-y': '<overflow-block>',
    'box-sizing': 'content-box | border-box',
    'cursor': (
        'auto | default | none | pointer | text | move | grab | grabbing | '
        'not-allowed'),

    # Position
    'position': 'static | relative | absolute | fixed | sticky',
    'inset': '[ auto | <length-percentage> ]{1,4}',
    **{side: 'auto | <length-percentage>' for side in FOUR_SIDES},
    'z-index': 'auto | <integer>',

    # Size
    'width': f'auto | {SIZE} | fit-content(<length-percentage [0,∞]>)',
    'height': f'auto | {SIZE} | fit-content(<length-percentage [0,∞]>)',
    'min-width': f'auto | {SIZE}',
    'min-height': f'auto | {SIZE}',
    'max-width': f'none | {SIZE}',
    'max-height': f'none | {SIZE}',
    'aspect-ratio': 'auto | <ratio>',

    # Margins and paddings
    'margin': '[ auto | <length-percentage> ]{1,4}',
    **{
        f'margin-{side}': 'auto | <length-percentage>'
        for side in FOUR_SIDES},
    'padding': '<length-percentage [0,∞]>{1,4}',
    **{f'padding-{side}': '<length-percentage [0,∞]>' for side in FOUR_SIDES},

    # Borders
    'border-width': '<line-width>{1,4}',
    **{f'border-{side}-width': '<line-width>' for side in FOUR_SIDES},
    'border-style': '<line-style>{1,4}',
    **{f'border-{side}-style': '<line-style>' for side in FOUR_SIDES},
    'border-color': f'[ {COLOR} ]{{1,4}}',
    **{f'border-{side}-color': COLOR for side in FOUR_SIDES},
    'border-radius': '<length-percentage [0,∞]>{1,4}',
    **{
        f'border-{corner}-radius': '<length-percentage [0,∞]>'
        for corner in CORNERS},

    # Colors and backgrounds
    'color': COLOR,
    'background-color': COLOR,
    'background-image': '<bg-image>',
    'background-size': '<bg-size>{1,2}',
    'background-repeat': (
        'repeat-x | repeat-y | [ repeat | space | round | no-repeat ]{1,2}'),

    # Fonts and texts
    'font-family': '<generic-family>#',
    'font-size': (
        '<length-percentage [0,∞]> | xx-small | x-small | small | medium | '
        'large | x-large | xx-large | smaller | larger'),
    'font-weight': 'normal | bold | bolder | lighter | <number [1,1000]>',
    'font-style': 'normal | italic | oblique <angle [-90,90]>?',
    'line-height': 'normal | <number [0,∞]> | <length-percentage [0,∞]>',
    'letter-spacing': 'normal | <length>',
    'text-align': 'start | end | left | right | center | justify',
    'text-decoration-line': '<text-decoration-line>',
    'text-decoration-style': '<text-decoration-style>',
    'text-decoration-color': COLOR,
    'text-decoration-thickness': '<text-decoration-thickness>',

    # Flex
    'flex-direction': 'row | row-reverse | column | column-reverse',
    'flex-wrap': 'nowrap | wrap | wrap-reverse',
    'flex-grow': '<number [0,∞]>',
    'flex-shrink': '<number [0,∞]>',
    'flex-basis': 'content | auto | <length-percentage [0,∞]>',
    'justify-content': (
        'normal | flex-start | flex-end | center | space-between | '
        'space-around | space-evenly | stretch'),
    'align-items': (
        'normal | stretch | flex-start | flex-end | center | baseline'),
    'gap': '[ normal | <length-percentage [0,∞]> ]{1,2}',
    'row-gap': 'normal | <length-percentage [0,∞]>',
    'column-gap': 'normal | <length-percentage [0,∞]>',

    # Grid
    'grid-template-columns': 'none | <track-list>',
    'grid-template-rows': 'none | <track-list>',
    'grid-auto-flow': '[ row | column ] || dense',

    # Transforms
    'transform': 'none | <transform-function>+',
    'rotate': 'none | <angle>',
}


def get_separator(variations):
    """Get the name of the separator used between the slots of a property.

    Commas win over slashes, that win over spaces.

    """
    for name in ('comma', 'slash'):
        for variation in variations:
            if len(split(variation, SEPARATORS[name])) > 1:
                return name
    return 'space'


def create_property(registry, key, syntax):
    """Build the definition of the property called ``key``.

    The options of each slot are the options of all the tokens that can be
    found at this position in the variations allowed by ``syntax``.

    Raise :exc:`RegistryError` if a token of the syntax has no token type.

    """
    variations = [
        variation for variation in registry.parse_syntax(syntax) if variation]
    if not variations:
        raise RegistryError(f'No value allowed by syntax of {key!r}')
    separator = get_separator(variations)

    columns = []
    for variation in variations:
        for position, token in enumerate(
                split(variation, SEPARATORS[separator])):
            if position == len(columns):
                columns.append({})
            columns[position][token] = None

    slot_options = []
    for column in columns:
        options = {}
        for token in column:
            for option in registry.create_options(token):
                options[option] = None
        slot_options.append(tuple(options))

    min_slots = min(
        len(split(variation, SEPARATORS[separator]))
        for variation in variations)
    return PropertyDefinition(
        key, syntax, tuple(slot_options), separator, min_slots)
