"""Style value engine of a visual block editor.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

#: Default values for :class:`Registry` options.
#:
#: :param int max_repetitions:
#:     Number of repetitions generated for the ``+``, ``*`` and ``#``
#:     multipliers of property syntaxes.
#: :param str mixed_value:
#:     Value displayed for a shorthand whose longhands disagree.
#: :param str default_device:
#:     Device whose styles apply when the selected device has none.
#: :param str default_orientation:
#:     Orientation whose styles apply when the selected one has none.
#: :param str default_pseudo:
#:     Pseudo-state whose styles apply when the selected one has none.
DEFAULT_OPTIONS = {
    'max_repetitions': 3,
    'mixed_value': 'mixed',
    'default_device': 'all',
    'default_orientation': 'all',
    'default_pseudo': 'all',
}

__all__ = [
    'DEFAULT_OPTIONS', 'LOGGER', 'VERSION', 'ClassificationError',
    'OptionDefinition', 'PropertyDefinition', 'Registry', 'RegistryError',
    'ResolvedValue', 'Slot', 'TokenMatch', 'TokenType', '__version__',
    'apply_style', 'cascade_style', 'cascade_styles', 'create_registry',
    'get_unit_dimension', 'join', 'resolve', 'resolve_longhand',
    'resolve_style', 'split']


# Import after setting the options, as they are used in other modules
from .logger import LOGGER  # noqa: I001, E402
from .style import ResolvedValue, Slot, resolve  # noqa: E402
from .style.properties import PropertyDefinition  # noqa: E402
from .style.shorthands import resolve_longhand  # noqa: E402
from .style.tokens import (  # noqa: E402
    ClassificationError, OptionDefinition, RegistryError, TokenMatch,
    TokenType)
from .style.units import get_unit_dimension  # noqa: E402
from .style.utils import join, split  # noqa: E402
from .registry import Registry, create_registry  # noqa: E402
from .cascade import (  # noqa: E402
    apply_style, cascade_style, cascade_styles, resolve_style)
