"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

Only two levels are used:

- warnings for ignored style values, unknown properties and unknown
  registry options;
- debug messages for token types replaced while the registry is built.

:func:`capture_logs` is mostly used by tests.

"""

import contextlib
import logging

LOGGER = logging.getLogger('blockstyle')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())


class CallbackHandler(logging.Handler):
    """A logging handler that calls a function for every message."""
    def __init__(self, callback):
        logging.Handler.__init__(self)
        self.emit = callback


@contextlib.contextmanager
def capture_logs(logger='blockstyle', level=None):
    """Return a context manager capturing messages logged at ``level``.

    Messages with a lower level are dropped, ``level`` is WARNING by
    default.

    """
    if level is None:
        level = logging.WARNING
    logger = logging.getLogger(logger)
    messages = []

    def emit(record):
        if record.levelno < level:
            return
        messages.append(f'{record.levelname.upper()}: {record.getMessage()}')

    previous_handlers = logger.handlers
    previous_level = logger.level
    logger.handlers = []
    logger.addHandler(CallbackHandler(emit))
    logger.setLevel(logging.DEBUG)
    try:
        yield messages
    finally:
        logger.handlers = previous_handlers
        logger.level = previous_level
