"""Helpers for tests."""

import functools
import logging
import sys

from blockstyle.logger import capture_logs


def assert_no_logs(function):
    """Decorator that asserts that nothing is logged in a function."""
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with capture_logs(level=logging.DEBUG) as logs:
            try:
                function(*args, **kwargs)
            except Exception:  # pragma: no cover
                if logs:
                    print(f'{len(logs)} errors logged:', file=sys.stderr)
                    for message in logs:
                        print(message, file=sys.stderr)
                raise
            else:
                if logs:  # pragma: no cover
                    for message in logs:
                        print(message, file=sys.stderr)
                    raise AssertionError(f'{len(logs)} errors logged')
    return wrapper


def assert_invalid(registry, key, value, message='invalid'):
    """Assert that ``value`` is ignored for ``key``, with a logged warning."""
    with capture_logs() as logs:
        result = registry.resolve(key, value)
    assert isinstance(result, Exception)
    assert len(logs) == 1
    assert logs[0].startswith(f'WARNING: Ignored `{key}: {value}`')
    assert message in logs[0]
    return result
