"""Test styles scoped by device, orientation and pseudo-state."""

import pytest

from blockstyle import (
    apply_style, cascade_style, cascade_styles, resolve_style)
from blockstyle.logger import capture_logs

from .testing_utils import assert_no_logs

STYLES = {
    'all': {
        'all': {
            'all': {'color': '#000', 'width': '10px'},
            'hover': {'color': '#111'},
        },
        'landscape': {
            'all': {'width': '20px'},
        },
    },
    'mobile': {
        'all': {
            'all': {'width': '30px', 'height': ''},
            'hover': {'height': '5px'},
        },
        'portrait': {
            'hover': {'color': '#222'},
        },
    },
}


@assert_no_logs
@pytest.mark.parametrize('key, scope, value', (
    ('color', ('all', 'all', 'all'), '#000'),
    ('color', ('all', 'all', 'hover'), '#111'),
    ('color', ('mobile', 'portrait', 'hover'), '#222'),
    ('color', ('mobile', 'portrait', 'all'), '#000'),
    ('color', ('mobile', 'landscape', 'hover'), '#111'),
    ('color', ('tablet', 'all', 'focus'), '#000'),
    ('width', ('all', 'landscape', 'hover'), '20px'),
    ('width', ('mobile', 'landscape', 'all'), '30px'),
    ('width', ('tablet', 'landscape', 'all'), '20px'),
    ('height', ('mobile', 'all', 'all'), ''),
    ('height', ('mobile', 'all', 'hover'), '5px'),
    ('height', ('all', 'all', 'all'), ''),
    ('margin', ('all', 'all', 'all'), ''),
))
def test_cascade_style(key, scope, value):
    assert cascade_style(STYLES, key, *scope) == value


@assert_no_logs
def test_cascade_style_empty_value():
    # Empty values set for the selected scope hide default values.
    styles = {
        'all': {'all': {'all': {'height': '1px'}}},
        'mobile': {'all': {'all': {'height': ''}}},
    }
    assert cascade_style(styles, 'height', 'mobile', 'all', 'all') == ''


@assert_no_logs
def test_cascade_style_default_scope():
    styles = {'any': {'any': {'any': {'color': '#000'}}}}
    assert cascade_style(styles, 'color', 'mobile', 'all', 'all') == ''
    assert cascade_style(
        styles, 'color', 'mobile', 'all', 'all',
        ('any', 'any', 'any')) == '#000'


@assert_no_logs
def test_resolve_style(registry):
    styles = {'all': {'all': {'all': {
        'margin-top': '1px', 'margin-right': '1px',
        'padding-top': '1px', 'padding-left': '2px',
        'width': '10px',
    }}}}
    scope = ('all', 'all', 'all')
    assert resolve_style(registry, styles, 'margin', *scope) == '1px'
    assert resolve_style(registry, styles, 'padding', *scope) == 'mixed'
    assert resolve_style(registry, styles, 'gap', *scope) == ''
    assert resolve_style(registry, styles, 'width', *scope) == '10px'
    assert resolve_style(registry, styles, 'margin-top', *scope) == '1px'


@assert_no_logs
def test_resolve_style_cascade(registry):
    styles = {
        'all': {'all': {'all': {'row-gap': '1px', 'column-gap': '2px'}}},
        'mobile': {'all': {'all': {'column-gap': '1px'}}},
    }
    assert resolve_style(
        registry, styles, 'gap', 'all', 'all', 'all') == 'mixed'
    assert resolve_style(
        registry, styles, 'gap', 'mobile', 'all', 'all') == '1px'


@assert_no_logs
def test_apply_style(registry):
    styles = {'all': {'all': {'all': {'color': '#000'}}}}
    new_styles = apply_style(
        registry, styles, 'width', '10px', 'mobile', 'portrait', 'hover')
    assert styles == {'all': {'all': {'all': {'color': '#000'}}}}
    assert new_styles == {
        'all': {'all': {'all': {'color': '#000'}}},
        'mobile': {'portrait': {'hover': {'width': '10px'}}},
    }
    assert cascade_style(
        new_styles, 'width', 'mobile', 'portrait', 'hover') == '10px'
    assert cascade_style(
        new_styles, 'color', 'mobile', 'portrait', 'hover') == '#000'


@assert_no_logs
def test_apply_style_replace(registry):
    styles = {'all': {'all': {'all': {'color': '#000', 'width': '1px'}}}}
    new_styles = apply_style(
        registry, styles, 'color', '#fff', 'all', 'all', 'all')
    assert new_styles == {
        'all': {'all': {'all': {'color': '#fff', 'width': '1px'}}}}
    assert styles['all']['all']['all']['color'] == '#000'


@assert_no_logs
def test_apply_style_shorthand(registry):
    new_styles = apply_style(
        registry, {}, 'margin', '1px 2px', 'all', 'all', 'all')
    assert new_styles == {'all': {'all': {'all': {
        'margin-top': '1px', 'margin-right': '2px',
        'margin-bottom': '1px', 'margin-left': '2px'}}}}
    assert resolve_style(
        registry, new_styles, 'margin', 'all', 'all', 'all') == 'mixed'

    new_styles = apply_style(
        registry, new_styles, 'margin', '3px', 'all', 'all', 'all')
    assert resolve_style(
        registry, new_styles, 'margin', 'all', 'all', 'all') == '3px'


@assert_no_logs
def test_apply_style_clear(registry):
    styles = apply_style(registry, {}, 'gap', '1px', 'all', 'all', 'all')
    styles = apply_style(registry, styles, 'gap', '', 'all', 'all', 'all')
    assert styles == {'all': {'all': {'all': {
        'row-gap': '', 'column-gap': ''}}}}
    assert resolve_style(registry, styles, 'gap', 'all', 'all', 'all') == ''


def test_apply_style_invalid_shorthand(registry):
    styles = {'all': {'all': {'all': {'color': '#000'}}}}
    with capture_logs() as logs:
        new_styles = apply_style(
            registry, styles, 'gap', '1px 2px 3px', 'all', 'all', 'all')
    assert new_styles is styles
    assert logs == [
        'WARNING: Ignored `gap: 1px 2px 3px`, expected 1 or 2 values, got 3.']


@pytest.mark.parametrize('key, value, message', (
    ('width', 'banana', "invalid value 'banana' at position 0"),
    ('margin', '1px banana', "invalid value 'banana' at position 0"),
    ('unknown', '1px', "Unknown property 'unknown'"),
))
def test_apply_style_invalid(registry, key, value, message):
    styles = {'all': {'all': {'all': {'color': '#000'}}}}
    with capture_logs() as logs:
        new_styles = apply_style(
            registry, styles, key, value, 'all', 'all', 'all')
    assert new_styles is styles
    assert len(logs) == 1
    assert message in logs[0]


@assert_no_logs
def test_apply_style_reset(registry):
    styles = {'all': {'all': {'all': {'width': '10px'}}}}
    new_styles = apply_style(
        registry, styles, 'width', '', 'all', 'all', 'all')
    assert new_styles == {'all': {'all': {'all': {'width': ''}}}}


@assert_no_logs
@pytest.mark.parametrize('scope, values', (
    (('all', 'all', 'all'), {'color': '#000', 'width': '10px', 'height': ''}),
    (('mobile', 'portrait', 'hover'), {
        'color': '#222', 'width': '30px', 'height': '5px'}),
    (('tablet', 'landscape', 'all'), {
        'color': '#000', 'width': '20px', 'height': ''}),
))
def test_cascade_styles(scope, values):
    assert cascade_styles(STYLES, *scope) == values


@assert_no_logs
def test_cascade_styles_default_scope():
    styles = {'any': {'any': {'any': {'color': '#000'}}}}
    assert cascade_styles(styles, 'all', 'all', 'all') == {'color': ''}
    assert cascade_styles(
        styles, 'all', 'all', 'all', ('any', 'any', 'any')) == {
        'color': '#000'}
    assert cascade_styles({}, 'all', 'all', 'all') == {}
