#!/usr/bin/env python

"""
    blockstyle
    ==========

    blockstyle resolves the style values of a visual block editor.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError(
        'blockstyle does not support Python 2.x. Please use Python 3.')

setup()
