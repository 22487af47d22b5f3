import doctest
import importlib

import pytest

from assertkit import Setting

MODULES = [
    'assertkit.callers',
    'assertkit.config',
    'assertkit.console',
    'assertkit.exception',
    'assertkit.formatutils',
    'assertkit.labels',
    'assertkit.mathutils',
    ]


@pytest.mark.parametrize('name', MODULES)
def test_doctests(name):
    module = importlib.import_module(name)
    was_locked = Setting._locked
    try:
        failures, _ = doctest.testmod(module, optionflags=4 | 8 | 32)
    finally:
        if was_locked:
            Setting.lock()
    assert failures == 0
