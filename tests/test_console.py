from asserts import assert_equal

from assertkit import colorize
from assertkit.console import ANSI_GREEN, ANSI_NORMAL, ANSI_RED


def test_colorize_default_green():
    assert_equal(f'{ANSI_GREEN}Actual{ANSI_NORMAL}', colorize('Actual'))


def test_colorize_color():
    assert_equal(f'{ANSI_RED}x{ANSI_NORMAL}', colorize('x', ANSI_RED))


def test_colorize_empty():
    assert_equal('', colorize(''))
