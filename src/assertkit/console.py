"""Used in colorizing failure report labels"""

import logging

from assertkit import config

logger = logging.getLogger(__name__)

#
# windows consoles need ansi sequences translated
#
if config.WIN:
    import colorama
    colorama.just_fix_windows_console()

__all__ = ['colorize']

#
# ansi color constants
#
ANSI_RED = '\x1b[31m'
ANSI_YELLOW = '\x1b[33m'
ANSI_GREEN = '\x1b[32m'
ANSI_PINK = '\x1b[35m'
ANSI_NORMAL = '\x1b[0m'
ANSI_CLEAR = '\x1b[m'


def colorize(text, color=ANSI_GREEN):
    """Wrap text in an ansi color and reset

    >>> colorize('Expected')
    '\\x1b[32mExpected\\x1b[0m'
    >>> colorize('')
    ''
    """
    if not text:
        return text
    return f'{color}{text}{ANSI_NORMAL}'


if __name__ == '__main__':
    for color in (ANSI_RED, ANSI_YELLOW, ANSI_GREEN, ANSI_PINK):
        print(colorize(f'This is color {color!r}. How does it look?', color))
