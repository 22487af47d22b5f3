"""Aligned label blocks for failure reports, in the style of
stretchr/testify

    >>> print(format_labeled_texts([LabeledText('Expected', '1'),
    ...                             LabeledText('Actual', '2')]))
      Expected:  1
      Actual  :  2
"""
import logging
from dataclasses import dataclass

import regex as re

from assertkit.config import load_options
from assertkit.console import colorize

logger = logging.getLogger(__name__)

__all__ = [
    'LabeledText',
    'format_labeled_texts',
    'format_message',
    ]

SEPARATOR = ':  '
MARGIN = '  '

_NEWLINE = re.compile(r'\r?\n')


@dataclass(frozen=True)
class LabeledText:
    label: str
    message: str


def scan_lines(message):
    """Split on newlines the way a line scanner reads a stream

    >>> scan_lines('a\\r\\nb\\n')
    ['a', 'b']
    >>> scan_lines('a\\n\\nb')
    ['a', '', 'b']
    >>> scan_lines('')
    []
    """
    lines = _NEWLINE.split(message)
    lines[-1] = lines[-1].removesuffix('\r')
    if lines[-1] == '':
        lines.pop()
    return lines


def format_message(message, label_width):
    """Indent continuation lines under the first line of the message

    >>> print(format_message('B\\nC', 6))
    B
               C
    """
    indent = '\n' + MARGIN + ' ' * (label_width + len(SEPARATOR))
    return indent.join(scan_lines(message))


@load_options
def format_labeled_texts(texts, options=None):
    """One block, labels padded to the widest, in the given order.
    Width is always taken from the raw label, never the colorized one.

    >>> format_labeled_texts([])
    ''
    >>> format_labeled_texts([LabeledText('exp', 'A'), LabeledText('actual', 'B\\nC')])
    '  exp   :  A\\n  actual:  B\\n           C'
    """
    label_width = max((len(text.label) for text in texts), default=0)

    blocks = []
    for text in texts:
        label = colorize(text.label) if options.enable_color else text.label
        padding = ' ' * (label_width - len(text.label))
        blocks.append(MARGIN + label + padding + SEPARATOR + format_message(text.message, label_width))
    return '\n'.join(blocks)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
