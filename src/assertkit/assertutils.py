"""Failure report for an unequal expected/actual pair.

The assertion engine deciding equality lives elsewhere; this only
renders what it hands over.
"""
import logging

from assertkit.callers import caller_infos
from assertkit.config import load_options
from assertkit.formatutils import check_equal_args, format_unequal_values
from assertkit.formatutils import is_empty
from assertkit.labels import LabeledText, format_labeled_texts

logger = logging.getLogger(__name__)

__all__ = ['failure_report']


@load_options
def failure_report(expected, actual, message='', options=None):
    """Aligned block with the error trace, both values and any message.
    Raises UnsupportedComparisonError for function arguments.
    """
    check_equal_args(expected, actual)
    exp, act = format_unequal_values(expected, actual, options)
    texts = []
    # past caller_infos, this function and the options wrapper
    if trace := caller_infos(skip=3, options=options):
        texts.append(LabeledText('Error Trace', '\n'.join(trace)))
    texts.extend([
        LabeledText('Error', 'Not equal:'),
        LabeledText('Expected', exp),
        LabeledText('Actual', act),
        ])
    if not is_empty(message):
        texts.append(LabeledText('Messages', str(message)))
    return format_labeled_texts(texts, options)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
