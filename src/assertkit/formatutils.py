import datetime
import functools
import inspect
import json
import logging

import regex as re

from assertkit.config import load_options
from assertkit.exception import UnsupportedComparisonError

logger = logging.getLogger(__name__)

__all__ = [
    'check_equal_args',
    'format_duration',
    'format_unequal_values',
    'is_empty',
    'quote',
    'truncating_format',
    'type_name',
    ]

NIL = '<nil>'
TRUNCATED = '<... truncated>'

_CONTROL = re.compile(r'\p{Cc}')


def is_empty(value):
    """None or falsy

    >>> is_empty(None), is_empty(''), is_empty([]), is_empty(0.0)
    (True, True, True, True)
    >>> is_empty('a'), is_empty([0]), is_empty(object())
    (False, False, False)
    """
    return value is None or not value


def is_func(value):
    return inspect.isroutine(value) or isinstance(value, functools.partial)


def check_equal_args(expected, actual):
    """Functions have no equality worth reporting on

    >>> check_equal_args(1, 2)
    >>> check_equal_args(None, len)
    Traceback (most recent call last):
        ...
    assertkit.exception.UnsupportedComparisonError: cannot take func type as argument
    """
    if expected is None and actual is None:
        return
    if is_func(expected) or is_func(actual):
        raise UnsupportedComparisonError()


def type_name(value):
    """Dynamic type name, builtins are left bare

    >>> type_name(1), type_name([]), type_name(datetime.date(2000, 1, 1))
    ('int', 'list', 'datetime.date')
    """
    cls = type(value)
    if cls.__module__ == 'builtins':
        return cls.__qualname__
    return f'{cls.__module__}.{cls.__qualname__}'


def quote(s):
    r"""Double quoted with control characters escaped

    >>> print(quote('abc'))
    "abc"
    >>> print(quote('a"b\n\tc'))
    "a\"b\n\tc"
    >>> print(quote('café'))
    "café"
    >>> print(quote('a\x7fb\x85c'))
    "a\u007fb\u0085c"
    """
    return _CONTROL.sub(lambda m: f'\\u{ord(m.group()):04x}', json.dumps(s, ensure_ascii=False))


@load_options
def truncating_format(value, options=None):
    """Formats the value with its type and truncates it if too long.

    Keeps formatted failure lines under the line length a test log
    scanner will accept.

    >>> truncating_format(None)
    '<nil>'
    >>> truncating_format('abc')
    'string("abc")'
    >>> truncating_format(12)
    'int(12)'
    >>> truncating_format([1, 'a'])
    "list([1, 'a'])"
    >>> truncating_format('x' * 20, {'max_len': 10})
    'string("xx<... truncated>'
    """
    if value is None:
        return NIL

    if isinstance(value, str):
        text = f'string({quote(value)})'
    else:
        text = f'{type_name(value)}({value})'

    max_len = options.max_len
    if len(text) > max_len:
        logger.debug(f'Truncating {type_name(value)} value of length {len(text)} to {max_len}')
        text = text[:max_len] + TRUNCATED
    return text


def format_duration(td):
    """Human readable timedelta

    >>> format_duration(datetime.timedelta(seconds=90))
    '1.5 min'
    >>> format_duration(datetime.timedelta(days=14))
    '2 wks'
    >>> format_duration(-datetime.timedelta(seconds=30))
    '-30 sec'
    """
    def fmt_num(val, units):
        s = f'{val:.1f} {units}'
        return s.replace('.0 ', ' ')

    if td < datetime.timedelta(0):
        return '-' + format_duration(-td)
    if td.days > 365:
        return fmt_num(td.days / 365.0, 'yrs')
    if td.days > 30:
        return fmt_num(td.days / 30.0, 'mos')
    if td.days > 7:
        return fmt_num(td.days / 7.0, 'wks')
    if td.days > 0:
        return fmt_num(td.days + td.seconds / (60.0 * 60.0 * 24.0), 'days')
    if td.seconds > 3600:
        return fmt_num(td.seconds / 3600.0, 'hrs')
    if td.seconds > 60:
        return fmt_num(td.seconds / 60.0, 'min')
    if td.seconds > 0:
        return fmt_num(td.seconds + td.microseconds / 1000000.0, 'sec')
    return fmt_num(td.microseconds / 1000.0, 'msec')


@load_options
def format_unequal_values(expected, actual, options=None):
    """String forms of two values suitable for a failure report.

    Values of different types are each rendered with their type name,
    so `int(1)` vs `string("1")` is visible at a glance.

    >>> format_unequal_values(1, '1')
    ('int(1)', 'string("1")')
    >>> format_unequal_values(datetime.timedelta(seconds=30), datetime.timedelta(hours=2))
    ('30 sec', '2 hrs')

    Durations that read the same once rounded fall back to the exact form

    >>> format_unequal_values(datetime.timedelta(seconds=90), datetime.timedelta(seconds=91))
    ('datetime.timedelta(0:01:30)', 'datetime.timedelta(0:01:31)')
    """
    if type(expected) is not type(actual):
        return truncating_format(expected, options), truncating_format(actual, options)

    match expected:
        case datetime.timedelta():
            exp, act = format_duration(expected), format_duration(actual)
            if exp != act or expected == actual:
                return exp, act

    return truncating_format(expected, options), truncating_format(actual, options)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
