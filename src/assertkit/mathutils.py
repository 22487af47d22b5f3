import logging
import operator

logger = logging.getLogger(__name__)

__all__ = [
    'compare_or',
    'greater_or',
    'gte_or',
    'less_or',
    'lte_or',
    'or_else',
    'zero_or',
    ]


_OPERATORS = {
    '<': operator.lt,
    '<=': operator.le,
    '>': operator.gt,
    '>=': operator.ge,
    '==': operator.eq,
    '!=': operator.ne,
    }


#
# Default values
#


def or_else(value, fallback):
    """Value unless it is the zero of its type, else fallback

    >>> or_else(23, 21)
    23
    >>> or_else(0.0, 21.3)
    21.3
    >>> or_else(None, 7)
    7
    """
    if value is None or value == 0:
        return fallback
    return value


zero_or = or_else


#
# Bounded comparisons
#


def compare_or(op, a, b, fallback):
    """Return `a` if `a op b` holds, else fallback. Op is an operator
    function or one of '<', '<=', '>', '>=', '==', '!='

    >>> compare_or('<', 1, 2, 0)
    1
    >>> compare_or(operator.ge, 1, 2, 0)
    0
    >>> compare_or('=>', 1, 2, 0)
    Traceback (most recent call last):
        ...
    ValueError: Invalid comparison operator: '=>'
    """
    if isinstance(op, str):
        if op not in _OPERATORS:
            raise ValueError(f'Invalid comparison operator: {op!r}')
        op = _OPERATORS[op]
    return a if op(a, b) else fallback


def less_or(a, b, fallback):
    """Strict, equality takes the fallback

    >>> less_or(23, 25, 0), less_or(23, 21, 11), less_or(21, 21, 11)
    (23, 11, 11)
    """
    return compare_or(operator.lt, a, b, fallback)


def lte_or(a, b, fallback):
    """
    >>> lte_or(23, 25, 0), lte_or(23, 21, 11), lte_or(21, 21, 11)
    (23, 11, 21)
    """
    return compare_or(operator.le, a, b, fallback)


def greater_or(a, b, fallback):
    """Strict, equality takes the fallback

    >>> greater_or(23, 21, 0), greater_or(23, 25, 21), greater_or(21, 21, 11)
    (23, 21, 11)
    """
    return compare_or(operator.gt, a, b, fallback)


def gte_or(a, b, fallback):
    """
    >>> gte_or(23, 21, 0), gte_or(23, 25, 21), gte_or(21, 21, 11)
    (23, 21, 21)
    """
    return compare_or(operator.ge, a, b, fallback)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
