import logging

logger = logging.getLogger(__name__)

__all__ = ['UnsupportedComparisonError']


class UnsupportedComparisonError(TypeError):
    """Raised when a function-like value is handed to an equality check.
    Functions have no meaningful equality or textual form.

    >>> raise UnsupportedComparisonError()
    Traceback (most recent call last):
        ...
    assertkit.exception.UnsupportedComparisonError: cannot take func type as argument
    """

    def __init__(self, message='cannot take func type as argument'):
        super().__init__(message)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
