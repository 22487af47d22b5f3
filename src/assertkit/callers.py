"""Attribute a failure to user code rather than library internals.

Frames come from a frame source (the live interpreter stack by default)
and are dropped by a `FrameFilter`, a set of exclusion rules held as
data so they can be checked without walking a real stack.
"""
import itertools
import logging
import os
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from assertkit.config import ReportOptions

logger = logging.getLogger(__name__)

__all__ = [
    'DEFAULT_FILTER',
    'CallerFrame',
    'FrameFilter',
    'caller_infos',
    'iter_frames',
    ]

LIBRARY = __name__.split('.')[0]


@dataclass(frozen=True)
class CallerFrame:
    path: str
    line: int
    function: str | None = None

    def format(self, show_full_path=False) -> str:
        """
        >>> CallerFrame('/src/app/test_app.py', 12, 'test_app.test_it').format()
        'test_app.py:12'
        >>> CallerFrame('/src/app/test_app.py', 12).format(show_full_path=True)
        '/src/app/test_app.py:12'
        """
        path = self.path if show_full_path else os.path.basename(self.path)
        return f'{path}:{self.line}'


def _qualified_name(frame) -> str | None:
    module = frame.f_globals.get('__name__')
    if not module:
        return None
    return f'{module}.{frame.f_code.co_qualname}'


def iter_frames(skip: int = 0) -> Iterator[CallerFrame]:
    """Frames of the live stack, innermost first, starting `skip` frames
    above the caller of this function
    """
    frame = sys._getframe(1)
    for _ in range(skip):
        if frame is None:
            break
        frame = frame.f_back
    return _walk(frame)


def _walk(frame) -> Iterator[CallerFrame]:
    while frame is not None:
        yield CallerFrame(frame.f_code.co_filename, frame.f_lineno, _qualified_name(frame))
        frame = frame.f_back


@dataclass(frozen=True)
class FrameFilter:
    """Exclusion rules for caller frames

    >>> FrameFilter().excludes(CallerFrame('<string>', 1, 'tests.foo'))
    True
    >>> FrameFilter().excludes(CallerFrame('test_foo.py', 1, 'assertkit.assertutils.failure_report'))
    True
    >>> FrameFilter().excludes(CallerFrame('test_foo.py', 1, 'tests.test_foo.test_it'))
    False
    """
    synthetic_files: frozenset = frozenset({'<autogenerated>', '<string>', '<stdin>'})
    runner_functions: frozenset = frozenset({
        '_pytest.python.pytest_pyfunc_call',
        'unittest.case.TestCase._callTestMethod',
        })
    library_namespaces: tuple = (f'{LIBRARY}.',)
    runtime_prefixes: tuple = (
        'runpy.',
        'importlib.',
        'threading.',
        'pluggy.',
        '_pytest.',
        'unittest.',
        )

    def is_synthetic(self, path) -> bool:
        return path in self.synthetic_files or (path.startswith('<') and path.endswith('>'))

    @staticmethod
    def in_namespace(function, namespace) -> bool:
        """Namespace match on dotted-name boundaries, anywhere in the name

        >>> FrameFilter.in_namespace('vendor.assertkit.labels.scan_lines', 'assertkit.')
        True
        >>> FrameFilter.in_namespace('tests.test_assertkit.test_it', 'assertkit.')
        False
        """
        return (
            function == namespace.rstrip('.')
            or function.startswith(namespace)
            or f'.{namespace}' in function
            )

    def excludes(self, frame: CallerFrame) -> bool:
        if frame.function is None:
            return True
        if self.is_synthetic(frame.path):
            return True
        if frame.function in self.runner_functions:
            return True
        if any(self.in_namespace(frame.function, ns) for ns in self.library_namespaces):
            return True
        return frame.function.startswith(self.runtime_prefixes)


DEFAULT_FILTER = FrameFilter()


def caller_infos(
    skip: int = 2,
    num: int = 3,
    options=None,
    frame_source: Callable[[int], Iterable[CallerFrame]] = iter_frames,
    frame_filter: FrameFilter = DEFAULT_FILTER,
) -> list[str]:
    """Short list of "file:line" locations leading to a failure.

    Looks at `num` frames starting at `skip` (0 is this function), stops
    early when the stack runs out, and drops whatever `frame_filter`
    excludes.

    >>> frames = [CallerFrame('/src/lib.py', 1, 'assertkit.labels.format_message'),
    ...           CallerFrame('/src/tests/test_x.py', 9, 'tests.test_x.test_it')]
    >>> caller_infos(0, 3, {}, lambda skip: frames[skip:])
    ['test_x.py:9']
    """
    options = ReportOptions.resolve(options)
    infos = []
    for frame in itertools.islice(frame_source(skip), num):
        if frame_filter.excludes(frame):
            logger.debug(f'Skipping frame {frame.function} at {frame.path}:{frame.line}')
            continue
        infos.append(frame.format(options.show_full_path))
    return infos


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
