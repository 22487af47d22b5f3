"""Config related settings, follows 12factor.net

Failure report presentation is controlled by environment variables read
once at import time:

    CONFIG_ASSERTION_SHOWFULLPATH   show full file paths in caller frames
    CONFIG_ASSERTION_ENABLECOLOR    colorize labels with ANSI green
    CONFIG_ASSERTION_MAXLEN         truncation ceiling for formatted values
"""
import inspect
import logging
import os
import sys
from abc import ABC
from contextlib import contextmanager
from dataclasses import dataclass, fields
from functools import partial, wraps

logger = logging.getLogger(__name__)

__all__ = [
    'MAX_LEN',
    'Setting',
    'ConfigOptions',
    'ReportOptions',
    'load_options',
    'setting_unlocked',
    'strtobool',
]

WIN = sys.platform == 'win32'

# 64 KiB line scanning limit, less room for the type info
MAX_LEN = 64 * 1024 - 1000


class Setting(dict):
    """Dict where d['foo'] can also be accessed as d.foo
    but also automatically creates new sub-attributes of
    type Setting. This behavior can be locked to turn off
    later. WARNING: not copy safe

    >>> cfg = Setting()
    >>> cfg.unlock()

    >>> cfg.foo.bar = 1
    >>> hasattr(cfg.foo, 'bar')
    True
    >>> cfg.foo.bar
    1
    >>> cfg.lock()
    >>> cfg.foo.bar = 2
    Traceback (most recent call last):
     ...
    ValueError: This Setting object is locked from editing
    >>> cfg.unlock()
    """

    _locked = False

    def __init__(self, *args, **kwargs):
        dict.__init__(self, *args, **kwargs)

    def __getattr__(self, name):
        """Create sub-setting fields on the fly"""
        if name not in self:
            if self._locked:
                raise ValueError('This Setting object is locked from editing')
            self[name] = Setting()
        return self[name]

    def __setattr__(self, name, val):
        if self._locked:
            raise ValueError('This Setting object is locked from editing')
        self[name] = val

    @staticmethod
    def lock():
        Setting._locked = True

    @staticmethod
    def unlock():
        Setting._locked = False


@contextmanager
def setting_unlocked(setting: Setting):
    """Context manager to safely modify a setting with unlock/lock protection.

    Parameters
        setting: The Setting object to unlock/lock
    """
    setting.unlock()
    try:
        yield
    finally:
        setting.lock()


def strtobool(val):
    """Convert a string representation of truth to true (1) or false (0).
    True values are 'y', 'yes', 't', 'true', 'on', and '1'; false values
    are 'n', 'no', 'f', 'false', 'off', and '0'.  Raises ValueError if
    'val' is anything else.

    >>> strtobool('Yes'), strtobool('off'), strtobool(None)
    (True, False, False)
    """
    if val is None:
        return False
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        val = val.lower()
        if val in {'y', 'yes', 't', 'true', 'on', '1'}:
            return True
        elif val in {'', 'n', 'no', 'f', 'false', 'off', '0'}:
            return False
    raise ValueError('invalid truth value %r' % (val,))


@dataclass
class ConfigOptions(ABC):
    """Load from a config module"""

    @classmethod
    def from_config(cls, setting: str, config=None):
        this = config
        for level in setting.split('.'):
            this = getattr(this, level)
        return cls(**this)


@dataclass
class ReportOptions(ConfigOptions):
    """Presentation options threaded through the failure formatters

    >>> ReportOptions().max_len == MAX_LEN
    True
    >>> ReportOptions.resolve({'enable_color': True}).enable_color
    True
    """
    show_full_path: bool = False
    enable_color: bool = False
    max_len: int = MAX_LEN

    @classmethod
    def resolve(cls, options=None, config=None):
        """Accepts None (module settings), a dict, a dotted setting
        path or an instance
        """
        if options is None:
            return cls.from_config('assertion', config=config or sys.modules[__name__])
        if isinstance(options, cls):
            return options
        if isinstance(options, dict):
            names = {field.name for field in fields(cls)}
            return cls(**{k: v for k, v in options.items() if k in names})
        if isinstance(options, str):
            return cls.from_config(options, config=config or sys.modules[__name__])
        raise ValueError(f'Cannot build {cls.__name__} from {type(options).__name__}')


def load_options(func=None, *, cls=ReportOptions):
    """Wrapper that builds the `options` argument of a function into `cls`.

    Standard interface:
        options: str | dict | ReportOptions | None
        other arguments pass through untouched

    >>> @load_options
    ... def width(value, options=None):
    ...     return options.max_len

    >>> width('x', {'max_len': 5})
    5
    >>> width('x', options=ReportOptions(max_len=7))
    7
    >>> width('x') == assertion.max_len
    True
    """
    if func is None:
        return partial(load_options, cls=cls)

    signature = inspect.signature(func)

    @wraps(func)
    def func_wrapper(*args, **kwargs):
        bound = signature.bind(*args, **kwargs)
        bound.arguments['options'] = cls.resolve(bound.arguments.get('options'))
        return func(*bound.args, **bound.kwargs)

    return func_wrapper


def _load_assertion() -> Setting:
    setting = Setting()
    setting.show_full_path = strtobool(os.getenv('CONFIG_ASSERTION_SHOWFULLPATH'))
    setting.enable_color = strtobool(os.getenv('CONFIG_ASSERTION_ENABLECOLOR'))
    setting.max_len = int(os.getenv('CONFIG_ASSERTION_MAXLEN') or MAX_LEN)
    logger.debug(f'Loaded assertion settings: {dict(setting)}')
    return setting


Setting.unlock()
assertion = _load_assertion()
Setting.lock()


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
