"""Logging configuration
"""

import copy
import logging
from logging.config import dictConfig

logger = logging.getLogger(__name__)

__all__ = [
    'configure_logging',
    'set_level',
    ]

DEF_CMD_FMT = '%(levelname)-4s %(asctime)s %(name)s %(lineno)d %(message)s'

LOG_CONF = {
    'version': 1,
    'disable_existing_loggers': False,
    'loggers': {},
    'formatters': {
        'cmd_fmt': {'format': DEF_CMD_FMT},
    },
    'handlers': {
        'cmd': {
            'level': 'DEBUG',
            'formatter': 'cmd_fmt',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
            },
        },
    }

CMD_CONF = {
    'loggers': {
        'assertkit': {
            'handlers': ['cmd'],
            'level': 'DEBUG',
            'propagate': False,
        },
    },
}

QUIET_CONF = {
    'loggers': {
        'assertkit': {
            'handlers': ['cmd'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}


def set_level(levelname):
    """Simple utility for setting root logging level"""
    level_names = {v: k for k, v in logging._levelToName.items()}
    level_names['WARN'] = level_names['WARNING']
    level = level_names[levelname.upper()]
    for handler in logging.root.handlers:
        handler.setLevel(level)
    logging.root.setLevel(level)


def configure_logging(setup='cmd', level=None):
    """Configure console logging for the assertkit loggers"""
    logconfig = copy.deepcopy(LOG_CONF)

    match setup:
        case 'cmd':
            logconfig['loggers'].update(copy.deepcopy(CMD_CONF['loggers']))
        case 'quiet':
            logconfig['loggers'].update(copy.deepcopy(QUIET_CONF['loggers']))
        case _:
            raise ValueError(f'Unknown logging setup: {setup}')

    dictConfig(logconfig)
    logger.debug(f'Configured {setup} logging')

    if level:
        set_level(level)
        logging.getLogger('assertkit').setLevel(level.upper())


if __name__ == '__main__':
    configure_logging('cmd')
    logger = logging.getLogger('assertkit')
    logger.debug('Debug')
    logger.info('Info')
    logger.warning('Warning')
