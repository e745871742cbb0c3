"""Logging for the registry. Every module asks get_logger for a named logger;
all of them share one colored stderr handler and the level taken from the
LOG_LEVEL environment variable, either a level name or a number. A negative
level silences logging entirely.
"""

import logging
import os

import coloredlogs

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

FORMAT = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] %(levelname)-2s %(message)s'

LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}

ROOT_NAME = 'nftregistry'


def parse_level(value):
    if value is None or value == '':
        return logging.WARNING

    try:
        return int(value)
    except ValueError:
        assert value in VALID_LVLS, "Log level {} not in valid levels {}".format(value, VALID_LVLS)
        return getattr(logging, value)


_LOG_LVL = parse_level(os.getenv('LOG_LEVEL'))


def _effective(level):
    # Loggers handed out before a negative level was set must go quiet too
    return level if level >= 0 else logging.CRITICAL + 1


def _ignore(*args, **kwargs):
    pass


class MockLogger:
    def __getattr__(self, item):
        return _ignore


def _root():
    root = logging.getLogger(ROOT_NAME)

    if not root.handlers:
        coloredlogs.install(level=_effective(_LOG_LVL), logger=root, fmt=FORMAT,
                            level_styles=LEVEL_STYLES)
        root.propagate = False

    root.setLevel(_effective(_LOG_LVL))
    return root


def get_logger(name=''):
    if _LOG_LVL < 0:
        return MockLogger()

    root = _root()
    return root.getChild(name) if name else root


def overwrite_logger_level(level):
    global _LOG_LVL
    _LOG_LVL = level

    root = logging.getLogger(ROOT_NAME)
    root.setLevel(_effective(level))
    for handler in root.handlers:
        handler.setLevel(_effective(level))
