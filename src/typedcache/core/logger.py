# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""This module contains typedcache's logging facilities.

The logging facilities are based on the :mod:`logging` module of the
Python standard library. To obtain a new logger object use :func:`getLogger`.
Logging can be configured via the :func:`set_log_format` and
:func:`set_log_levels` methods.
"""

import logging
import os
import time
from contextlib import contextmanager
from functools import lru_cache

from typedcache.core.defaults import defaults

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

RESET_SEQ = '\033[0m'
COLOR_SEQ = '\033[1;%dm'
BOLD_SEQ = '\033[1m'
COLORS = {
    'WARNING':  YELLOW,
    'DEBUG':    BLUE,
    'CRITICAL': MAGENTA,
    'ERROR':    RED
}

MAX_HIERARCHY_LEVEL = 1

start_time = time.perf_counter()


class ColoredFormatter(logging.Formatter):
    """A logging.Formatter that colors loglevel keyword output.

    Coloring can be disabled by setting the `TYPEDCACHE_COLORS_DISABLE` environment variable to `1`.
    """

    def __init__(self):
        if int(os.environ.get('TYPEDCACHE_COLORS_DISABLE', 0)) == 1:
            self.use_color = False
        else:
            try:
                import curses
                curses.setupterm()
                self.use_color = curses.tigetnum('colors') > 1
            except Exception:
                self.use_color = False
        super().__init__()

    def format(self, record):
        msg = super().format(record)  # call base class to support exception formatting

        elapsed = int(time.perf_counter() - start_time)
        hours, remainder = divmod(elapsed, 3600)
        minutes, seconds = divmod(remainder, 60)
        timestamp = f'{hours:02}:{minutes:02}:{seconds:02}' if hours else f'{minutes:02}:{seconds:02}'

        if not record.msg:
            return ' ' * (len(timestamp) + 1) + '|'

        # the first component is always stripped, the last one always kept
        tokens = record.name.split('.')
        if len(tokens) > MAX_HIERARCHY_LEVEL:
            path = '.'.join(tokens[1:MAX_HIERARCHY_LEVEL] + tokens[-1:])
        else:
            path = '.'.join(tokens[1:]) or tokens[0]

        levelname = record.levelname
        if levelname == 'INFO':
            levelname = ''
        elif self.use_color:
            color = COLORS.get(levelname, WHITE)
            levelname = (COLOR_SEQ % (30 + color)) + '|' + levelname + '|' + RESET_SEQ
        else:
            levelname = '|' + levelname + '|'
        if self.use_color:
            path = BOLD_SEQ + path + RESET_SEQ

        return f'{timestamp} {levelname}{path}: {msg}'


@defaults('filename')
def default_handler(filename=None):
    handlers = [logging.StreamHandler()]
    if filename:
        handlers.append(logging.FileHandler(filename))
    for handler in handlers:
        handler.setFormatter(ColoredFormatter())
    return handlers


@defaults('filename')
def getLogger(module, level=None, filename=None):
    """Get the logger of the respective module for typedcache's logging facility.

    In addition to the logging methods inherited from :class:`~logging.Logger`,
    all level methods of the returned logger get a `XXX_once` variant
    that caches the msg and only emits the log entry the first time (per logger
    instance, not globally).

    Parameters
    ----------
    module
        Name of the module.
    level
        If set, `logger.setLevel(level)` is called (see
        :meth:`~logging.Logger.setLevel`).
    filename
        If not empty, path of a file where everything logged will be
        written to.
    """
    module = 'typedcache' if module == '__main__' else module
    logger = logging.getLogger(module)
    for level_function in ('info', 'error', 'fatal', 'debug', 'warning'):
        setattr(logger, f'{level_function}_once', lru_cache(None)(getattr(logger, level_function)))
    logger.handlers = default_handler(filename)
    logger.propagate = False
    if level:
        logger.setLevel(level)
    return logger


class DummyLogger:

    __slots__ = []

    def nop(self, *args, **kwargs):
        return None

    propagate = False
    debug = nop
    info = nop
    warn = nop
    warning = nop
    error = nop
    critical = nop
    log = nop
    exception = nop
    debug_once = nop
    info_once = nop
    warning_once = nop
    error_once = nop

    def isEnabledFor(self, lvl):
        return False

    def getEffectiveLevel(self):
        return None

    def getChild(self, suffix):
        return self


dummy_logger = DummyLogger()


@defaults('levels')
def set_log_levels(levels=None):
    """Set log levels for typedcache's logging facility.

    Parameters
    ----------
    levels
        Dict of log levels. Keys are names of loggers (see :func:`logging.getLogger`),
        values are the log levels to set for the loggers of the given names
        (see :meth:`~logging.Logger.setLevel`).
    """
    levels = levels or {'typedcache': 'WARNING'}
    for k, v in levels.items():
        getLogger(k).setLevel(v)


@defaults('max_hierarchy_level')
def set_log_format(max_hierarchy_level=1):
    """Set the log format for typedcache's logging facility.

    Parameters
    ----------
    max_hierarchy_level
        The number of components of the loggers name which are printed.
        (The first component is always stripped, the last component always
        preserved.)
    """
    global MAX_HIERARCHY_LEVEL
    MAX_HIERARCHY_LEVEL = max_hierarchy_level


@contextmanager
def log_levels(level_mapping):
    """Change levels for given loggers on entry and reset to before state on exit.

    Parameters
    ----------
    level_mapping
        a dict of logger name -> level name
    """
    previous = {}
    for name, level in level_mapping.items():
        logger = getLogger(name)
        previous[name] = logger.level
        logger.setLevel(level)
    try:
        yield
    finally:
        for name, level in previous.items():
            getLogger(name).setLevel(level)
