# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""This module provides the base class from which typedcache's classes inherit.

:class:`BasicObject` provides the following functionality:

    1. :class:`BasicObject` sets class :class:`UberMeta` as metaclass
       which itself inherits from :class:`abc.ABCMeta`. Thus it is possible
       to define interface classes with abstract methods using
       :func:`abc.abstractmethod`.
    2. Each *class* deriving from :class:`BasicObject` comes with its own
       :mod:`~typedcache.core.logger` instance accessible through its `logger`
       attribute. The logger name is the class's module followed by the class name.
    3. Logging can be disabled and re-enabled for each *instance* using the
       :meth:`BasicObject.disable_logging` and :meth:`BasicObject.enable_logging`
       methods.
    4. `self.__auto_init(locals())` assigns all `__init__` arguments to
       equally named attributes.
    5. If not set by the user to another value, :attr:`BasicObject.name` is
       set to the name of the object's class.
"""

import abc
import inspect

from typedcache.core import logger


class UberMeta(abc.ABCMeta):

    def __init__(cls, name, bases, namespace):
        """Metaclass of :class:`BasicObject`.

        I create a logger for each class I create.
        """
        cls._logger = logger.getLogger(f'{cls.__module__.replace("__main__", "typedcache")}.{name}')
        abc.ABCMeta.__init__(cls, name, bases, namespace)

    def __new__(cls, classname, bases, classdict):
        """I add an `__auto_init` method and an `_init_arguments` attribute to the class."""
        if '_init_arguments' in classdict:
            raise ValueError('_init_arguments is a reserved class attribute for subclasses of BasicObject')

        def __auto_init(self, locals_):
            """Assign `__init__` arguments to equally named attributes.

            Usually called as `self.__auto_init(locals())` in `__init__`. Attributes
            which have already been set are left untouched.
            """
            for arg in c._init_arguments:
                if arg not in self.__dict__:
                    setattr(self, arg, locals_[arg])

        auto_init_name = f'_{classname}__auto_init'
        classdict[auto_init_name] = __auto_init
        c = abc.ABCMeta.__new__(cls, classname, bases, classdict)
        getattr(c, auto_init_name).__qualname__ = auto_init_name

        c._init_arguments = tuple(
            arg for arg, p in inspect.signature(c.__init__).parameters.items()
            if arg != 'self' and p.kind in (p.POSITIONAL_OR_KEYWORD, p.POSITIONAL_ONLY, p.KEYWORD_ONLY)
        )
        return c


class BasicObject(metaclass=UberMeta):
    """Base class for most classes in typedcache.

    Attributes
    ----------
    logger
        A per-class instance of :class:`logging.Logger` with the class
        name as prefix.
    logging_disabled
        `True` if logging has been disabled.
    name
        The name of the instance. If not set by the user, the name is
        set to the class name.
    """

    @property
    def name(self):
        n = getattr(self, '_name', None)
        return n or type(self).__name__

    @name.setter
    def name(self, n):
        self._name = n

    @property
    def logging_disabled(self):
        return self._logger is logger.dummy_logger

    @property
    def logger(self):
        return self._logger

    def disable_logging(self, doit=True):
        """Disable logging output for this instance."""
        if doit:
            self._logger = logger.dummy_logger
        elif '_logger' in self.__dict__:
            del self._logger

    def enable_logging(self, doit=True):
        """Enable logging output for this instance."""
        self.disable_logging(not doit)

    def __repr__(self):
        return f'{type(self).__name__}(name={self.name!r})'
