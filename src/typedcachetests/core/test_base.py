# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from typedcache.core.base import BasicObject
from typedcache.core.logger import dummy_logger
from typedcachetests.base import runmodule


class Annotator(BasicObject):

    def __init__(self, namespace, fallback=None, *, strict=False):
        self.__auto_init(locals())


def test_class_logger():
    assert Annotator._logger.name == __name__ + '.Annotator'
    assert Annotator('scopes').logger is Annotator._logger


def test_auto_init():
    a = Annotator('scopes', strict=True)
    assert Annotator._init_arguments == ('namespace', 'fallback', 'strict')
    assert (a.namespace, a.fallback, a.strict) == ('scopes', None, True)


def test_name():
    a = Annotator('scopes')
    assert a.name == 'Annotator'
    a.name = 'scope annotator'
    assert a.name == 'scope annotator'
    assert repr(a) == "Annotator(name='scope annotator')"


def test_disable_logging():
    a = Annotator('scopes')
    a.disable_logging()
    assert a.logging_disabled
    assert a.logger is dummy_logger
    assert not Annotator('tokens').logging_disabled
    a.enable_logging()
    assert a.logger is Annotator._logger


if __name__ == "__main__":
    runmodule(filename=__file__)
