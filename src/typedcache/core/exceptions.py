# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)


class UnreferenceableKeyError(TypeError):
    """Is raised when a cache key does not support weak references."""

    def __init__(self, key):
        super().__init__(f'cannot use {type(key).__name__!r} object as cache key: '
                         'no weak references to it can be created')
        self.key = key


class ValueTypeError(TypeError):
    """Is raised if a value does not match the declared type of its cache namespace."""

    def __init__(self, namespace, value, value_type):
        super().__init__(f'value {value!r} for namespace {namespace!r} is not of type {value_type!r}')
        self.namespace = namespace
        self.value = value
        self.value_type = value_type
