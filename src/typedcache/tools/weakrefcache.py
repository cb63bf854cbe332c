# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import weakref

from typedcache.core.exceptions import UnreferenceableKeyError


class _NoValue:
    """Type of the :data:`NO_VALUE` sentinel."""

    __slots__ = ()

    def __repr__(self):
        return 'NO_VALUE'

    def __bool__(self):
        return False

    def __reduce__(self):
        return 'NO_VALUE'


NO_VALUE = _NoValue()
"""Returned by lookups for which no entry is present."""


class WeakRefCache:
    """Simple WeakKeyDictionary-like cache.

    This class allows storing additional data associated with any weakref-able
    object. The data is removed when the corresponding object dies.
    Compared to WeakKeyDictionary, objects do not need to be hashable or
    comparable: entries are looked up by identity, so two equal but distinct
    objects get separate entries.

    See https://github.com/python/cpython/issues/88306 for further context.
    The implementation here can be rather simple since we do not support iteration.
    """

    def __init__(self):
        self.data = {}

    def set(self, key, value):
        """Associate `value` with `key` and return the cache itself.

        Raises
        ------
        UnreferenceableKeyError
            If `key` does not support weak references.
        """
        i = id(key)
        entry = self.data.get(i)
        if entry is not None and entry[0]() is key:
            self.data[i] = (entry[0], value)
            return self

        selfref = weakref.ref(self)

        def remove(w):
            cache = selfref()
            if cache is not None:
                cache._remove(i, w)

        try:
            ref = weakref.ref(key, remove)
        except TypeError as e:
            raise UnreferenceableKeyError(key) from e
        self.data[i] = (ref, value)
        return self

    def get(self, key, default=NO_VALUE):
        entry = self.data.get(id(key))
        # a dead key's id may have been recycled before its callback ran
        if entry is None or entry[0]() is not key:
            return default
        return entry[1]

    def has(self, key):
        entry = self.data.get(id(key))
        return entry is not None and entry[0]() is key

    __contains__ = has

    def _remove(self, i, ref):
        entry = self.data.get(i)
        if entry is not None and entry[0] is ref:
            del self.data[i]
