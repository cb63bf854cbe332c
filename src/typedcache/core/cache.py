# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""This module provides the typed weak cache of typedcache.

A :class:`TypedWeakCache` manages multiple independent caches, one per
*namespace*. Namespaces are arbitrary hashable labels (usually short strings
like `'scopes'` or `'tokens'`) chosen by the caller. They are never declared
up front: the cache for a namespace is created lazily by the first call to
:meth:`TypedWeakCache.set` for that namespace. Reading from a namespace
(:meth:`~TypedWeakCache.get`, :meth:`~TypedWeakCache.has`) never creates it.

Within a namespace, entries are keyed by object identity and the key objects
are only weakly referenced (see :class:`~typedcache.tools.weakrefcache.WeakRefCache`).
Once a key object is not referenced anywhere else, its entries in all
namespaces are removed by the garbage collector. Thus, the cache can be used to
attach derived data to objects whose lifetime is owned by someone else::

    cache = TypedWeakCache()
    cache.set('scopes', node, scope)
    ...
    scope = cache.get('scopes', node)
    if scope is NO_VALUE:
        ...

Optionally, a value type can be declared for a namespace, either via the
`value_types` argument of :class:`TypedWeakCache` or via
:meth:`TypedWeakCache.declare`. Values of the wrong type are rejected when
`check_value_types` is `True` (the default, configurable via
`typedcache.core.cache.TypedWeakCache.__init__.check_value_types`).

Functions computing data for a single object can be memoized with the
:func:`cached` decorator. Memoization can be switched off globally with
:func:`disable_caching` (:func:`enable_caching` switches it on again).
Setting the environment variable `TYPEDCACHE_CACHE_DISABLE=1` overrides any
call to :func:`enable_caching`.

The cache does not do any locking. When used from multiple threads,
access has to be synchronized by the caller.
"""

import functools
import os

from typedcache.core.base import BasicObject
from typedcache.core.defaults import defaults
from typedcache.core.exceptions import ValueTypeError
from typedcache.core.logger import getLogger
from typedcache.tools.weakrefcache import NO_VALUE, WeakRefCache


class TypedWeakCache(BasicObject):
    """Identity-keyed, weakly referencing cache with lazily created namespaces.

    Parameters
    ----------
    value_types
        Optional dict mapping namespaces to the type (or tuple of types)
        of the values stored under them.
    check_value_types
        If `True`, :meth:`set` raises :class:`~typedcache.core.exceptions.ValueTypeError`
        for values that do not match the declared type of their namespace.
    """

    @defaults('check_value_types')
    def __init__(self, value_types=None, check_value_types=True):
        self.value_types = dict(value_types or {})
        self.__auto_init(locals())
        self._caches = {}

    def declare(self, namespace, value_type):
        """Declare the type of the values stored under `namespace`.

        Replaces any earlier declaration. The namespace's cache is not created.
        """
        self.value_types[namespace] = value_type

    def value_type(self, namespace):
        """Return the declared value type of `namespace` or `None`."""
        return self.value_types.get(namespace)

    def set(self, namespace, key, value):
        """Set `value` for `key` in the cache of the given namespace.

        The cache of the namespace is created if it does not exist yet.

        Parameters
        ----------
        namespace
            The namespace to set the value in.
        key
            The key object. It has to support weak references.
        value
            The value to store. May be any object, including `None`.

        Returns
        -------
        The :class:`~typedcache.tools.weakrefcache.WeakRefCache` of the namespace.

        Raises
        ------
        UnreferenceableKeyError
            If `key` does not support weak references.
        ValueTypeError
            If `value` does not match the declared type of `namespace`.
        """
        if self.check_value_types and value is not None:
            value_type = self.value_types.get(namespace)
            if value_type is not None and not isinstance(value, value_type):
                raise ValueTypeError(namespace, value, value_type)

        cache = self._caches.get(namespace)
        if cache is not None:
            return cache.set(key, value)

        # only register the new cache once the key has been accepted
        cache = WeakRefCache().set(key, value)
        self._caches[namespace] = cache
        self.logger.debug(f'created cache for namespace {namespace!r}')
        return cache

    def get(self, namespace, key, default=NO_VALUE):
        """Get the value for `key` from the cache of the given namespace.

        Returns
        -------
        The stored value, or `default` if the namespace has never been set
        or holds no entry for `key`.
        """
        cache = self._caches.get(namespace)
        if cache is None:
            return default
        return cache.get(key, default)

    def has(self, namespace, key):
        """Check whether an entry for `key` exists in the cache of the given namespace."""
        cache = self._caches.get(namespace)
        if cache is None:
            return False
        return cache.has(key)


_caching_disabled = int(os.environ.get('TYPEDCACHE_CACHE_DISABLE', 0)) == 1
if _caching_disabled:
    getLogger('typedcache.core.cache').warning('caching globally disabled by environment')


def enable_caching():
    """Globally enable caching."""
    global _caching_disabled
    _caching_disabled = int(os.environ.get('TYPEDCACHE_CACHE_DISABLE', 0)) == 1


def disable_caching():
    """Globally disable caching."""
    global _caching_disabled
    _caching_disabled = True


def cached(cache, namespace):
    """Decorator to cache the results of a function of a single object.

    The return value of the decorated function is stored in `cache` under
    `namespace` with the function's argument as key. As long as the argument
    is alive, subsequent calls return the stored value.

    Parameters
    ----------
    cache
        The :class:`TypedWeakCache` to store the results in.
    namespace
        The namespace to use in `cache`.
    """
    def decorator(function):

        @functools.wraps(function)
        def wrapper(obj):
            if _caching_disabled:
                return function(obj)
            value = cache.get(namespace, obj)
            if value is NO_VALUE:
                cache.logger.debug(f'creating new cache entry for {function.__name__} in namespace {namespace!r}')
                value = function(obj)
                cache.set(namespace, obj, value)
            return value

        return wrapper

    return decorator
