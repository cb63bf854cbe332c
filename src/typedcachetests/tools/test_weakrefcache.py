# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import gc
import pickle
import weakref

import pytest
from hypothesis import given

from typedcache.core.exceptions import UnreferenceableKeyError
from typedcache.tools.weakrefcache import NO_VALUE, WeakRefCache
from typedcachetests.base import runmodule
from typedcachetests.strategies import Node, hy_values


def test_set_get_has():
    cache = WeakRefCache()
    key = Node('Identifier', 'x')
    assert cache.get(key) is NO_VALUE
    assert not cache.has(key)
    assert cache.set(key, 42) is cache
    assert cache.get(key) == 42
    assert cache.has(key)
    assert key in cache


def test_chained_set():
    key1, key2 = Node('Literal', 1), Node('Literal', 2)
    cache = WeakRefCache().set(key1, 'a').set(key2, 'b')
    assert cache.get(key1) == 'a'
    assert cache.get(key2) == 'b'


def test_overwrite():
    cache = WeakRefCache()
    key = Node('Program')
    cache.set(key, 'x')
    ref = cache.data[id(key)][0]
    cache.set(key, 'y')
    assert cache.get(key) == 'y'
    assert cache.data[id(key)][0] is ref


def test_get_default():
    cache = WeakRefCache()
    key = Node('Program')
    assert cache.get(key, 'missing') == 'missing'
    cache.set(key, None)
    assert cache.get(key, 'missing') is None


def test_identity_keying():
    cache = WeakRefCache()
    key1, key2 = Node('Identifier', 'x'), Node('Identifier', 'x')
    assert key1 == key2
    cache.set(key1, 1)
    assert cache.has(key1)
    assert not cache.has(key2)
    assert cache.get(key2) is NO_VALUE


@pytest.mark.parametrize('key', [1, 'foo', (1, 2), None, 3.5])
def test_unreferenceable_key(key):
    cache = WeakRefCache()
    with pytest.raises(UnreferenceableKeyError) as exc_info:
        cache.set(key, 1)
    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.key is key
    assert isinstance(exc_info.value.__cause__, TypeError)
    assert not cache.has(key)
    assert cache.get(key) is NO_VALUE


def test_cache_does_not_keep_key_alive():
    cache = WeakRefCache()
    key = Node('Identifier', 'x')
    probe = weakref.ref(key)
    cache.set(key, [1, 2, 3])
    del key
    gc.collect()
    assert probe() is None
    assert cache.data == {}


def test_reachable_key_survives_collection():
    cache = WeakRefCache()
    key = Node('Identifier', 'x')
    cache.set(key, 'value')
    gc.collect()
    assert cache.has(key)
    assert cache.get(key) == 'value'


def test_recycled_id_is_not_a_hit():
    cache = WeakRefCache()
    key, other = Node('Literal', 1), Node('Literal', 2)
    cache.set(other, 'stale')
    # simulate an entry left behind for a dead object whose id got reused by key
    cache.data[id(key)] = cache.data[id(other)]
    assert not cache.has(key)
    assert cache.get(key) is NO_VALUE


def test_outdated_callback_keeps_entry():
    cache = WeakRefCache()
    key, other = Node('Literal', 1), Node('Literal', 2)
    cache.set(key, 1)
    cache._remove(id(key), weakref.ref(other))
    assert cache.get(key) == 1


def test_cache_can_die_before_keys():
    cache = WeakRefCache()
    key = Node('Program')
    cache.set(key, 1)
    probe = weakref.ref(cache)
    del cache
    gc.collect()
    assert probe() is None
    del key
    gc.collect()


@given(hy_values)
def test_stored_value_is_returned(value):
    key = Node('Literal')
    cache = WeakRefCache().set(key, value)
    assert cache.get(key) is value
    assert cache.has(key)


def test_no_value():
    assert repr(NO_VALUE) == 'NO_VALUE'
    assert not NO_VALUE
    assert NO_VALUE is not None
    assert pickle.loads(pickle.dumps(NO_VALUE)) is NO_VALUE


if __name__ == "__main__":
    runmodule(filename=__file__)
