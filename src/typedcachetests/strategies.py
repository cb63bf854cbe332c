# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from hypothesis import strategies as hyst


class Node:
    """Stand-in for a syntax tree node: compares by value, unhashable."""

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Node) and (self.kind, self.value) == (other.kind, other.value)

    __hash__ = None

    def __repr__(self):
        return f'Node({self.kind!r}, {self.value!r})'


hy_namespaces = hyst.one_of(hyst.text(min_size=1, max_size=12),
                            hyst.integers(),
                            hyst.tuples(hyst.text(max_size=4), hyst.integers()))
hy_values = hyst.one_of(hyst.none(), hyst.integers(), hyst.floats(allow_nan=False), hyst.text(),
                        hyst.lists(hyst.integers(), max_size=5))
hy_nodes = hyst.builds(Node, hyst.sampled_from(['Identifier', 'Literal', 'Program']), hy_values)
