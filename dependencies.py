#!/usr/bin/env python3
# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

# requirements lists consumed by setup.py

install_requires = ['numpy>=1.20']
tests_require = ['pytest>=7', 'hypothesis>=6.50']


def extras():
    return {
        'tests': tests_require,
    }
