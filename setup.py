#!/usr/bin/env python
# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import os
import re
import sys

from setuptools import setup, find_packages

# make dependencies.py importable in a pep517 build
sys.path.insert(0, os.path.dirname(__file__))
import dependencies  # noqa


def _version():
    with open(os.path.join(os.path.dirname(__file__), 'src', 'typedcache', '__init__.py')) as f:
        return re.search(r"^__version__ = '([^']+)'", f.read(), re.M).group(1)


def setup_package():
    setup(
        name='typedcache',
        version=_version(),
        author='typedcache developers',
        package_dir={'': 'src'},
        packages=find_packages('src'),
        description='Identity-keyed, weakly referencing cache with lazily created namespaces',
        python_requires='>=3.10',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',
        install_requires=dependencies.install_requires,
        extras_require=dependencies.extras(),
        classifiers=['Development Status :: 4 - Beta',
                     'License :: OSI Approved :: BSD License',
                     'Programming Language :: Python :: 3.10',
                     'Programming Language :: Python :: 3.11',
                     'Programming Language :: Python :: 3.12',
                     'Intended Audience :: Developers'],
        license='BSD-2-Clause',
        zip_safe=False,
    )


if __name__ == '__main__':
    setup_package()
