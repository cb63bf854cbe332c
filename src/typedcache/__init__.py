# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

__version__ = '2026.1.0'

import os

from typedcache.core.defaults import load_defaults_from_file

if 'TYPEDCACHE_DEFAULTS' in os.environ:
    filename = os.environ['TYPEDCACHE_DEFAULTS']
    if filename in ('', 'NONE'):
        print('Not loading any typedcache defaults from config file')
    else:
        for fn in filename.split(':'):
            if not os.path.exists(fn):
                raise OSError('Cannot load typedcache defaults from file ' + fn)
            print('Loading typedcache defaults from file ' + fn + ' (set by TYPEDCACHE_DEFAULTS)')
            load_defaults_from_file(fn)
else:
    filename = os.path.join(os.getcwd(), 'typedcache_defaults.py')
    if os.path.exists(filename):
        from typedcache.tools.io import file_owned_by_current_user
        if not file_owned_by_current_user(filename):
            raise OSError('Cannot load typedcache defaults from config file ' + filename
                          + ': not owned by user running Python interpreter')
        print('Loading typedcache defaults from file ' + filename)
        load_defaults_from_file(filename)

from typedcache.core.logger import set_log_format, set_log_levels

set_log_levels()
set_log_format()

from typedcache.core.cache import TypedWeakCache, cached, disable_caching, enable_caching
from typedcache.tools.weakrefcache import NO_VALUE
