# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import os


def file_owned_by_current_user(filename):
    """Check whether `filename` belongs to the user running the interpreter.

    On platforms without `os.getuid` ownership cannot be checked and `False`
    is returned.
    """
    getuid = getattr(os, 'getuid', None)
    if getuid is None:
        return False
    return os.stat(filename).st_uid == getuid()
