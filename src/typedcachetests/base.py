# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import os
import shutil
import sys
import tempfile
from contextlib import contextmanager


def runmodule(filename):
    import pytest

    sys.exit(pytest.main(sys.argv[1:] + [filename]))


@contextmanager
def safe_temporary_filename(name=None, parent_dir=None):
    """Cross-platform safe equivalent of re-opening a NamedTemporaryFile.

    Creates an automatically cleaned up temporary directory with a single file therein.

    Parameters
    ----------
    name
        Filename component, defaults to 'temp_file'.
    parent_dir
        The parent dir of the new temporary directory.
        Defaults to tempfile.gettempdir().
    """
    dirname = tempfile.mkdtemp(dir=parent_dir or tempfile.gettempdir())
    try:
        yield os.path.join(dirname, name or 'temp_file')
    finally:
        shutil.rmtree(dirname)
