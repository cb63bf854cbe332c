# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

""" typedcache.tools collects modules used throughout typedcache
that generally do not depend on any of its core abstractions.
"""
