# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""This module contains typedcache's facilities for handling default values.

A default value in typedcache is always the default value of some
function argument. To mark the value of an optional function argument
as a user-modifiable default value use the :func:`defaults` decorator.
If `None` is passed for such an argument, its default value is used
instead of `None`::

    @defaults('check_value_types')
    def __init__(self, value_types=None, check_value_types=True):
        ...

The user interface for handling default values is provided by
:func:`set_defaults`, :func:`get_defaults`, :func:`load_defaults_from_file`,
:func:`write_defaults_to_file` and :func:`print_defaults`.

If typedcache is imported, it will automatically search for a configuration
file named `typedcache_defaults.py` in the current working directory.
If found, the file is loaded via :func:`load_defaults_from_file`, but only if
it is owned by the user running the Python interpreter (the file is
executed with `exec`). As an alternative, the environment variable
`TYPEDCACHE_DEFAULTS` can be used to specify the path of a configuration
file. If empty or set to `NONE`, no configuration file is loaded.
"""

from collections import defaultdict
import functools
import importlib
import inspect
import pkgutil
import threading

from typedcache.tools.table import format_table


class DefaultContainer:
    """Internal class holding all default values defined via :func:`defaults`.

    Not to be used directly.
    """

    def __init__(self):
        self._data = defaultdict(dict)
        self.registered_functions = set()
        self.changes = 0
        self.changes_lock = threading.Lock()

    def _add_defaults_for_function(self, func, args):
        if func.__doc__ is not None:
            func.__doc__ = (inspect.cleandoc(func.__doc__)
                            + '\n\nDefaults\n--------\n' + ', '.join(args)
                            + '\n(see :mod:`typedcache.core.defaults`)')

        params = inspect.signature(func).parameters
        for n in args:
            if n not in params:
                raise ValueError(f"Decorated function has no argument '{n}'")
            if params[n].default is params[n].empty:
                raise ValueError(f"Decorated function has no default for argument '{n}'")

        path = func.__module__ + '.' + getattr(func, '__qualname__', func.__name__)
        if path in self.registered_functions:
            raise ValueError(f'Function with name {path} already registered for default values!')
        self.registered_functions.add(path)

        func.argnames = tuple(params)
        func.defaultsdict = {}
        for n in args:
            self._data[f'{path}.{n}']['func'] = func
            self._data[f'{path}.{n}']['code'] = params[n].default
            # values may have been loaded from a file before the function was defined
            func.defaultsdict[n] = self.get(f'{path}.{n}')[0]
        self._update_function_signature(func)

    def _update_function_signature(self, func):
        sig = inspect.signature(func)
        params = [p.replace(default=func.defaultsdict[n]) if n in func.defaultsdict else p
                  for n, p in sig.parameters.items()]
        func.__signature__ = sig.replace(parameters=params)

    def update(self, defaults, type='user'):
        assert type in ('user', 'file')
        with self.changes_lock:
            self.changes += 1

        functions_to_update = set()
        for k, v in defaults.items():
            func = self._data[k].get('func')
            if func is None:
                # import the defining module, walking up the path until it resolves
                head = k.split('.')[:-2]
                while head:
                    try:
                        importlib.import_module('.'.join(head))
                        break
                    except ImportError:
                        head = head[:-1]
                func = self._data[k].get('func')
            if func is None:
                del self._data[k]
                raise KeyError(k)

            self._data[k][type] = v
            func.defaultsdict[k.split('.')[-1]] = v
            functions_to_update.add(func)

        for func in functions_to_update:
            self._update_function_signature(func)

    def get(self, key):
        values = self._data[key]
        for source in ('user', 'file', 'code'):
            if source in values:
                return values[source], source
        raise ValueError('No default value matching the specified criteria')

    def keys(self):
        return self._data.keys()

    def import_all(self):
        for package in {k.split('.')[0] for k in self._data} | {'typedcache'}:
            _import_all(package)


_default_container = DefaultContainer()


def defaults(*args):
    """Function decorator for marking function arguments as user-configurable defaults.

    If a function decorated with :func:`defaults` is called, the values of the marked
    default parameters are set to the values defined via :func:`load_defaults_from_file`
    or :func:`set_defaults` in case no value has been provided by the caller of the function.
    Moreover, if `None` is passed as a value for a default argument, the argument
    is set to its default value, as well. If no value has been specified using
    :func:`set_defaults` or :func:`load_defaults_from_file`, the default value provided in
    the function signature is used.

    If the argument `arg` of function `f` in sub-module `m` of package `p` is
    marked as a default value, its value will be changeable by the aforementioned
    methods under the path `p.m.f.arg`.

    Parameters
    ----------
    args
        List of strings containing the names of the arguments of the decorated
        function to mark as defaults. Each of these arguments has to be
        a keyword argument (with a default value).
    """
    assert all(isinstance(arg, str) for arg in args)

    def the_decorator(decorated_function):
        if not args:
            return decorated_function

        _default_container._add_defaults_for_function(decorated_function, args=args)

        # ensure that __signature__ is not copied
        @functools.wraps(decorated_function, updated=())
        def defaults_wrapper(*wrapper_args, **wrapper_kwargs):
            for k, v in zip(decorated_function.argnames, wrapper_args):
                if k in wrapper_kwargs:
                    raise TypeError(f"{decorated_function.__name__} got multiple values for argument '{k}'")
                wrapper_kwargs[k] = v
            kwargs = dict(decorated_function.defaultsdict)
            kwargs.update((k, v) for k, v in wrapper_kwargs.items()
                          if v is not None or k not in decorated_function.defaultsdict)
            return decorated_function(**kwargs)

        return defaults_wrapper

    return the_decorator


def _import_all(package_name='typedcache'):
    from typedcache.core.logger import getLogger
    logger = getLogger('typedcache.core.defaults._import_all')

    package = importlib.import_module(package_name)
    if not hasattr(package, '__path__'):
        return

    def onerror(name):
        logger.warning('Failed to import ' + name)

    for p in pkgutil.walk_packages(package.__path__, package_name + '.', onerror=onerror):
        try:
            importlib.import_module(p.name)
        except ImportError:
            logger.warning('Failed to import ' + p.name)


def print_defaults(import_all=True, shorten_paths=2):
    """Print all default values.

    Parameters
    ----------
    import_all
        Default values set in a function signature are only known after the
        module defining the function has been imported. If `True`, all
        modules of all packages with registered defaults are imported first.
    shorten_paths
        Shorten the paths of all default values by `shorten_paths` components.
        The last two path components will always be printed.
    """
    if import_all:
        _default_container.import_all()

    rows = [['path (shortened)' if shorten_paths else 'path', 'value', 'source']]
    for k in sorted(_default_container.keys()):
        v, source = _default_container.get(k)
        k_parts = k.split('.')
        if len(k_parts) >= shorten_paths + 2:
            k = '.'.join(k_parts[shorten_paths:])
        rows.append([k, repr(v), source])
    print(format_table(rows, title='typedcache defaults'))
    print()


def write_defaults_to_file(filename='./typedcache_defaults.py', packages=('typedcache',)):
    """Write the currently set default values to a configuration file.

    The resulting file is an ordinary Python script and can be modified
    by the user at will. It can be loaded in a later session using
    :func:`load_defaults_from_file`. Values which still equal the signature
    default are written as comments.

    Parameters
    ----------
    filename
        Name of the file to write to.
    packages
        All sub-modules of the named packages are imported first, so that every
        default defined via :func:`defaults` is discovered.
    """
    for package in packages:
        _import_all(package)

    entries = []
    for k in sorted(_default_container.keys()):
        v, source = _default_container.get(k)
        entries.append((f"'{k}'", repr(v), source == 'code'))
    key_width = max((len(k) for k, _, _ in entries), default=0)

    with open(filename, 'wt') as f:
        print('# typedcache defaults config file\n'
              '# This file has been automatically created by '
              'typedcache.core.defaults.write_defaults_to_file.\n\n'
              'd = {}\n', file=f)
        last_prefix = None
        for k, v, as_comment in entries:
            prefix = k.split('.')[:-1]
            if last_prefix is not None and prefix != last_prefix:
                print('', file=f)
            last_prefix = prefix
            comment = '# ' if as_comment else ''
            print(f'{comment}d[{k:{key_width}}] = {v}', file=f)

    print('Written defaults to file ' + filename)


def load_defaults_from_file(filename='./typedcache_defaults.py'):
    """Loads default values defined in configuration file.

    Suitable configuration files can be created via :func:`write_defaults_to_file`.
    The file is loaded via Python's :func:`exec` function, so be very careful
    with configuration files you have not created your own.

    Parameters
    ----------
    filename
        Path of the configuration file.
    """
    env = {}
    with open(filename, 'rt') as f:
        exec(f.read(), env)
    try:
        _default_container.update(env['d'], type='file')
    except KeyError as e:
        raise KeyError(f'Error loading defaults from file. Key {e} does not correspond to a default') from e


def set_defaults(defaults):
    """Set default values.

    This method sets the default value of function arguments marked via the
    :func:`defaults` decorator, overriding default values specified in the
    function signature or set earlier via :func:`load_defaults_from_file` or
    previous :func:`set_defaults` calls.

    Parameters
    ----------
    defaults
        Dictionary of default values. Keys are the full paths of the default
        values (see :func:`defaults`).
    """
    try:
        _default_container.update(defaults, type='user')
    except KeyError as e:
        raise KeyError(f'Error setting defaults. Key {e} does not correspond to a default') from e


def get_defaults(user=True, file=True, code=True):
    """Get default values.

    Returns all default values as a dict. The parameters can be set to filter
    by the source of the value.

    Parameters
    ----------
    user
        If `True`, include defaults that have been set with :func:`set_defaults`.
    file
        If `True`, include defaults that have been loaded from file.
    code
        If `True`, include unmodified default values.
    """
    wanted = {'user': user, 'file': file, 'code': code}
    result = {}
    for k in _default_container.keys():
        v, source = _default_container.get(k)
        if wanted[source]:
            result[k] = v
    return result


def defaults_changes():
    """Returns the number of changes made to the global defaults.

    Counts calls to :func:`set_defaults` and :func:`load_defaults_from_file`
    since the start of program execution.
    """
    return _default_container.changes
