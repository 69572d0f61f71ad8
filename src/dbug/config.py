"""Filter spec resolution for dbug.

Two-layer resolution (highest priority wins):
  1. Explicit value — passed to Logger(...) or given with `dbug --filter`
  2. Environment — the DEBUG variable, read at the moment of the call

The environment is read every time a Logger is built, never cached. A
Logger keeps the rules it was built with even if DEBUG changes later.
"""

import os


ENV_VAR = "DEBUG"


def get_filter_spec(environ=None):
    """Return the raw DEBUG value, or None when it is not set.

    Args:
        environ: Mapping to read from. None means os.environ.
    """
    if environ is None:
        environ = os.environ
    return environ.get(ENV_VAR)


def resolve_filter_spec(explicit=None, environ=None):
    """Pick the filter spec a new Logger should use.

    An explicit value (including the empty string, which silences
    everything) beats the environment.
    """
    if explicit is not None:
        return explicit
    return get_filter_spec(environ)
