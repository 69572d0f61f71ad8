"""
Function tracing decorator.

Routes entry/exit lines through a Logger, so tracing obeys the same
DEBUG filter and carries the same elapsed-time marker as any other line
from that label.
"""

import functools
from pathlib import Path


def _abbrev(value):
    """Short repr for trace lines: long strings and lists are elided."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(logger):
    """Decorator factory tracing calls through logger.

    Shows function entry with arguments, exit with the return value (if
    not None), and any exception before it propagates. Does nothing but
    call through when the logger is disabled.

        log = Logger('app:parse')

        @trace(log)
        def parse(text): ...
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not logger.enabled:
                return func(*args, **kwargs)

            name = func.__qualname__
            args_repr = [_abbrev(a) for a in args]
            args_repr.extend(f"{k}={_abbrev(v)}" for k, v in kwargs.items())
            logger.log(f">> {name}({', '.join(args_repr)})")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.log(f"!! {name} raised: {type(e).__name__}: {e}")
                raise

            if result is not None:
                logger.log(f"<< {name} returned: {_abbrev(result)}")
            return result

        return wrapper

    return decorator
