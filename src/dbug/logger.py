"""
Logger — label-scoped, filterable, colorized debug output.

Each Logger is bound to one label. Whether it prints is decided once, at
construction, from the DEBUG filter spec. Every printed line looks like:

    <label> <message> +<ms since this logger's previous line>

with the label and the delta drawn in the label's own color.

    log = Logger('app')
    log.log('starting')                    # app starting +0
    log.log_formatted('{} items', 42)      # app 42 items +3
    db = log.extend('db')                  # label 'app:db', fresh timing
    emit = db.as_callback()
    emit('connected')                      # app:db connected +0
"""

import sys
import time
from typing import Any, Callable, Optional, TextIO, Tuple

from . import filters
from .colors import color_for, colorize
from .config import resolve_filter_spec
from .filters import FilterRule
from .timing import ElapsedTimer


LABEL_SEPARATOR = ':'


class Logger:
    """Debug logger for a single label.

    A Logger does not lock around its timing state. Callers that share
    one instance between threads must wrap calls in their own lock.

    Args:
        label: Hierarchical name, segments joined by ':' by convention
        filter_spec: Filter spec to use instead of the DEBUG environment
            variable. Handed down to loggers created with extend().
        file: Text sink. None means sys.stdout, looked up at write time.
        clock: Monotonic nanosecond clock for the elapsed-time marker
    """

    def __init__(
        self,
        label: str,
        filter_spec: Optional[str] = None,
        file: TextIO = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ):
        self._raw_label = label
        self._color = color_for(label)
        self._label = colorize(self._color, label)
        self._filter_spec = filter_spec
        self._rules = filters.parse(resolve_filter_spec(filter_spec))
        self._enabled = filters.matches(self._rules, label)
        self._file = file
        self._clock = clock
        self._timer = ElapsedTimer(clock)

    def __repr__(self) -> str:
        return f"Logger({self._raw_label!r}, enabled={self._enabled})"

    @property
    def raw_label(self) -> str:
        return self._raw_label

    @property
    def label(self) -> str:
        """The label wrapped in its color escape."""
        return self._label

    @property
    def color(self) -> int:
        """xterm-256 color code derived from the label."""
        return self._color

    @property
    def rules(self) -> Tuple[FilterRule, ...]:
        return self._rules

    @property
    def enabled(self) -> bool:
        """True if this logger's lines pass the filter.

        Useful to skip building expensive messages that would be dropped.
        """
        return self._enabled

    @property
    def file(self) -> TextIO:
        return self._file if self._file is not None else sys.stdout

    def log(self, message: str) -> None:
        """Print message under this logger's label, if enabled.

        A suppressed call has no effect at all; in particular it does
        not move the elapsed-time baseline.
        """
        if not self._enabled:
            return
        suffix = colorize(self._color, self._timer.elapsed_suffix())
        print(f"{self._label} {message} {suffix}", file=self.file)

    def log_formatted(self, template: str, *args: Any, **kwargs: Any) -> None:
        """Format with str.format() and log the result.

        Formatting is skipped entirely when the logger is disabled.
        """
        if not self._enabled:
            return
        self.log(template.format(*args, **kwargs))

    def extend(self, suffix: str) -> 'Logger':
        """Return a new Logger labeled '<label>:<suffix>'.

        The child derives its own color and parses the filter spec again
        (the DEBUG variable as it is now, unless this logger was given an
        explicit spec). It starts with fresh timing and leaves this
        logger untouched.
        """
        return Logger(
            f"{self._raw_label}{LABEL_SEPARATOR}{suffix}",
            filter_spec=self._filter_spec,
            file=self._file,
            clock=self._clock,
        )

    def as_callback(self) -> Callable[[str], None]:
        """Return a one-argument callable equivalent to log().

        The callable holds this very instance, so consecutive calls
        report increasing deltas exactly like direct log() calls.
        """
        return self.log
