"""
dbug — label-scoped, filterable, colorized debug logging.

Public API:
    Logger           — per-label logger (log, log_formatted, extend, as_callback)
    FilterRule       — one parsed token of a DEBUG filter spec
    parse_filter     — parse a filter spec into rules
    matches          — evaluate a label against rules
    color_for        — deterministic 256-color code for a label
    colorize         — wrap text in a 256-color escape
    ElapsedTimer     — elapsed-time marker between emitted lines
    trace            — function tracing decorator bound to a Logger
"""

from dbug._version import __version__, __app_name__
from dbug.colors import color_for, colorize
from dbug.filters import FilterRule, matches, parse as parse_filter
from dbug.logger import Logger
from dbug.timing import ElapsedTimer
from dbug.trace import trace

__all__ = [
    '__version__', '__app_name__',
    'Logger',
    'FilterRule', 'parse_filter', 'matches',
    'color_for', 'colorize',
    'ElapsedTimer',
    'trace',
]
