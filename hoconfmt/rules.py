"""
Formatting rules and fixed constants.

This file exists to make the formatter's policy explicit in one place.
"""

CONF_SUFFIX = ".conf"

TAB = b"\t"
WHITESPACE = frozenset(b" \t\n\r")

FILE_MODE = 0o644

DIFF_CONTEXT_LINES = 3
DIFF_PREFIX = "hoconfmt"

STDIN_NAME = "<standard input>"

EXIT_OK = 0
EXIT_ERROR = 2

# without -e, stop printing error reports after this many
MAX_REPORTED_ERRORS = 10
