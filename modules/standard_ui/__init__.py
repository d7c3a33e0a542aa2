# File: modules/standard_ui/__init__.py
"""
standard_ui package

Rich-based console helpers: styled log functions with a verbosity switch
and a table printer. All output goes to stderr.
"""

from .standard_ui import (
    set_verbose,
    is_verbose,
    log_info,
    log_warning,
    print_table,
)

__all__ = [
    "set_verbose",
    "is_verbose",
    "log_info",
    "log_warning",
    "print_table",
]
