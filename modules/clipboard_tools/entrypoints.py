#!/usr/bin/env python3
"""
Console-script entry points for the clipboard tools.
Both `rpp` and the longer `rwc` alias land here.
"""

from __future__ import annotations

import sys


def _run_replace(argv=None) -> int:
    from clipboard_tools import replace_with_clipboard as rwc

    return rwc.main(argv)


def replace_main():
    sys.exit(_run_replace(None))
