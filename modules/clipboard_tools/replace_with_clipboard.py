#!/usr/bin/env python3
"""
replace_with_clipboard.py

Overwrite an existing file with the current clipboard text.

    rpp <filename>

Exit codes:
  0 -> file replaced
  1 -> usage error, missing file, directory, stat/clipboard/write error
"""

from __future__ import annotations

import os
import sys
import stat
import argparse
from typing import Dict, List, Optional

from rich.console import Console

from cross_platform.clipboard_utils import ClipboardError, ClipboardReader, get_clipboard
from standard_ui import log_info, print_table, set_verbose

USAGE = "Usage: rpp <filename>"
FILE_MODE = 0o644

# stdout carries the single status line; every error goes to stderr
console_stdout = Console(highlight=False, emoji=False, soft_wrap=True)
console_stderr = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


# ------------------------------ Errors ------------------------------

class ReplaceError(Exception):
    """A fatal step failure; str(err) is the line shown to the user."""


class NotFoundError(ReplaceError):
    def __init__(self, target: str):
        super().__init__(f"Error: File '{target}' does not exist.")


class StatError(ReplaceError):
    def __init__(self, err: OSError):
        super().__init__(f"Error checking file: {err}")


class IsDirectoryError(ReplaceError):
    def __init__(self, target: str):
        super().__init__(f"Error: '{target}' is a directory, not a file.")


class ClipboardReadError(ReplaceError):
    def __init__(self, err: Exception):
        super().__init__(f"Error reading clipboard: {err}")


class WriteError(ReplaceError):
    def __init__(self, err: OSError):
        super().__init__(f"Error writing to file: {err}")


# ------------------------------ Steps ------------------------------

def check_target(target: str) -> os.stat_result:
    """Stat the target; it must exist and must not be a directory."""
    try:
        info = os.stat(target)
    except FileNotFoundError:
        raise NotFoundError(target)
    except OSError as e:
        raise StatError(e)
    if stat.S_ISDIR(info.st_mode):
        raise IsDirectoryError(target)
    return info


def read_clipboard_text(read_clipboard: ClipboardReader) -> str:
    try:
        return read_clipboard()
    except (ClipboardError, OSError, ValueError) as e:
        raise ClipboardReadError(e)


def write_text(target: str, content: str) -> int:
    """Replace the whole file with `content` as UTF-8. Returns bytes written."""
    data = content.encode("utf-8")
    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0), FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(e)
    return len(data)


# ------------------------------ Runner ------------------------------

def replace_file_with_clipboard(
    target: str,
    read_clipboard: Optional[ClipboardReader] = None,
    stats: Optional[Dict[str, object]] = None,
) -> int:
    """
    Check `target`, read the clipboard and overwrite the file with it.

    Prints the success line on stdout or one error line on stderr and returns
    the exit code. `read_clipboard` defaults to the platform clipboard.
    """
    if read_clipboard is None:
        read_clipboard = get_clipboard
    stats_data = stats if stats is not None else {}
    stats_data["File Path"] = target

    try:
        info = check_target(target)
        stats_data["Original Size"] = f"{info.st_size} bytes"

        content = read_clipboard_text(read_clipboard)
        stats_data["Clipboard Content"] = f"{len(content)} chars, {len(content.splitlines())} lines"
        log_info(f"Read {len(content)} chars from clipboard.")

        written = write_text(target, content)
        stats_data["Bytes Written"] = written
        log_info(f"Wrote {written} bytes to '{target}'.")
    except ReplaceError as e:
        stats_data["Error"] = str(e)
        console_stderr.print(str(e), markup=False)
        return 1

    console_stdout.print(f"Successfully replaced '{target}' with clipboard content.", markup=False)
    return 0


# ------------------------------ CLI ------------------------------

class UsageError(Exception):
    """Raised by the parser instead of argparse's own exit(2)."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    # Dual short flags (lower+upper) for every long option.
    parser = _Parser(
        prog="rpp",
        description="Replace the contents of an existing file with the current clipboard text.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=(
            "Examples:\n"
            "  %(prog)s notes.txt        # overwrite notes.txt with the clipboard\n"
            "  %(prog)s -S notes.txt     # same, then print a stats table to stderr\n"
            "  %(prog)s -- -notes.txt    # names starting with a dash go after --\n"
        ),
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="filename",
        help="Existing file whose contents will be replaced.",
    )
    parser.add_argument(
        "-v", "--verbose", "-V",
        dest="verbose",
        action="store_true",
        help="Print diagnostics to stderr. Also enabled by RPP_VERBOSE=1.",
    )
    parser.add_argument(
        "-S", "--stats", "-s",
        dest="stats",
        action="store_true",
        help="Print a statistics table to stderr after the run.",
    )
    return parser


def _print_stats(stats_data: Dict[str, object]) -> None:
    rows: List[List[str]] = [[str(k), str(v)] for k, v in stats_data.items()]
    print_table(["Metric", "Value"], rows, title="rpp Statistics")


def main(argv: Optional[List[str]] = None, read_clipboard: Optional[ClipboardReader] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError:
        # unknown or dash-prefixed arguments; pass such names after "--"
        args = None

    if args is None or len(args.files) != 1:
        console_stdout.print(USAGE, markup=False)
        return 1

    set_verbose(args.verbose or os.environ.get("RPP_VERBOSE") == "1")

    stats_data: Dict[str, object] = {}
    exit_code = replace_file_with_clipboard(args.files[0], read_clipboard, stats_data)
    if args.stats:
        _print_stats(stats_data)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
