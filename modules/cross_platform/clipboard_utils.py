#!/usr/bin/env python3
# File: modules/cross_platform/clipboard_utils.py

import os
import platform
import subprocess
import base64
import shutil
from typing import Callable, List, Optional

from standard_ui import is_verbose, log_info, log_warning

# Anything that can be called with no arguments and returns the clipboard text.
ClipboardReader = Callable[[], str]

_LINUX_READERS = (
    ["wl-paste", "--no-newline"],
    ["xclip", "-selection", "clipboard", "-o"],
    ["xsel", "--clipboard", "--output"],
)


class ClipboardError(RuntimeError):
    """Raised when no clipboard reader is available or every reader failed."""


def _log(level: str, msg: str):
    if level == "Warning":
        if is_verbose():
            log_warning(msg)
    else:
        log_info(msg)


class ClipboardUtils:
    """
    Cross-platform clipboard reader.

    Public API:
      - class ClipboardUtils
      - get_clipboard() -> str   (raises ClipboardError)

    Also exposes a module-level get_clipboard() wrapper below.

    Readers, in order of preference:
      - Termux : termux-clipboard-get
      - WSL    : win32yank -o, PowerShell Get-Clipboard, then the Linux tools
      - macOS  : pbpaste
      - Linux  : wl-paste | xclip | xsel
      - Windows: PowerShell -EncodedCommand "Get-Clipboard -Raw"

    A reader that is installed but fails is skipped in favour of the next one.
    """

    def __init__(self):
        self._os = platform.system().lower()
        _log("Debug", f"Initialized ClipboardUtils for OS: {self._os}")

    # ------------------------
    # Environment detection
    # ------------------------
    def is_wsl2(self) -> bool:
        """Detect WSL (v1 or v2); both report 'Microsoft' in kernel release."""
        try:
            return "microsoft" in platform.uname().release.lower()
        except Exception:
            return False

    def is_termux(self) -> bool:
        return "ANDROID_ROOT" in os.environ or os.path.exists("/data/data/com.termux")

    def os_name(self) -> str:
        return self._os

    # ------------------------
    # Helpers
    # ------------------------
    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        # bytes in, bytes out: text mode would rewrite \r\n and \r to \n
        return subprocess.run(
            args,
            capture_output=True,
            check=True,
        )

    def _decode(self, name: str, raw: bytes) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ClipboardError(f"{name} returned text that is not valid UTF-8: {e}")

    def _pwsh_exe(self) -> Optional[str]:
        for exe in ("pwsh", "powershell", "powershell.exe"):
            p = shutil.which(exe)
            if p:
                return p
        return None

    def _first_available(self, candidates) -> List[List[str]]:
        return [list(prog) for prog in candidates if shutil.which(prog[0])]

    def _candidates(self) -> List[List[str]]:
        osname = self.os_name()

        if self.is_termux():
            return [["termux-clipboard-get"]]

        if osname == "linux" and self.is_wsl2():
            progs = self._first_available([["win32yank", "-o"]])
            pwsh = shutil.which("pwsh") or shutil.which("powershell.exe") or shutil.which("powershell")
            if pwsh:
                # -Raw keeps newlines intact
                progs.append([pwsh, "-NoProfile", "-Command", "Get-Clipboard -Raw"])
            return progs + self._first_available(_LINUX_READERS)

        if osname == "darwin":
            return [["pbpaste"]]

        if osname == "linux":
            return self._first_available(_LINUX_READERS)

        if osname == "windows":
            ps = self._pwsh_exe()
            if not ps:
                return []
            # -EncodedCommand keeps us independent of console code pages
            encoded = base64.b64encode("Get-Clipboard -Raw".encode("utf-16le")).decode("ascii")
            return [[ps, "-NoProfile", "-EncodedCommand", encoded]]

        return []

    # ------------------------
    # Clipboard (GET)
    # ------------------------
    def get_clipboard(self) -> str:
        candidates = self._candidates()
        if not candidates:
            raise ClipboardError(f"no clipboard utility found for platform '{self.os_name()}'")

        last_error = None
        for prog in candidates:
            name = os.path.basename(prog[0])
            try:
                res = self._run(prog)
            except subprocess.CalledProcessError as e:
                stderr = e.stderr or b""
                if isinstance(stderr, bytes):
                    stderr = stderr.decode("utf-8", errors="replace")
                detail = stderr.strip() or f"exit status {e.returncode}"
                last_error = f"{name} failed: {detail}"
                _log("Warning", last_error)
                continue
            except OSError as e:
                last_error = f"{name} failed: {e}"
                _log("Warning", last_error)
                continue
            text = self._decode(name, res.stdout)
            _log("Information", f"Read {len(text)} chars from clipboard via {name}.")
            return text

        raise ClipboardError(last_error)


# ------------- Module-level convenience -------------
_utils_singleton: Optional[ClipboardUtils] = None

def _U() -> ClipboardUtils:
    global _utils_singleton
    if _utils_singleton is None:
        _utils_singleton = ClipboardUtils()
    return _utils_singleton

def get_clipboard() -> str:
    return _U().get_clipboard()

__all__ = ["ClipboardUtils", "ClipboardError", "ClipboardReader", "get_clipboard"]
