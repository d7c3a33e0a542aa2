from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure():
    modules_dir = Path(__file__).resolve().parents[2]
    sp = str(modules_dir)
    if sp not in sys.path:
        sys.path.insert(0, sp)


@pytest.fixture(autouse=True)
def quiet_ui(monkeypatch):
    # verbosity is module-global; keep one test's -v from leaking into the next
    import standard_ui.standard_ui as sui

    monkeypatch.setattr(sui, "VERBOSE", False)
    monkeypatch.delenv("RPP_VERBOSE", raising=False)
    monkeypatch.delenv("FORCE_ASCII_UI", raising=False)
