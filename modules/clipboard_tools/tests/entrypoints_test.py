from __future__ import annotations

import sys

import pytest

from clipboard_tools import entrypoints
from clipboard_tools import replace_with_clipboard as rwc


def test_replace_main_exits_with_runner_code(tmp_path, monkeypatch, capsys):
    target = tmp_path / "ep.txt"
    target.write_text("old")
    monkeypatch.setattr(rwc, "get_clipboard", lambda: "via entry point")
    monkeypatch.setattr(sys, "argv", ["rpp", str(target)])

    with pytest.raises(SystemExit) as e:
        entrypoints.replace_main()
    assert e.value.code == 0
    assert target.read_text() == "via entry point"


def test_replace_main_without_args_exits_one(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["rpp"])
    with pytest.raises(SystemExit) as e:
        entrypoints.replace_main()
    assert e.value.code == 1
    assert capsys.readouterr().out == "Usage: rpp <filename>\n"
