from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """Keep user config and lookup overrides out of every test."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CMDTYPE_CONFIG", raising=False)
    monkeypatch.delenv("BUILTIN_TYPE_BIN", raising=False)
    yield


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fake_type(tmp_path) -> Callable[..., Path]:
    """Build an executable that stands in for ``type`` and prints canned output.

    The arguments it was called with are written to ``<script>.args``, one
    per line.
    """
    if sys.platform == "win32":  # pragma: no cover
        pytest.skip("fake lookup binaries are POSIX shell scripts")

    counter = {"n": 0}

    def _make(stdout: str = "", exit_code: int = 0) -> Path:
        counter["n"] += 1
        script = tmp_path / f"fake-type-{counter['n']}"
        output_file = script.with_suffix(".out")
        output_file.write_text(stdout, encoding="utf-8")
        script.write_text(
            "#!/bin/sh\n"
            f"printf '%s\\n' \"$@\" > \"{script}.args\"\n"
            f"cat \"{output_file}\"\n"
            f"exit {exit_code}\n",
            encoding="utf-8",
        )
        script.chmod(0o755)
        return script

    return _make
