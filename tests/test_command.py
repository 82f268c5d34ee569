from types import SimpleNamespace

import pytest

from bootc_iso_builder.errors import CommandError
from bootc_iso_builder.lib import command


def test_run_cmd_returns_output(monkeypatch):
    monkeypatch.setattr(
        command.subprocess,
        "run",
        lambda argv, **kw: SimpleNamespace(returncode=0, stdout="out\n", stderr=""),
    )
    r = command.run_cmd(["echo", "out"])
    assert r.stdout == "out\n"
    assert r.argv == ["echo", "out"]


def test_run_cmd_raises_naming_argv(monkeypatch):
    monkeypatch.setattr(
        command.subprocess,
        "run",
        lambda argv, **kw: SimpleNamespace(returncode=2, stdout="", stderr="bad arg"),
    )
    with pytest.raises(CommandError) as exc:
        command.run_cmd(["mkksiso", "--ks", "a.ks"])
    assert exc.value.returncode == 2
    assert "mkksiso --ks a.ks" in str(exc.value)
    assert "bad arg" in str(exc.value)


def test_run_cmd_unchecked(monkeypatch):
    monkeypatch.setattr(
        command.subprocess,
        "run",
        lambda argv, **kw: SimpleNamespace(returncode=1, stdout="", stderr=""),
    )
    assert command.run_cmd(["false"], check=False).returncode == 1


def test_run_cmd_streams_when_not_capturing(monkeypatch):
    seen = {}

    def fake_run(argv, **kw):
        seen.update(kw)
        return SimpleNamespace(returncode=0, stdout=None, stderr=None)

    monkeypatch.setattr(command.subprocess, "run", fake_run)
    r = command.run_cmd(["mkksiso", "--help"], capture=False)
    assert seen["stdout"] is None and seen["stderr"] is None
    assert r.stdout == ""
