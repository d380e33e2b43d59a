import subprocess

import pytest

import pw_cli
from errors import ControlCommandFailed, DumpCommandFailed, MalformedDump
from pw_cli import PwCli


class _Recorder:
    def __init__(self, returncode=0, stdout="", stderr="", exc=None):
        self.result = (returncode, stdout, stderr)
        self.exc = exc
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.exc is not None:
            raise self.exc
        rc, out, err = self.result
        return subprocess.CompletedProcess(cmd, rc, stdout=out, stderr=err)


def _patch(monkeypatch, **kw):
    rec = _Recorder(**kw)
    monkeypatch.setattr(pw_cli.subprocess, "run", rec)
    return rec


def test_dump_text(monkeypatch):
    rec = _patch(monkeypatch, stdout="[]")

    assert PwCli().dump_text() == "[]"
    assert rec.calls[0][0] == ["pw-dump"]
    assert rec.calls[0][1] == {"capture_output": True, "text": True}


def test_dump_failure(monkeypatch):
    _patch(monkeypatch, returncode=1, stderr="can't connect\n")

    with pytest.raises(DumpCommandFailed, match="can't connect"):
        PwCli().dump_text()


def test_dump_missing_executable(monkeypatch):
    _patch(monkeypatch, exc=FileNotFoundError(2, "No such file or directory"))

    with pytest.raises(DumpCommandFailed, match="failed to execute pw-dump"):
        PwCli().dump_text()


def test_set_props_command_line(monkeypatch):
    rec = _patch(monkeypatch)

    PwCli(control_cmd="/usr/bin/pw-cli").set_props(52, '{"mute":true}')

    assert rec.calls[0][0] == ["/usr/bin/pw-cli", "set-param", "52", "Props", '{"mute":true}']


def test_set_props_nonzero_exit(monkeypatch):
    _patch(monkeypatch, returncode=3, stderr="boom")

    with pytest.raises(ControlCommandFailed) as ei:
        PwCli().set_props(52, "{}")
    assert ei.value.exit_code == 3
    assert ei.value.signal is None


def test_set_props_killed_by_signal(monkeypatch):
    _patch(monkeypatch, returncode=-9)

    with pytest.raises(ControlCommandFailed, match="SIGKILL") as ei:
        PwCli().set_props(52, "{}")
    assert ei.value.signal == 9
    assert ei.value.exit_code is None


def test_set_props_missing_executable(monkeypatch):
    _patch(monkeypatch, exc=FileNotFoundError(2, "No such file or directory"))

    with pytest.raises(ControlCommandFailed, match="failed to execute pw-cli"):
        PwCli().set_props(52, "{}")


def test_dump_undecodable_output(monkeypatch):
    _patch(monkeypatch, exc=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"))

    with pytest.raises(MalformedDump, match="not valid UTF-8"):
        PwCli().dump_text()


def test_set_props_undecodable_output(monkeypatch):
    _patch(monkeypatch, exc=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"))

    with pytest.raises(ControlCommandFailed, match="not valid UTF-8"):
        PwCli().set_props(52, "{}")
