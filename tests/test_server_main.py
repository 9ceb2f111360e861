"""Tests for the server entry point and PID handling."""

import os

import autosnapper_server
import autosnapper_server.main as main_module
from autosnapper_server.server import pid_manager


def test_help(capsys):
    assert main_module.main(['--help']) == 0
    assert "autosnapper-server" in capsys.readouterr().out


def test_unknown_command(capsys):
    assert main_module.main(['explode']) == 1
    assert "Unknown command" in capsys.readouterr().out


def test_dispatches_commands(monkeypatch):
    called = []
    monkeypatch.setitem(main_module.COMMANDS, 'status', lambda: called.append('status') or 0)
    assert main_module.main(['STATUS']) == 0
    assert called == ['status']


def test_pid_file_roundtrip(monkeypatch, tmp_path):
    pid_file = tmp_path / "autosnapper.pid"
    monkeypatch.setenv('AUTOSNAPPER_PID_FILE', str(pid_file))

    assert pid_manager.is_running() is False
    pid_manager.save_pid()
    assert pid_file.read_text() == str(os.getpid())


def test_stale_pid_file_removed(monkeypatch, tmp_path):
    pid_file = tmp_path / "autosnapper.pid"
    pid_file.write_text("999999999")
    monkeypatch.setenv('AUTOSNAPPER_PID_FILE', str(pid_file))
    monkeypatch.setattr(pid_manager.psutil, 'pid_exists', lambda pid: False)

    assert pid_manager.is_running() is False
    assert not pid_file.exists()


def test_package_exposes_main_module():
    assert autosnapper_server.main is main_module
    assert callable(main_module.main)
    assert set(main_module.COMMANDS) == {'start', 'stop', 'restart', 'status'}
