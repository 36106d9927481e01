import logging
import shlex

import pytest

from wayedges.shell import CommandError, notify_send, shell_cmd, shell_cmd_non_block


@pytest.fixture
def fake_notifier(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    log_file = tmp_path / "notify.log"
    script = bin_dir / "notify-send"
    script.write_text(f"#!/bin/sh\nprintf '%s\\n' \"$@\" > {shlex.quote(str(log_file))}\n")
    script.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir))
    return log_file


@pytest.fixture
def no_notifier(tmp_path, monkeypatch):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))


def test_shell_cmd_returns_stdout(no_notifier):
    assert shell_cmd("printf hello") == "hello"


def test_shell_cmd_failure_raises(fake_notifier):
    with pytest.raises(CommandError) as info:
        shell_cmd("echo broken >&2; exit 2")
    message = str(info.value)
    assert message.startswith("command exit with code 1:")
    assert "broken" in message
    lines = fake_notifier.read_text().splitlines()
    assert "Way-Edges command error" in lines


def test_shell_cmd_failure_logs(no_notifier, caplog):
    with caplog.at_level(logging.ERROR, logger="wayedges.shell"):
        with pytest.raises(CommandError):
            shell_cmd("exit 1")
    assert "error running command: exit 1" in caplog.text


def test_shell_cmd_non_block_runs(no_notifier, tmp_path):
    out = tmp_path / "out.txt"
    thread = shell_cmd_non_block(f"printf done > {shlex.quote(str(out))}")
    thread.join(timeout=10)
    assert out.read_text() == "done"


def test_shell_cmd_non_block_swallows_errors(no_notifier):
    thread = shell_cmd_non_block("exit 4")
    thread.join(timeout=10)
    assert not thread.is_alive()


def test_notify_send_passes_arguments(fake_notifier, caplog):
    with caplog.at_level(logging.ERROR, logger="wayedges.shell"):
        notify_send("the summary", "the body", True)
    assert "Failed to send notification" not in caplog.text
    lines = fake_notifier.read_text().splitlines()
    assert lines[-2:] == ["the summary", "the body"]
    assert "critical" in lines


def test_notify_send_non_critical(fake_notifier, caplog):
    with caplog.at_level(logging.ERROR, logger="wayedges.shell"):
        notify_send("plain", "message", False)
    assert "Failed to send notification" not in caplog.text
    lines = fake_notifier.read_text().splitlines()
    assert "critical" not in lines
    assert lines[-2:] == ["plain", "message"]


def test_notify_send_missing_program_logs(no_notifier, caplog):
    with caplog.at_level(logging.ERROR, logger="wayedges.shell"):
        notify_send("summary text", "body text", False)
    assert "Failed to send notification" in caplog.text
    assert "summary text" in caplog.text