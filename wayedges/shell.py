"""Running shell commands and sending desktop notifications."""

from __future__ import annotations

import logging
import subprocess
import threading

log = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """Raised when a shell command cannot be run or exits unsuccessfully."""


def shell_cmd(value: str) -> str:
    """Run ``value`` with ``/bin/sh -c`` and return its standard output."""
    log.debug("running command: %s", value)
    try:
        result = subprocess.run(["/bin/sh", "-c", value], capture_output=True, check=False)
    except OSError as exc:
        message = f"Error: {exc}"
    else:
        if result.returncode == 0:
            return result.stdout.decode("utf-8", errors="replace")
        stderr = result.stderr.decode("utf-8", errors="replace")
        message = f"command exit with code 1: {stderr}"

    log.error("error running command: %s\n%s", value, message)
    notify_send("Way-Edges command error", message, True)
    raise CommandError(message)


def _run_quietly(value: str) -> None:
    try:
        shell_cmd(value)
    except CommandError:
        pass  # already logged and notified


def shell_cmd_non_block(value: str) -> threading.Thread:
    """Run a shell command on a background thread and return that thread."""
    thread = threading.Thread(target=_run_quietly, args=(value,), daemon=True)
    thread.start()
    return thread


def notify_send(summary: str, body: str, is_critical: bool = False) -> None:
    """Show a desktop notification; failures are logged, never raised."""
    command = ["notify-send"]
    if is_critical:
        command += ["--urgency", "critical"]
    command += ["--", summary, body]
    try:
        result = subprocess.run(command, capture_output=True, check=False)
    except OSError as exc:
        error = str(exc)
    else:
        if result.returncode == 0:
            return
        error = result.stderr.decode("utf-8", errors="replace").strip() or (
            f"exit status {result.returncode}"
        )
    log.error('Failed to send notification: "%s" - "%s"\nError: %s', summary, body, error)