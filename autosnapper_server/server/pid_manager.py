"""PID file management for server process"""

import os
from pathlib import Path
from typing import Union

import psutil

PROCESS_MARKERS = ('autosnapper-server', 'autosnapper_server')


def get_pid_file() -> Path:
    """Get PID file path"""
    return Path(os.getenv('AUTOSNAPPER_PID_FILE', '/tmp/autosnapper_server.pid'))


def is_running() -> Union[int, bool]:
    """Check if server is already running. Returns PID if running, False otherwise."""
    pid_file = get_pid_file()
    if not pid_file.exists():
        return False

    try:
        pid = int(pid_file.read_text().strip())
    except (OSError, ValueError):
        return False

    if psutil.pid_exists(pid):
        try:
            cmdline = ' '.join(psutil.Process(pid).cmdline())
            if any(marker in cmdline for marker in PROCESS_MARKERS):
                return pid
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            pass

    # Stale PID file
    pid_file.unlink(missing_ok=True)
    return False


def save_pid():
    """Save current process PID"""
    get_pid_file().write_text(str(os.getpid()))
