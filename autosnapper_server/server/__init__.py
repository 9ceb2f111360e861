"""Server process management"""

from autosnapper_server.server.server_manager import start_server, stop_server, restart_server, show_status
from autosnapper_server.server.pid_manager import get_pid_file, is_running, save_pid

__all__ = ['start_server', 'stop_server', 'restart_server', 'show_status', 'get_pid_file', 'is_running', 'save_pid']
