"""Server management functions - start, stop, restart, status"""

import logging
import signal
import socket
import time

import psutil

from autosnapper_core.config import config
from autosnapper_server.server.pid_manager import get_pid_file, is_running, save_pid

logger = logging.getLogger(__name__)


def start_server() -> int:
    """Start the API server in the foreground"""
    # Import here so stop/status do not build the app
    from autosnapper_server.app import app

    running_pid = is_running()
    if running_pid:
        print(f"autosnapper-server is already running (PID: {running_pid})")
        print("   Use 'autosnapper-server stop' to stop it first")
        return 1

    logger.info(f"Starting AutoSnapper server on {config.host}:{config.port}")
    logger.info(f"Headless: {config.headless}, cache TTL: {config.cache_ttl}s, history size: {config.history_max}")
    if config.history_file:
        logger.info(f"History file: {config.history_file}")

    save_pid()
    try:
        print(f"Server is running on http://{config.host}:{config.port}")
        app.run(host=config.host, port=config.port, debug=config.debug, use_reloader=False, threaded=True)
    except KeyboardInterrupt:
        print("\nStopping server...")
    finally:
        get_pid_file().unlink(missing_ok=True)

    return 0


def stop_server() -> int:
    """Stop a running server"""
    running_pid = is_running()
    if not running_pid:
        print("autosnapper-server is not running")
        return 1

    try:
        print(f"Stopping autosnapper-server (PID: {running_pid})...")
        proc = psutil.Process(running_pid)
        proc.send_signal(signal.SIGTERM)

        # Wait up to 5 seconds for graceful shutdown
        for _ in range(50):
            if not psutil.pid_exists(running_pid):
                break
            time.sleep(0.1)

        if psutil.pid_exists(running_pid):
            print("   Force killing...")
            proc.kill()
            time.sleep(0.5)
    except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
        print(f"Error stopping server: {e}")
        return 1
    finally:
        get_pid_file().unlink(missing_ok=True)

    print("autosnapper-server stopped")
    return 0


def restart_server() -> int:
    """Restart the server"""
    stop_server()
    time.sleep(1)
    return start_server()


def _port_open(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        return sock.connect_ex(('127.0.0.1', port)) == 0


def show_status() -> int:
    """Show server status"""
    running_pid = is_running()
    if not running_pid:
        print("autosnapper-server is not running")
        return 1

    try:
        proc = psutil.Process(running_pid)
        print("autosnapper-server is running")
        print(f"   PID: {running_pid}")
        print(f"   URL: http://localhost:{config.port}")
        print(f"   Memory: {proc.memory_info().rss / 1024 / 1024:.1f} MB")
        state = "responding" if _port_open(config.port) else "not responding"
        print(f"   Status: {state} on port {config.port}")
    except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
        print(f"Error getting status: {e}")
        return 1
    return 0
