"""Main entry point for autosnapper-server"""

import sys

from autosnapper_server.server.server_manager import start_server, stop_server, restart_server, show_status

COMMANDS = {
    'start': start_server,
    'stop': stop_server,
    'restart': restart_server,
    'status': show_status,
}

USAGE = """autosnapper-server - screenshot capture API

Usage:
  autosnapper-server              Start server (default)
  autosnapper-server start        Start server
  autosnapper-server stop         Stop server
  autosnapper-server restart      Restart server
  autosnapper-server status       Show server status
  autosnapper-server --help       Show this help

Environment variables:
  AUTOSNAPPER_HOST              Bind address (default: 0.0.0.0)
  AUTOSNAPPER_PORT              Port (default: 8080)
  AUTOSNAPPER_HEADLESS          Run Chromium headless (default: true)
  AUTOSNAPPER_CACHE_TTL         Cache lifetime in seconds (default: 3600)
  AUTOSNAPPER_HISTORY_MAX       History entries kept (default: 50)
  AUTOSNAPPER_HISTORY_FILE      Persist history to this JSON file
"""


def main(argv=None) -> int:
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        return start_server()

    command = argv[0].lower()
    if command in ('--help', '-h', 'help'):
        print(USAGE)
        return 0
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print("   Use 'autosnapper-server --help' for usage")
        return 1
    return handler()


if __name__ == '__main__':
    sys.exit(main())
