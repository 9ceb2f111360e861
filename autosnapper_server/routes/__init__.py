"""Routes module for Flask endpoints"""

from flask import current_app


def get_service():
    """Screenshot service bound to the running app"""
    return current_app.config['SCREENSHOT_SERVICE']


from autosnapper_server.routes.root import root_bp  # noqa: E402
from autosnapper_server.routes.health import health_bp  # noqa: E402
from autosnapper_server.routes.screenshot import screenshot_bp  # noqa: E402
from autosnapper_server.routes.history import history_bp  # noqa: E402

__all__ = ['root_bp', 'health_bp', 'screenshot_bp', 'history_bp', 'get_service']
