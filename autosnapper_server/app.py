"""Flask application setup for the AutoSnapper server"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from autosnapper_core.config import config
from autosnapper_core.service import ScreenshotService
from autosnapper_server.routes.root import root_bp
from autosnapper_server.routes.health import health_bp
from autosnapper_server.routes.screenshot import screenshot_bp
from autosnapper_server.routes.history import history_bp

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def create_app(service: Optional[ScreenshotService] = None) -> Flask:
    """Build the Flask app around a screenshot service (default: from config)"""
    app = Flask(__name__)
    CORS(app, send_wildcard=True)

    app.config['SCREENSHOT_SERVICE'] = service or ScreenshotService.from_config(config)

    # Register blueprints
    app.register_blueprint(root_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(screenshot_bp)
    app.register_blueprint(history_bp)
    return app


app = create_app()
