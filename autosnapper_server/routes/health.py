"""Health check endpoint"""

from datetime import datetime, timezone

from flask import Blueprint, jsonify

import autosnapper_core
from autosnapper_server.routes import get_service

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "version": autosnapper_core.__version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        **get_service().stats(),
    })
