"""Capture history endpoint"""

from flask import Blueprint, jsonify, request

from autosnapper_server.routes import get_service

history_bp = Blueprint('history', __name__)


@history_bp.route('/api/history', methods=['GET'])
def list_history():
    """Previous captures, most recent first"""

    limit = request.args.get('limit')
    if limit is not None:
        try:
            limit = int(limit)
        except ValueError:
            return "Invalid limit", 400, {'Content-Type': 'text/plain; charset=utf-8'}
        if limit < 0:
            return "Invalid limit", 400, {'Content-Type': 'text/plain; charset=utf-8'}

    entries = get_service().history.list(limit=limit)
    return jsonify({"history": [e.to_dict() for e in entries]})
