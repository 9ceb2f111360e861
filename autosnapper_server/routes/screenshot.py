"""Screenshot capture endpoint"""

import logging

from flask import Blueprint, jsonify, request

from autosnapper_core.errors import CaptureFailedError, InvalidURLError, format_user_friendly_error
from autosnapper_core.models import CaptureRequest
from autosnapper_server.routes import get_service

logger = logging.getLogger(__name__)

screenshot_bp = Blueprint('screenshot', __name__)

TEXT_PLAIN = {'Content-Type': 'text/plain; charset=utf-8'}


def _text_error(message: str, status: int):
    # Error bodies are plain text; clients display them as-is
    return message, status, TEXT_PLAIN


@screenshot_bp.route('/api/screenshot', methods=['POST'])
def capture_screenshot():
    """Capture a screenshot of the posted URL"""

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _text_error("Bad request: unable to parse JSON", 400)

    req = CaptureRequest.from_dict(data)
    if not req.url:
        return _text_error("No URL provided", 400)

    try:
        result = get_service().get_screenshot(req.url)
    except InvalidURLError as e:
        return _text_error(str(e), 400)
    except CaptureFailedError as e:
        friendly = format_user_friendly_error(e)
        logger.error(f"Capture failed for {req.url}: {friendly['technical']}")
        return _text_error(f"Failed to capture screenshot: {friendly['message']}", 500)

    return jsonify(result.to_dict())
