"""Landing page"""

from flask import Blueprint

root_bp = Blueprint('root', __name__)

LANDING_PAGE = """<!DOCTYPE html>
<html>
<head><title>AutoSnapper</title></head>
<body>
<h1>AutoSnapper Backend is Live!</h1>
<p>POST /api/screenshot with {"url": "https://example.com"} to capture a page.</p>
<p>GET /api/history lists previous captures.</p>
</body>
</html>
"""


@root_bp.route('/', methods=['GET'])
def index():
    return LANDING_PAGE, 200, {'Content-Type': 'text/html; charset=utf-8'}
