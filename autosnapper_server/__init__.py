"""
autosnapper_server - HTTP API for headless page screenshots
Captures pages with Playwright, caches repeat requests and keeps a history
"""

from autosnapper_server.app import app, create_app

__all__ = ['app', 'create_app']
