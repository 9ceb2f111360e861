"""
autosnapper_client - Client for the AutoSnapper screenshot API
"""

from autosnapper_client.api import ApiError, ScreenshotApi
from autosnapper_client.client import ScreenshotClient, format_history, validate

__all__ = ['ApiError', 'ScreenshotApi', 'ScreenshotClient', 'format_history', 'validate']
