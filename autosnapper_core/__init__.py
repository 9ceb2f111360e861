"""
autosnapper_core - Screenshot capture, caching and history for AutoSnapper
"""

from autosnapper_core.config import Config, config
from autosnapper_core.models import CaptureRequest, CaptureResult, HistoryEntry
from autosnapper_core.url_utils import is_valid_http_url, normalize_url
from autosnapper_core.cache import ScreenshotCache, generate_cache_key
from autosnapper_core.history import HistoryStore
from autosnapper_core.errors import AutoSnapperError, InvalidURLError, CaptureFailedError
from autosnapper_core.service import ScreenshotService

__all__ = [
    'Config',
    'config',
    'CaptureRequest',
    'CaptureResult',
    'HistoryEntry',
    'is_valid_http_url',
    'normalize_url',
    'ScreenshotCache',
    'generate_cache_key',
    'HistoryStore',
    'AutoSnapperError',
    'InvalidURLError',
    'CaptureFailedError',
    'ScreenshotService',
]

__version__ = '1.0.0'
