"""Configuration for the AutoSnapper client"""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BACKEND_URL = "https://autosnapper.onrender.com"


def get_backend_url() -> str:
    """Backend origin, without trailing slash"""
    return (os.getenv("AUTOSNAPPER_BACKEND_URL") or DEFAULT_BACKEND_URL).rstrip("/")


def get_timeout() -> float:
    return float(os.getenv("AUTOSNAPPER_CLIENT_TIMEOUT", "120"))


# Delay before history is re-fetched after a fresh (uncached) capture
HISTORY_REFRESH_DELAY = 1.0
