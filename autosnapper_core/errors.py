"""
Capture errors and their user-friendly rendering.

Converts browser/network failures into short messages that can be
shown to the person who asked for the screenshot.
"""

from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)


class AutoSnapperError(Exception):
    """Base class for errors raised by the capture pipeline"""


class InvalidURLError(AutoSnapperError):
    """The requested URL is not an absolute http(s) URL"""


class CaptureFailedError(AutoSnapperError):
    """The browser could not render or screenshot the page"""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to capture {url}: {cause}" if cause else f"Failed to capture {url}")


# Error mappings: pattern -> user-friendly info. First match wins.
ERROR_MAPPINGS = {
    "err_name_not_resolved": {
        "message": "Could not resolve the host name",
        "suggestion": "Check that the domain in the URL is spelled correctly",
        "severity": "error",
        "can_retry": False
    },
    "timeout": {
        "message": "The page took too long to load",
        "suggestion": "Check that the site is reachable and try again",
        "severity": "warning",
        "can_retry": True
    },
    "err_connection_refused": {
        "message": "The site refused the connection",
        "suggestion": "Check that the URL and port are correct and the site is up",
        "severity": "error",
        "can_retry": True
    },
    "connection refused": {
        "message": "The site refused the connection",
        "suggestion": "Check that the URL and port are correct and the site is up",
        "severity": "error",
        "can_retry": True
    },
    "err_cert": {
        "message": "The site presented an invalid TLS certificate",
        "suggestion": "Try the http:// address or fix the certificate",
        "severity": "error",
        "can_retry": False
    },
    "ssl": {
        "message": "A secure connection to the site could not be established",
        "suggestion": "Try the http:// address or fix the certificate",
        "severity": "error",
        "can_retry": False
    },
    "err_internet_disconnected": {
        "message": "The capture server has no network access",
        "suggestion": "Check the server's network connection",
        "severity": "critical",
        "can_retry": True
    },
    "target closed": {
        "message": "The browser closed while capturing the page",
        "suggestion": "Try the capture again",
        "severity": "error",
        "can_retry": True
    },
    "executable doesn't exist": {
        "message": "The headless browser is not installed on the server",
        "suggestion": "Run: python -m playwright install chromium",
        "severity": "critical",
        "can_retry": False
    },
    "navigation failed": {
        "message": "The page could not be loaded",
        "suggestion": "Check that the URL is correct and the site is reachable",
        "severity": "error",
        "can_retry": True
    },
}


def format_user_friendly_error(
    error: BaseException,
    technical_details: Optional[str] = None
) -> Dict:
    """
    Convert technical error to user-friendly message.

    Returns:
        {message, suggestion, technical, severity, can_retry}
    """
    if isinstance(error, CaptureFailedError) and error.cause is not None:
        error_str = str(error.cause)
    else:
        error_str = str(error)

    lowered = error_str.lower()
    for pattern, friendly_error in ERROR_MAPPINGS.items():
        if pattern in lowered:
            result = friendly_error.copy()
            result["technical"] = technical_details or error_str
            logger.debug(f"Mapped error to user-friendly: {result['message']}")
            return result

    return {
        "message": "An unexpected error occurred while capturing the page",
        "suggestion": "Check the server logs or try again",
        "technical": technical_details or error_str,
        "severity": "error",
        "can_retry": True
    }


def get_error_category(error: BaseException) -> str:
    """Return "network", "browser" or "unknown"."""
    error_str = str(error).lower()
    if any(k in error_str for k in ["timeout", "connection", "network", "net::", "ssl"]):
        return "network"
    elif any(k in error_str for k in ["browser", "target", "navigation", "executable"]):
        return "browser"
    return "unknown"
