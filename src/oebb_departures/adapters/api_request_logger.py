"""Utility for logging outgoing requests when OEBB_LOG_REQUESTS is enabled."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via the OEBB_LOG_REQUESTS environment variable."""
    return os.getenv("OEBB_LOG_REQUESTS", "").lower() == "true"


def build_url(url: str, params: dict[str, Any] | None) -> str:
    """Build the full URL of a request from its base URL and query parameters."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params)}"


def log_api_request(method: str, url: str, params: dict[str, Any] | None = None) -> None:
    """Log a request line if OEBB_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters (optional).
    """
    if not should_log_requests():
        return
    logger.info(f"API Request: {method} {build_url(url, params)}")


def log_api_response(url: str, status: int, body: str) -> None:
    """Log the status and the start of a response body if OEBB_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return
    preview = body[:300] if body else "(empty response body)"
    logger.info(f"API Response: {status} from {url} ({len(body)} chars): {preview}")
