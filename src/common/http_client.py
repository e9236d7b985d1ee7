"""Shared HTTP helpers used by the registry crawlers.

Callers only ever see "a body" or "nothing here": timeouts, connection
errors and non-200 answers are absorbed here, with retries and a short-lived
response cache in front of ``requests``.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Tuple

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"User-Agent": Constants.USER_AGENT}

Response = Tuple[int, Dict[str, str], str]

# url + headers -> (response tuple, stored at)
_http_cache: Dict[str, Tuple[Response, float]] = {}


def clear_cache() -> None:
    """Drop every cached response."""
    _http_cache.clear()


def _cached(key: str) -> Optional[Response]:
    entry = _http_cache.get(key)
    if entry is None:
        return None
    data, stored_at = entry
    if time.time() - stored_at >= Constants.HTTP_CACHE_TTL_SEC:
        del _http_cache[key]
        return None
    return data


def _trace(message: str, **fields: Any) -> None:
    if is_debug_enabled(logger):
        logger.debug(message, extra=extra_context(component="http_client", action="GET", **fields))


def robust_get(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any
) -> Response:
    """GET ``url`` with retries and caching.

    Returns:
        Tuple of (status_code, headers_dict, text). Status code is 0 when every
        attempt failed at the transport level.
    """
    request_headers = {**DEFAULT_HEADERS, **(headers or {})}
    cache_key = f"{url}|{sorted(request_headers.items())}"
    target = safe_url(url)

    hit = _cached(cache_key)
    if hit is not None:
        _trace("HTTP cache hit", event="cache_hit", target=target)
        return hit

    last_error = None
    for attempt in range(1, Constants.HTTP_RETRY_MAX + 1):
        if attempt > 1:
            time.sleep(Constants.HTTP_RETRY_BASE_DELAY_SEC * (2 ** (attempt - 2)))
        with Timer() as t:
            try:
                response = requests.get(
                    url, timeout=Constants.REQUEST_TIMEOUT, headers=request_headers, **kwargs
                )
            except requests.RequestException as exc:  # includes Timeout, ConnectionError
                last_error = "timeout" if isinstance(exc, requests.Timeout) else str(exc)
                _trace("HTTP request failed", event="http_exception", outcome=last_error,
                       attempt=attempt, target=target)
                continue

        data = (response.status_code, dict(response.headers), response.text)
        if response.status_code < 500:  # Don't cache server errors
            _http_cache[cache_key] = (data, time.time())
        _trace("HTTP response", event="http_response", status_code=response.status_code,
               duration_ms=t.duration_ms(), attempt=attempt, target=target)
        return data

    logger.warning(
        "GET %s failed after %s attempts: %s", target, Constants.HTTP_RETRY_MAX, last_error
    )
    return 0, {}, f"Request failed after {Constants.HTTP_RETRY_MAX} attempts: {last_error}"


def fetch_text(url: str) -> Optional[str]:
    """Return the body at ``url``, or None when there is nothing there.

    Any non-200 status, an empty body, or a transport failure is reported as
    absence rather than raised.
    """
    status_code, _, text = robust_get(url)
    if status_code == 200 and text:
        return text
    return None
