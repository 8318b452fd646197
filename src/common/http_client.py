"""Shared HTTP helpers used by the URL prober.

Encapsulates request/timeout error handling so probe strategies avoid
duplicating try/except blocks. Transport failures never propagate: the
helpers log them and return None, which callers read as "does not exist".
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _default_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    merged = {"User-Agent": Constants.USER_AGENT}
    if headers:
        merged.update(headers)
    return merged


def _request(
    method: str,
    url: str,
    *,
    context: str,
    timeout: float,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> Optional[requests.Response]:
    """Issue one request and trace it; return None on any transport error."""
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action=method,
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.request(
                method,
                url,
                timeout=timeout,
                headers=_default_headers(headers),
                **kwargs
            )
        except requests.Timeout:
            logger.debug("%s %s timed out after %s seconds", context, safe_target, timeout)
            return None
        except requests.RequestException as exc:  # includes ConnectionError
            logger.debug("%s %s connection error: %s", context, safe_target, exc)
            return None
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action=method,
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )
        return res


def safe_head(
    url: str,
    *,
    context: str,
    timeout: float = Constants.REQUEST_TIMEOUT,
    allow_redirects: bool = False,
    headers: Optional[Dict[str, str]] = None,
) -> Optional[requests.Response]:
    """Perform a HEAD request with consistent error handling.

    Args:
        url: Target URL.
        context: Human-readable tag for logs (e.g. the package name).
        timeout: Per-request timeout in seconds.
        allow_redirects: Follow redirects before reporting the response.
        headers: Extra request headers.

    Returns:
        The response, or None when the transport failed.
    """
    return _request(
        "HEAD",
        url,
        context=context,
        timeout=timeout,
        headers=headers,
        allow_redirects=allow_redirects,
    )


def safe_get(
    url: str,
    *,
    context: str,
    timeout: float = Constants.REQUEST_TIMEOUT,
    headers: Optional[Dict[str, str]] = None,
    allow_redirects: bool = True,
) -> Optional[requests.Response]:
    """Perform a streamed GET request with consistent error handling.

    The body is never read here; callers must close the returned response.

    Args:
        url: Target URL.
        context: Human-readable tag for logs.
        timeout: Per-request timeout in seconds.
        headers: Extra request headers.
        allow_redirects: Follow redirects (the requests default).

    Returns:
        The response, or None when the transport failed.
    """
    return _request(
        "GET",
        url,
        context=context,
        timeout=timeout,
        headers=headers,
        allow_redirects=allow_redirects,
        stream=True,
    )
