"""Probe strategies: one way each of deciding whether a URL exists.

Every strategy has the signature ``(url, *, context, config) -> ProbeOutcome``
and never raises for transport problems.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from email.utils import format_datetime

from cli_config import ProbeConfig
from common.ftp_client import ftp_exists
from common.http_client import safe_get, safe_head
from .content_type import is_archive_type
from .models import ProbeOutcome


def future_if_modified_since(now: Optional[datetime] = None) -> str:
    """HTTP date in December of next year, for the conditional GET probe."""
    now = now or datetime.now(timezone.utc)
    stamp = datetime(now.year + 1, 12, 11, 10, 10, 24, tzinfo=timezone.utc)
    return format_datetime(stamp, usegmt=True)


def transport_head(url: str, *, context: str, config: ProbeConfig) -> ProbeOutcome:
    """HEAD without following redirects; any 2xx/3xx answer means the file exists."""
    res = safe_head(url, context=context, timeout=config.timeout, allow_redirects=False)
    if res is None:
        return ProbeOutcome(False, strategy="transport")
    return ProbeOutcome(
        200 <= res.status_code < 400,
        content_type=res.headers.get("Content-Type"),
        status_code=res.status_code,
        strategy="transport",
    )


def conditional_get(url: str, *, context: str, config: ProbeConfig) -> ProbeOutcome:
    """GET with a future If-Modified-Since; only 304 Not Modified means the file exists.

    Some hosts answer 304 instead of 404 for deleted or renamed artifacts when
    asked this way, so a plain status check would give false positives.
    """
    res = safe_get(
        url,
        context=context,
        timeout=config.timeout,
        headers={"If-Modified-Since": future_if_modified_since()},
        allow_redirects=False,
    )
    if res is None:
        return ProbeOutcome(False, strategy="conditional_get")
    try:
        return ProbeOutcome(
            res.status_code == 304,
            content_type=res.headers.get("Content-Type"),
            status_code=res.status_code,
            strategy="conditional_get",
        )
    finally:
        res.close()


def archive_head(url: str, *, context: str, config: ProbeConfig) -> ProbeOutcome:
    """HEAD following redirects; the final content type must look like an archive."""
    res = safe_head(url, context=context, timeout=config.timeout, allow_redirects=True)
    if res is None:
        return ProbeOutcome(False, strategy="content_type")
    content_type = res.headers.get("Content-Type")
    exists = is_archive_type(content_type)
    if config.strict_status and res.status_code >= 400:
        exists = False
    return ProbeOutcome(
        exists,
        content_type=content_type,
        status_code=res.status_code,
        strategy="content_type",
    )


def ftp_transport(url: str, *, context: str, config: ProbeConfig) -> ProbeOutcome:
    return ProbeOutcome(ftp_exists(url, context=context, timeout=config.timeout), strategy="ftp")


def unsupported(url: str, *, context: str, config: ProbeConfig) -> ProbeOutcome:
    return ProbeOutcome(False, strategy="unsupported")
