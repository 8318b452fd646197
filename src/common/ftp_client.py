"""FTP existence check used for ftp:// source URLs."""
from __future__ import annotations

import ftplib
import logging
from typing import Optional
from urllib.parse import unquote, urlsplit

from constants import Constants
from common.logging_utils import safe_url

logger = logging.getLogger(__name__)


def ftp_exists(url: str, *, context: str, timeout: float = Constants.REQUEST_TIMEOUT) -> bool:
    """Return True when the file behind an ftp:// URL can be sized.

    Uses anonymous login unless the URL carries credentials. Any protocol or
    socket error counts as "does not exist".
    """
    try:
        parts = urlsplit(url)
        port = parts.port or 21
    except ValueError:
        return False
    if parts.scheme != "ftp" or not parts.hostname:
        return False
    path = unquote(parts.path)
    if not path or path.endswith("/"):
        return False

    ftp: Optional[ftplib.FTP] = None
    try:
        ftp = ftplib.FTP(timeout=timeout)
        ftp.connect(parts.hostname, port)
        ftp.login(parts.username or "anonymous", parts.password or "anonymous@")
        # SIZE is only defined for binary transfers on many servers
        ftp.voidcmd("TYPE I")
        size = ftp.size(path)
        return size is not None
    except ftplib.all_errors as exc:
        logger.debug("%s ftp probe of %s failed: %s", context, safe_url(url), exc)
        return False
    finally:
        if ftp is not None:
            try:
                ftp.quit()
            except ftplib.all_errors:
                ftp.close()
