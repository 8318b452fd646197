"""Content-type classification for probed download URLs."""

from typing import Iterable, Optional

from constants import Constants

_APPLICATION_PREFIX = "application/"


def strip_parameters(content_type: Optional[str]) -> Optional[str]:
    """Drop ``; charset=...`` style parameters and surrounding blanks."""
    if content_type is None:
        return None
    return content_type.split(";", 1)[0].strip().lower()


def is_archive_type(
    content_type: Optional[str],
    allow: Iterable[str] = Constants.ARCHIVE_TYPE_ALLOW,
    deny: Iterable[str] = Constants.APPLICATION_TYPE_DENY,
) -> bool:
    """Return True when a reported content type looks like a downloadable file.

    The type must be ``application/<something>`` where ``<something>`` is not
    a document type such as ``xml``; a few non-conforming types servers send
    for tarballs are accepted as-is.
    """
    media_type = strip_parameters(content_type)
    if not media_type:
        return False
    if media_type in allow:
        return True
    if not media_type.startswith(_APPLICATION_PREFIX):
        return False
    return media_type[len(_APPLICATION_PREFIX):] not in deny
