"""Locate and rewrite a package version inside source URLs."""

import re
from typing import Pattern

from constants import Constants
from .incrementer import tokenize_version
from .models import TokenKind

_ANY_DELIMITER = "[" + re.escape("".join(Constants.VERSION_DELIMITERS)) + "]"
_RENAME_PREFIX = re.compile(r"^.*::")
_PROBEABLE_URL = re.compile(r"^(?:" + "|".join(Constants.SOURCE_URL_SCHEMES) + r")://")


def version_pattern(version: str) -> Pattern[str]:
    """Compile a regex matching ``version`` as a whole word inside a URL.

    Any version delimiter matches any other (``1.2`` also matches ``1_2``), the
    match may not start right after a digit and must end on a word boundary.
    """
    parts = []
    for token in tokenize_version(version):
        if token.kind is TokenKind.DELIMITER:
            parts.append(_ANY_DELIMITER)
        else:
            parts.append(re.escape(token.text))
    return re.compile(r"(?<![0-9])" + "".join(parts) + r"\b")


def contains_version(url: str, version: str) -> bool:
    return version_pattern(version).search(url) is not None


def substitute_version(url: str, version: str, new_version: str) -> str:
    """Replace every whole-word occurrence of ``version`` in ``url``."""
    return version_pattern(version).sub(lambda _match: new_version, url)


def strip_rename_prefix(source: str) -> str:
    """Drop the ``local-name::`` prefix PKGBUILD sources may carry."""
    return _RENAME_PREFIX.sub("", source)


def is_probeable_url(source: str) -> bool:
    """True for http, https and ftp URLs."""
    return _PROBEABLE_URL.match(source) is not None
