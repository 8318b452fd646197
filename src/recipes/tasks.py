"""Per-package unit of work built from extractor output."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from versioning.parser import contains_version, is_probeable_url, strip_rename_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """What the extraction collaborator reports for one recipe."""
    name: Optional[str]
    version: Optional[str]
    source_urls: List[str]


@dataclass(frozen=True)
class PackageTask:
    """One package to check. Immutable once queued."""
    name: str
    current_version: str
    source_url_template: str
    recipe_path: str = ""


def select_source_url(sources: List[str], version: str) -> Optional[str]:
    """First http/https/ftp source that mentions ``version`` as a whole word."""
    for source in sources:
        url = strip_rename_prefix(source.strip())
        if is_probeable_url(url) and contains_version(url, version):
            return url
    return None


def build_task(result: ExtractionResult, recipe_path: str, reporter=None) -> Optional[PackageTask]:
    """Turn extractor output into a PackageTask, or None when it is not probeable.

    Drops are reported as verbose diagnostics through ``reporter`` if given.
    """
    if not result.name:
        if reporter is not None:
            reporter.diagnostic(recipe_path, "cannot parse recipe, no pkgname")
        return None
    if not result.version:
        if reporter is not None:
            reporter.diagnostic(result.name, f"cannot parse recipe {recipe_path}, no pkgver")
        return None

    url = select_source_url(result.source_urls, result.version)
    if url is None:
        if reporter is not None:
            reporter.diagnostic(result.name, f"cannot find source urls in {recipe_path}")
        return None

    return PackageTask(
        name=result.name,
        current_version=result.version,
        source_url_template=url,
        recipe_path=recipe_path,
    )
