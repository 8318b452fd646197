"""Find build recipes to check."""
from __future__ import annotations

import glob
import logging
import os
from typing import Iterable, List, Optional

from constants import Constants

logger = logging.getLogger(__name__)


def _wanted(pkgname: str, whitelist: Optional[Iterable[str]]) -> bool:
    return not whitelist or pkgname in whitelist


def find_abs_recipes(root: str, whitelist: Optional[Iterable[str]] = None) -> List[str]:
    """List ``<repo>/<pkg>/PKGBUILD`` files of an ABS tree.

    A package that also lives in a testing repo is only taken from there.
    """
    whitelist = set(whitelist or ())
    result = []
    for path in sorted(glob.glob(os.path.join(root, "*", "*"))):
        pkgname = os.path.basename(path)
        if not _wanted(pkgname, whitelist):
            continue

        repo = os.path.basename(os.path.dirname(path))
        shadowed = any(
            repo != testing and os.path.exists(os.path.join(root, testing, pkgname))
            for testing in Constants.TESTING_REPOS
        )
        if shadowed:
            logger.debug("Skipping %s/%s, newer recipe in testing", repo, pkgname)
            continue

        recipe = os.path.join(path, Constants.RECIPE_FILE)
        if os.path.isfile(recipe):
            result.append(recipe)
    return result


def find_tree_recipes(root: str, whitelist: Optional[Iterable[str]] = None) -> List[str]:
    """Walk an arbitrary tree for PKGBUILD files; the package is the parent directory."""
    whitelist = set(whitelist or ())
    result = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        if Constants.RECIPE_FILE not in filenames:
            continue
        if _wanted(os.path.basename(os.path.normpath(dirpath)), whitelist):
            result.append(os.path.join(dirpath, Constants.RECIPE_FILE))
    return sorted(result)
