"""Extraction boundary: turn a PKGBUILD into name, version and source URLs.

Recipes are shell scripts, so rather than parsing them we let bash source the
file and print the variables we need, one per line: ``pkgname``, ``pkgver``,
then every ``source`` entry.
"""
from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import List, Optional

from constants import Constants
from common.errors import ExtractionError
from .tasks import ExtractionResult

logger = logging.getLogger(__name__)

_PRINT_RECIPE = r"""
source "$1" || exit 1
printf '%s\n' "$pkgname" "$pkgver"
for entry in "${source[@]}" "${source_x86_64[@]}"; do
  printf '%s\n' "$entry"
done
"""


def parse_extractor_output(stdout: str) -> ExtractionResult:
    """Read the ``name``, ``version``, ``url...`` line protocol."""
    lines = stdout.splitlines()
    name = lines[0].strip() if lines else ""
    version = lines[1].strip() if len(lines) > 1 else ""
    sources = [line.strip() for line in lines[2:] if line.strip()]
    return ExtractionResult(name=name or None, version=version or None, source_urls=sources)


class ShellRecipeExtractor:
    """Runs an external process once per recipe.

    Args:
        command: Optional extractor command line; it is invoked as
            ``<command> <recipe path>`` and must follow the same line protocol.
            Defaults to sourcing the recipe with bash.
        timeout: Seconds before the extraction is abandoned.
    """

    def __init__(self, command: Optional[str] = None, timeout: float = Constants.EXTRACTOR_TIMEOUT):
        self.command = command
        self.timeout = timeout

    def _argv(self, path: str) -> List[str]:
        if self.command:
            return shlex.split(self.command) + [path]
        return ["bash", "-c", _PRINT_RECIPE, "pkgprobe-extract", path]

    def extract(self, path: str) -> ExtractionResult:
        """Extract one recipe.

        Raises:
            ExtractionError: If the process cannot run, times out or exits non-zero.
        """
        path = os.path.abspath(path)
        try:
            proc = subprocess.run(  # noqa: S603
                self._argv(path),
                cwd=os.path.dirname(path),
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExtractionError(path, f"extractor timed out after {self.timeout} seconds") from exc
        except OSError as exc:
            raise ExtractionError(path, f"cannot run extractor: {exc}") from exc

        if proc.returncode != 0:
            detail = proc.stderr.strip().splitlines()[-1:] if proc.stderr else []
            reason = f"extractor exited with {proc.returncode}"
            if detail:
                reason += f": {detail[0]}"
            raise ExtractionError(path, reason)

        return parse_extractor_output(proc.stdout)
