"""Per-package update check: bump the version, probe the rewritten URL.

The first candidate whose URL exists is only reported as a new version when
a control URL built from a deliberately invalid version does *not* exist;
otherwise the server answers "exists" for anything and the hit is reported
as suspicious.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from cli_config import ProbeConfig
from constants import CheckStatus
from common.logging_utils import extra_context, is_debug_enabled
from common.reporting import ConsoleReporter
from probe.prober import URLProber
from recipes.tasks import PackageTask
from versioning.incrementer import next_versions
from versioning.parser import substitute_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one package."""
    package: str
    status: CheckStatus
    current_version: str
    new_version: Optional[str] = None
    url: Optional[str] = None


class UpdateChecker:
    """Checks PackageTasks one at a time; safe to share between worker threads.

    Args:
        prober: URL prober used for every probe.
        reporter: Sink for result and diagnostic lines.
        config: Run configuration.
    """

    def __init__(self, prober: URLProber, reporter: ConsoleReporter,
                 config: Optional[ProbeConfig] = None):
        self.prober = prober
        self.reporter = reporter
        self.config = config or prober.config

    def control_url(self, task: PackageTask) -> str:
        """URL for a version that should never exist upstream."""
        invalid = task.current_version + self.config.invalid_version_suffix
        return substitute_version(task.source_url_template, task.current_version, invalid)

    def check(self, task: PackageTask) -> CheckResult:
        name = task.name
        version = task.current_version
        source = task.source_url_template

        candidates = next_versions(version)
        if not candidates:
            self.reporter.diagnostic(name, f"unable to parse version {version}")
            return CheckResult(name, CheckStatus.UNPARSEABLE, version)

        if not self.prober.exists(source, context=name):
            self.reporter.diagnostic(name, f"file does not exist on the server - {version} => {source}")

        for candidate in candidates:
            if self.prober.cancel_event.is_set():
                return CheckResult(name, CheckStatus.CANCELLED, version)

            url = substitute_version(source, version, candidate)
            if not self.prober.exists(url, context=name):
                continue

            control = self.control_url(task)
            if self.prober.exists(control, context=name):
                self.reporter.diagnostic(
                    name,
                    f"server responses 'file exists' for invalid version {control}, "
                    f"ignoring {url}",
                )
                return CheckResult(name, CheckStatus.SUSPICIOUS, version, candidate, url)

            self.reporter.result(name, f"new version found - {version} => {candidate}")
            return CheckResult(name, CheckStatus.NEW_VERSION, version, candidate, url)

        if is_debug_enabled(logger):
            logger.debug(
                "No newer version",
                extra=extra_context(
                    event="function_exit", component="checker", action="check",
                    outcome="up_to_date", target=name, count=len(candidates)
                )
            )
        return CheckResult(name, CheckStatus.UP_TO_DATE, version)
