"""URL existence prober with host-specific heuristics."""
from __future__ import annotations

import logging
import threading
from typing import List, Optional
from urllib.parse import urlsplit

from cli_config import ProbeConfig
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from . import strategies
from .models import ProbeOutcome
from .rules import ProbeRule, build_rules, normalize_host

logger = logging.getLogger(__name__)


class URLProber:
    """Decides whether a download URL exists without fetching its body.

    Args:
        config: Probe tunables (timeouts, host lists, status handling).
        rules: Ordered rules; defaults to ``build_rules(config)``.
        cancel_event: Once set, every probe answers "does not exist" without
            touching the network.
    """

    def __init__(
        self,
        config: Optional[ProbeConfig] = None,
        rules: Optional[List[ProbeRule]] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.config = config or ProbeConfig()
        self.rules = rules if rules is not None else build_rules(self.config)
        self.cancel_event = cancel_event or threading.Event()

    def select_rule(self, url: str) -> Optional[ProbeRule]:
        """Return the first rule matching the URL, or None."""
        try:
            parts = urlsplit(url)
            # Raises on a port that is not a valid number
            parts.port
        except ValueError:
            return None
        if not parts.hostname:
            return None
        scheme = parts.scheme.lower()
        host = normalize_host(parts.hostname)
        for rule in self.rules:
            if rule.matches(scheme, host):
                return rule
        return None

    def probe(self, url: str, context: str = "") -> ProbeOutcome:
        """Probe one URL. Never raises."""
        if self.cancel_event.is_set():
            return ProbeOutcome(False, strategy="cancelled")

        rule = self.select_rule(url)
        if rule is None:
            return strategies.unsupported(url, context=context, config=self.config)

        with Timer() as t:
            outcome = rule.strategy(url, context=context, config=self.config)

        if is_debug_enabled(logger):
            logger.debug(
                "Probe finished",
                extra=extra_context(
                    event="probe", component="prober", action=rule.name,
                    outcome="exists" if outcome.exists else "missing",
                    status_code=outcome.status_code, duration_ms=t.duration_ms(),
                    target=safe_url(url), context=context
                )
            )
        return outcome

    def exists(self, url: str, context: str = "") -> bool:
        return self.probe(url, context).exists
