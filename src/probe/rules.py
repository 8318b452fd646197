"""Ordered host/scheme rules mapping a URL to a probe strategy.

The first rule whose matcher accepts the URL decides which strategy runs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List

from cli_config import ProbeConfig
from . import strategies
from .models import ProbeOutcome

Matcher = Callable[[str, str], bool]  # (scheme, host without leading www.)
Strategy = Callable[..., ProbeOutcome]

_HTTP_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class ProbeRule:
    """A named matcher -> strategy pair."""
    name: str
    matches: Matcher
    strategy: Strategy


def normalize_host(host: str) -> str:
    host = host.lower()
    if host.startswith("www."):
        host = host[4:]
    return host


def http_host_in(hosts: Iterable[str]) -> Matcher:
    wanted = {normalize_host(h) for h in hosts}
    return lambda scheme, host: scheme in _HTTP_SCHEMES and host in wanted


def http_host_suffix(domains: Iterable[str]) -> Matcher:
    """Match strict subdomains, e.g. ``foo.googlecode.com`` for ``googlecode.com``."""
    suffixes = tuple("." + normalize_host(d).lstrip(".") for d in domains)
    return lambda scheme, host: scheme in _HTTP_SCHEMES and bool(suffixes) and host.endswith(suffixes)


def scheme_in(*schemes: str) -> Matcher:
    return lambda scheme, host: scheme in schemes


def build_rules(config: ProbeConfig) -> List[ProbeRule]:
    """Default rule set, with host lists taken from the configuration."""
    return [
        ProbeRule("transport_only_hosts", http_host_in(config.transport_only_hosts),
                  strategies.transport_head),
        ProbeRule("conditional_get_domains", http_host_suffix(config.conditional_get_domains),
                  strategies.conditional_get),
        ProbeRule("http", scheme_in(*_HTTP_SCHEMES), strategies.archive_head),
        ProbeRule("ftp", scheme_in("ftp"), strategies.ftp_transport),
    ]
