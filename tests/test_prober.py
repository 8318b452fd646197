"""Tests for URLProber rule selection and cancellation."""

import threading
from unittest.mock import MagicMock, patch

import pytest

from cli_config import ProbeConfig
from probe.models import ProbeOutcome
from probe.prober import URLProber
from probe.rules import ProbeRule, http_host_in, http_host_suffix, normalize_host, scheme_in


class TestRuleSelection:
    """Tests for the default ordered rule set."""

    def setup_method(self):
        self.prober = URLProber(ProbeConfig())

    @pytest.mark.parametrize("url, rule", [
        ("https://launchpad.net/foo/1.0/+download/foo-1.0.tar.gz", "transport_only_hosts"),
        ("http://www.ladspa.org/download/ladspa_sdk_1.13.tgz", "transport_only_hosts"),
        ("https://download.videolan.org/pub/vlc/3.0.0/vlc-3.0.0.tar.xz", "transport_only_hosts"),
        ("https://foo.googlecode.com/files/foo-1.0.tgz", "conditional_get_domains"),
        ("https://example.com/foo-1.0.tar.gz", "http"),
        ("http://example.com/foo-1.0.tar.gz", "http"),
        ("ftp://ftp.gnu.org/gnu/foo-1.0.tar.gz", "ftp"),
    ])
    def test_first_matching_rule(self, url, rule):
        assert self.prober.select_rule(url).name == rule

    def test_bare_googlecode_domain_is_generic(self):
        assert self.prober.select_rule("https://googlecode.com/foo-1.0.tgz").name == "http"

    def test_ftp_on_special_host_uses_ftp(self):
        assert self.prober.select_rule("ftp://launchpad.net/foo-1.0.tgz").name == "ftp"

    def test_unknown_scheme(self):
        assert self.prober.select_rule("rsync://example.com/foo-1.0.tgz") is None
        assert self.prober.exists("rsync://example.com/foo-1.0.tgz") is False

    def test_no_host(self):
        assert self.prober.exists("https:///foo-1.0.tgz") is False

    def test_configured_hosts(self):
        prober = URLProber(ProbeConfig(transport_only_hosts=["files.example.org"]))
        assert prober.select_rule("https://www.files.example.org/a.tgz").name == "transport_only_hosts"
        assert prober.select_rule("https://launchpad.net/a.tgz").name == "http"


class TestMatchers:
    """Tests for matcher helpers."""

    def test_normalize_host(self):
        assert normalize_host("WWW.Example.COM") == "example.com"
        assert normalize_host("wwwexample.com") == "wwwexample.com"

    def test_host_in_requires_http(self):
        matcher = http_host_in(["launchpad.net"])
        assert matcher("https", "launchpad.net")
        assert not matcher("ftp", "launchpad.net")

    def test_host_suffix(self):
        matcher = http_host_suffix(["googlecode.com"])
        assert matcher("http", "proj.googlecode.com")
        assert not matcher("http", "googlecode.com")
        assert not matcher("http", "notgooglecode.com")

    def test_empty_suffix_list_matches_nothing(self):
        assert not http_host_suffix([])("http", "example.com")


class TestProbe:
    """Tests for probe/exists dispatch."""

    def test_dispatches_to_strategy(self):
        strategy = MagicMock(return_value=ProbeOutcome(True, strategy="fake"))
        prober = URLProber(ProbeConfig(), rules=[ProbeRule("all", scheme_in("https"), strategy)])
        assert prober.exists("https://example.com/a", context="pkg") is True
        strategy.assert_called_once_with("https://example.com/a", context="pkg", config=prober.config)

    def test_cancelled_prober_skips_network(self):
        strategy = MagicMock(return_value=ProbeOutcome(True))
        event = threading.Event()
        event.set()
        prober = URLProber(ProbeConfig(), rules=[ProbeRule("all", scheme_in("https"), strategy)],
                           cancel_event=event)
        outcome = prober.probe("https://example.com/a")
        assert outcome.exists is False
        assert outcome.strategy == "cancelled"
        strategy.assert_not_called()

    @patch("probe.strategies.safe_head")
    def test_transport_error_is_false(self, mock_head):
        mock_head.return_value = None
        assert URLProber().exists("https://example.com/foo-1.0.tar.gz") is False

    @pytest.mark.parametrize("url", [
        "http://example.com:abc/foo-1.0.tar.gz",
        "https://example.com:99999/foo-1.0.tar.gz",
        "ftp://ftp.example.org:port/pub/foo-1.0.tar.gz",
    ])
    @patch("probe.strategies.ftp_exists")
    @patch("probe.strategies.safe_head")
    def test_malformed_port_is_false(self, mock_head, mock_ftp, url):
        prober = URLProber()
        assert prober.select_rule(url) is None
        assert prober.exists(url, context="foo") is False
        mock_head.assert_not_called()
        mock_ftp.assert_not_called()
