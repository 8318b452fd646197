"""Tests for locating and substituting versions inside URLs."""

from versioning.parser import (
    contains_version,
    is_probeable_url,
    strip_rename_prefix,
    substitute_version,
    version_pattern,
)


class TestVersionPattern:
    """Tests for version_pattern/contains_version."""

    def test_matches_literal_version(self):
        assert contains_version("https://example.com/foo-1.2.3.tar.gz", "1.2.3")

    def test_delimiters_are_interchangeable(self):
        assert contains_version("https://example.com/foo-1_2_3.tar.gz", "1.2.3")

    def test_requires_word_boundary_at_end(self):
        assert not contains_version("https://example.com/foo-1.2.34.tar.gz", "1.2.3")

    def test_not_preceded_by_digit(self):
        assert not contains_version("https://example.com/foo-11.2.tar.gz", "1.2")

    def test_allows_letter_prefix(self):
        assert contains_version("https://example.com/v2.0.tar.gz", "2.0")

    def test_escapes_regex_characters(self):
        pattern = version_pattern("1.0+git")
        assert pattern.search("https://x.org/p-1.0+git.tar.gz") is not None
        assert not contains_version("https://x.org/p-1.00git.tar.gz", "1.0+git")


class TestSubstituteVersion:
    """Tests for substitute_version."""

    def test_replaces_every_occurrence(self):
        url = "https://example.com/foo/2.0/foo-2.0.tar.gz"
        assert substitute_version(url, "2.0", "2.1") == "https://example.com/foo/2.1/foo-2.1.tar.gz"

    def test_replacement_is_literal(self):
        url = "https://example.com/foo-2.0.tar.gz"
        assert substitute_version(url, "2.0", r"2\1") == r"https://example.com/foo-2\1.tar.gz"

    def test_other_delimiter_occurrence_is_replaced_with_new_version(self):
        url = "https://example.com/foo-1_2/foo-1.2.tgz"
        assert substitute_version(url, "1.2", "1.3") == "https://example.com/foo-1.3/foo-1.3.tgz"

    def test_no_match_leaves_url(self):
        url = "https://example.com/foo.tar.gz"
        assert substitute_version(url, "2.0", "2.1") == url


class TestSourceHelpers:
    """Tests for source entry helpers."""

    def test_strip_rename_prefix(self):
        assert strip_rename_prefix("foo-1.0.tar.gz::https://x.org/v1.0.tar.gz") == "https://x.org/v1.0.tar.gz"

    def test_strip_rename_prefix_without_prefix(self):
        assert strip_rename_prefix("https://x.org/a.tar.gz") == "https://x.org/a.tar.gz"

    def test_probeable_schemes(self):
        assert is_probeable_url("http://x.org/a")
        assert is_probeable_url("https://x.org/a")
        assert is_probeable_url("ftp://x.org/a")
        assert not is_probeable_url("git+https://x.org/a.git")
        assert not is_probeable_url("foo.patch")
