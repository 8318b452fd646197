"""Version tokenization, increment and URL substitution."""

from .incrementer import next_versions, tokenize_version
from .parser import substitute_version, version_pattern

__all__ = ["next_versions", "tokenize_version", "substitute_version", "version_pattern"]
