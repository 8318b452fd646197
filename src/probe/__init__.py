"""URL existence probing."""

from .content_type import is_archive_type
from .models import ProbeOutcome
from .prober import URLProber
from .rules import ProbeRule, build_rules

__all__ = ["is_archive_type", "ProbeOutcome", "URLProber", "ProbeRule", "build_rules"]
