"""Data models for URL probing."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of one existence probe. Never persisted."""
    exists: bool
    content_type: Optional[str] = None
    status_code: Optional[int] = None
    strategy: Optional[str] = None  # name of the rule that handled the URL
