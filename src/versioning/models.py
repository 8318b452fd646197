"""Data models for version tokenization."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kind of a version token."""
    VALUE = "value"
    DELIMITER = "delimiter"


@dataclass(frozen=True)
class VersionToken:
    """One run of a version string: either a value or a single delimiter."""
    kind: TokenKind
    text: str

    @property
    def is_numeric(self) -> bool:
        return self.kind is TokenKind.VALUE and self.text.isascii() and self.text.isdigit()
