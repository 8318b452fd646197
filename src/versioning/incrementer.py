"""Generate plausible "next" versions of a dotted/delimited version string."""

import logging
import re
from typing import List

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from .models import TokenKind, VersionToken

logger = logging.getLogger(__name__)

_DELIMITER_SPLIT = re.compile("([" + re.escape("".join(Constants.VERSION_DELIMITERS)) + "])")


def tokenize_version(version: str) -> List[VersionToken]:
    """Split a version into alternating value and delimiter tokens.

    The result always starts and ends with a value token; value tokens may be
    empty when delimiters are adjacent or at either end.
    """
    tokens = []
    for index, part in enumerate(_DELIMITER_SPLIT.split(version)):
        kind = TokenKind.DELIMITER if index % 2 else TokenKind.VALUE
        tokens.append(VersionToken(kind, part))
    return tokens


def next_versions(version: str) -> List[str]:
    """Return candidate next versions, least significant bump first.

    Each step increments one numeric position and resets every position to
    its right to zero, e.g. ``1.2.3`` gives ``1.2.4``, ``1.3.0``, ``2.0.0``.
    Walking stops at the first non-numeric position; candidates produced
    before that point are kept.
    """
    tokens = tokenize_version(version)
    result: List[str] = []
    reminder: List[str] = []

    while tokens:
        value = tokens.pop()
        if not value.is_numeric:
            if is_debug_enabled(logger):
                logger.debug(
                    "Version position is not numeric",
                    extra=extra_context(
                        event="parse", component="incrementer", action="next_versions",
                        outcome="non_numeric", target=version, count=len(result)
                    )
                )
            break

        try:
            bumped = int(value.text) + 1
        except ValueError:
            # Digit strings past the interpreter's int conversion limit
            logger.debug("Version position too long to increment in %s", version)
            break

        prefix = "".join(token.text for token in tokens)
        result.append(prefix + str(bumped) + "".join(reminder))

        if not tokens:
            break

        reminder.insert(0, "0")
        delimiter = tokens.pop()
        if delimiter.kind is not TokenKind.DELIMITER or delimiter.text not in Constants.VERSION_DELIMITERS:
            break
        reminder.insert(0, delimiter.text)

    return result
