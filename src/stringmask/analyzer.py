"""Read-only queries over mask patterns."""

from __future__ import annotations

import re
from typing import Optional

from stringmask.models.mask import PositionKind
from stringmask.models.token import MaskToken, TokenRegistry
from stringmask.tokens import REQUIRED_DIGIT

_VALUE_DIGIT = re.compile(r"[0-9]")


class PatternAnalyzer:
    """Answer escape, lookahead, and budget questions about a mask for a given registry."""

    def __init__(self, registry: TokenRegistry) -> None:
        self._registry = registry

    def get_token(self, character: str) -> Optional[MaskToken]:
        """Return the token registered for ``character``, or None for literals."""
        return self._registry.get(character)

    def is_escaped(self, pattern: str, position: int) -> bool:
        """
        Return True when the character at ``position`` is escaped.

        Escape markers cancel in pairs: only an odd run of consecutive markers directly
        before the position escapes it.
        """
        count = 0
        cursor = position - 1
        while cursor >= 0:
            token = self.get_token(pattern[cursor])
            if token is None or not token.escape:
                break
            count += 1
            cursor -= 1
        return count % 2 == 1

    def classify(self, pattern: str, position: int) -> PositionKind:
        """Resolve the role of a mask position at scan time."""
        if self.is_escaped(pattern, position):
            return PositionKind.LITERAL
        token = self.get_token(pattern[position])
        if token is None:
            return PositionKind.LITERAL
        if token.escape:
            return PositionKind.ESCAPE
        return PositionKind.TOKEN

    def has_more_tokens(self, pattern: str, position: int, step: int) -> bool:
        """Return True if a fillable token exists from ``position`` onward in the ``step`` direction."""
        while 0 <= position < len(pattern):
            token = self.get_token(pattern[position])
            if token is not None and not token.escape:
                return True
            position += step
        return False

    def has_more_recursive_tokens(self, pattern: str, position: int, step: int) -> bool:
        """Return True if a recursive token exists from ``position`` onward in the ``step`` direction."""
        while 0 <= position < len(pattern):
            token = self.get_token(pattern[position])
            if token is not None and token.recursive:
                return True
            position += step
        return False

    def has_required_tokens(self, pattern: str) -> bool:
        """Return True if any fillable position must be filled rather than drawing from the budget."""
        for position, character in enumerate(pattern):
            if self.classify(pattern, position) is not PositionKind.TOKEN:
                continue
            token = self.get_token(character)
            if token is not None and not token.uses_budget:
                return True
        return False

    def optional_budget(self, pattern: str, value: str) -> int:
        """
        Number of value digits available to optional and recursive tokens.

        Counts the required digit tokens in the mask against the decimal digits in the value.
        The calculation is digit-specific and does not consult token patterns.
        """
        required = pattern.count(REQUIRED_DIGIT)
        available = len(_VALUE_DIGIT.findall(value))
        return max(0, available - required)


__all__ = ["PatternAnalyzer"]
