"""Canonical token catalog and registry helpers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from stringmask.models.token import MaskToken, MutableTokenRegistry, TokenRegistry

REQUIRED_DIGIT = "0"
ESCAPE_MARKER = "$"

_DIGIT = r"[0-9]"
_LETTER = r"[a-zA-Z]"

DEFAULT_TOKENS: TokenRegistry = MappingProxyType(
    {
        REQUIRED_DIGIT: MaskToken(pattern=_DIGIT, default_value="0"),
        "9": MaskToken(pattern=_DIGIT, optional=True),
        "#": MaskToken(pattern=_DIGIT, optional=True, recursive=True),
        "A": MaskToken(pattern=r"[a-zA-Z0-9]"),
        "S": MaskToken(pattern=_LETTER),
        "U": MaskToken(pattern=_LETTER, transform=str.upper),
        "L": MaskToken(pattern=_LETTER, transform=str.lower),
        ESCAPE_MARKER: MaskToken(escape=True),
    }
)


def create_token_registry(custom_tokens: Optional[Mapping[str, MaskToken]] = None) -> MutableTokenRegistry:
    """Return a new registry holding the default tokens overridden by ``custom_tokens``."""

    registry: MutableTokenRegistry = dict(DEFAULT_TOKENS)
    if custom_tokens:
        for character, token in custom_tokens.items():
            if len(character) != 1:
                raise ValueError(f"Token keys must be single characters, got {character!r}")
            registry[character] = token
    return registry


__all__ = ["DEFAULT_TOKENS", "ESCAPE_MARKER", "REQUIRED_DIGIT", "create_token_registry"]
