"""Pydantic models defining the masking data contracts."""

from stringmask.models.mask import (
    MaskOptions,
    MaskResult,
    PositionKind,
    ProcessingDirection,
)
from stringmask.models.token import MaskToken, TokenRegistry

__all__ = [
    "MaskOptions",
    "MaskResult",
    "PositionKind",
    "ProcessingDirection",
    "MaskToken",
    "TokenRegistry",
]
