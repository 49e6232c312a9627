"""
String masking toolkit.

The package formats and validates raw values against positional masks made of literal
characters and typed tokens, scanning left-to-right or right-to-left.
"""

from stringmask.analyzer import PatternAnalyzer
from stringmask.engine import MaskEngine
from stringmask.masker import StringMasker, apply, process, validate
from stringmask.models import (
    MaskOptions,
    MaskResult,
    MaskToken,
    PositionKind,
    ProcessingDirection,
    TokenRegistry,
)
from stringmask.processor import StringProcessor
from stringmask.tokens import DEFAULT_TOKENS, create_token_registry

__all__ = [
    "__version__",
    "DEFAULT_TOKENS",
    "MaskEngine",
    "MaskOptions",
    "MaskResult",
    "MaskToken",
    "PatternAnalyzer",
    "PositionKind",
    "ProcessingDirection",
    "StringMasker",
    "StringProcessor",
    "TokenRegistry",
    "apply",
    "create_token_registry",
    "process",
    "validate",
]

__version__ = "0.1.0"
