"""High-level masking API."""

from __future__ import annotations

from typing import Optional

from stringmask.engine import MaskEngine
from stringmask.models.mask import MaskOptions, MaskResult
from stringmask.models.token import TokenRegistry
from stringmask.processor import StringProcessor
from stringmask.tokens import DEFAULT_TOKENS


class StringMasker:
    """Apply a fixed mask, options, and token registry to arbitrary values."""

    def __init__(
        self,
        pattern: str,
        options: Optional[MaskOptions] = None,
        registry: Optional[TokenRegistry] = None,
    ) -> None:
        self.pattern = pattern
        self.options = options or MaskOptions()
        self.registry = registry if registry is not None else DEFAULT_TOKENS

    def process(self, value: object) -> MaskResult:
        """Return the formatted value and whether it satisfies the mask."""

        engine = MaskEngine(
            self.pattern,
            direction=self.options.direction,
            use_defaults=self.options.resolved_use_defaults,
            registry=self.registry,
        )
        return engine.process(StringProcessor.normalize_to_string(value) or "")

    def apply(self, value: object) -> str:
        return self.process(value).result

    def validate(self, value: object) -> bool:
        return self.process(value).valid


def process(
    value: object,
    pattern: str,
    options: Optional[MaskOptions] = None,
    registry: Optional[TokenRegistry] = None,
) -> MaskResult:
    """One-shot variant of :meth:`StringMasker.process`."""

    return StringMasker(pattern, options, registry).process(value)


def apply(
    value: object,
    pattern: str,
    options: Optional[MaskOptions] = None,
    registry: Optional[TokenRegistry] = None,
) -> str:
    return StringMasker(pattern, options, registry).apply(value)


def validate(
    value: object,
    pattern: str,
    options: Optional[MaskOptions] = None,
    registry: Optional[TokenRegistry] = None,
) -> bool:
    return StringMasker(pattern, options, registry).validate(value)


__all__ = ["StringMasker", "apply", "process", "validate"]
