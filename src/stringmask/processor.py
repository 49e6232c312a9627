"""Character buffer helpers used while building masked output."""

from __future__ import annotations

from typing import Callable, Optional

from stringmask.models.mask import ProcessingDirection


class StringProcessor:
    """Stateless placement primitives for the mask engine and its callers."""

    @staticmethod
    def place(
        buffer: str,
        character: str,
        direction: ProcessingDirection,
        transform: Optional[Callable[[str], str]] = None,
    ) -> str:
        """Append (forward) or prepend (reverse) ``character``, transformed when requested."""
        if transform is not None:
            character = transform(character)
        if direction is ProcessingDirection.REVERSE:
            return character + buffer
        return buffer + character

    @staticmethod
    def insert_at(buffer: str, character: str, index: int) -> str:
        """Insert ``character`` at ``index``, shifting the remaining characters right."""
        return buffer[:index] + character + buffer[index:]

    @staticmethod
    def normalize_to_string(value: object) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)


__all__ = ["StringProcessor"]
