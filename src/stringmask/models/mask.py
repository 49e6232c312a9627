"""Options and result models for mask processing."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProcessingDirection(int, Enum):
    """Scan direction expressed as the signed cursor step."""

    FORWARD = 1
    REVERSE = -1


class PositionKind(str, Enum):
    """Role a mask position plays during a scan."""

    LITERAL = "literal"
    ESCAPE = "escape"
    TOKEN = "token"


class MaskOptions(BaseModel):
    """Caller options controlling a scan."""

    reverse: bool = Field(default=False, description="Process the value right to left.")
    use_defaults: Optional[bool] = Field(
        default=None,
        description="Backfill unmet required tokens with their default value (follows reverse when unset).",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def direction(self) -> ProcessingDirection:
        return ProcessingDirection.REVERSE if self.reverse else ProcessingDirection.FORWARD

    @property
    def resolved_use_defaults(self) -> bool:
        if self.use_defaults is None:
            return self.reverse
        return self.use_defaults


class MaskResult(BaseModel):
    """Formatted value together with its validity flag."""

    result: str
    valid: bool

    model_config = ConfigDict(frozen=True)
