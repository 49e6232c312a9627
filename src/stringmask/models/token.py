"""Token descriptor models."""

from __future__ import annotations

import re
from typing import Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MaskToken(BaseModel):
    """Describe how a single mask character is filled from the input value."""

    pattern: Optional[re.Pattern[str]] = Field(
        default=None,
        description="Expression a value character must satisfy to fill the token.",
    )
    optional: bool = Field(
        default=False,
        description="Token may stay unfilled, drawing from the optional digit budget.",
    )
    recursive: bool = Field(
        default=False,
        description="Token belongs to the self-extending digit family.",
    )
    default_value: Optional[str] = Field(
        default=None,
        description="Character placed when the token cannot be filled and defaults are enabled.",
    )
    escape: bool = Field(
        default=False,
        description="Character is the escape marker rather than a fillable token.",
    )
    transform: Optional[Callable[[str], str]] = Field(
        default=None,
        description="Function applied to a matched character before placement.",
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_role(self) -> "MaskToken":
        if self.escape and self.pattern is not None:
            raise ValueError("escape tokens cannot define a match pattern")
        if not self.escape and self.pattern is None:
            raise ValueError("fillable tokens require a match pattern")
        return self

    @property
    def uses_budget(self) -> bool:
        """Optional and recursive tokens share the optional digit budget."""
        return self.optional or self.recursive

    def matches(self, character: str) -> bool:
        """Return True when ``character`` satisfies the token pattern."""
        if not character or self.pattern is None:
            return False
        return self.pattern.search(character) is not None


TokenRegistry = Mapping[str, MaskToken]
MutableTokenRegistry = Dict[str, MaskToken]
