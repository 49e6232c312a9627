"""Directional mask scanning engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from stringmask.analyzer import PatternAnalyzer
from stringmask.metrics import MASK_SCANS
from stringmask.models.mask import MaskResult, PositionKind, ProcessingDirection
from stringmask.models.token import MaskToken, TokenRegistry
from stringmask.processor import StringProcessor
from stringmask.tokens import DEFAULT_TOKENS

logger = logging.getLogger(__name__)


@dataclass
class ScanState:
    pattern_pos: int
    value_pos: int
    budget: int
    result: str = ""
    valid: bool = True


class MaskEngine:
    """
    Pair mask positions with value characters and build the formatted result.

    Forward scans start at the left end of both mask and value; reverse scans start at the
    right end and prepend each placed character, so the output always reads left to right.
    """

    def __init__(
        self,
        pattern: str,
        direction: ProcessingDirection = ProcessingDirection.FORWARD,
        use_defaults: bool = False,
        registry: Optional[TokenRegistry] = None,
    ) -> None:
        self.pattern = pattern
        self.direction = direction
        self.use_defaults = use_defaults
        self._analyzer = PatternAnalyzer(DEFAULT_TOKENS if registry is None else registry)

    def process(self, value: str) -> MaskResult:
        if not value and self._analyzer.has_required_tokens(self.pattern):
            outcome = MaskResult(result="", valid=False)
        else:
            outcome = self._scan(value)
        MASK_SCANS.labels(direction=self.direction.name.lower(), valid=str(outcome.valid).lower()).inc()
        return outcome

    def _scan(self, value: str) -> MaskResult:
        step = self.direction.value
        reverse = self.direction is ProcessingDirection.REVERSE
        state = ScanState(
            pattern_pos=len(self.pattern) - 1 if reverse else 0,
            value_pos=len(value) - 1 if reverse else 0,
            budget=self._analyzer.optional_budget(self.pattern, value),
        )

        while 0 <= state.pattern_pos < len(self.pattern):
            if not self._step(state, value, step):
                logger.debug(
                    "Mask scan halted at position %s of %s (valid=%s)",
                    state.pattern_pos,
                    len(self.pattern),
                    state.valid,
                )
                break

        return MaskResult(result=state.result, valid=state.valid)

    def _step(self, state: ScanState, value: str, step: int) -> bool:
        """Handle the current mask position; return False when the scan halts."""

        character = self.pattern[state.pattern_pos]
        kind = self._analyzer.classify(self.pattern, state.pattern_pos)

        if kind is PositionKind.ESCAPE:
            state.pattern_pos += step
            return True

        if kind is PositionKind.LITERAL:
            if not self._analyzer.has_more_tokens(self.pattern, state.pattern_pos + step, step):
                return False
            self._place(state, character)
            state.pattern_pos += step
            return True

        token = self._analyzer.get_token(character)
        assert token is not None
        value_char = value[state.value_pos] if 0 <= state.value_pos < len(value) else ""

        if token.matches(value_char):
            if token.uses_budget:
                if state.budget <= 0:
                    return False
                state.budget -= 1
            self._place(state, value_char, token)
            state.value_pos += step
            state.pattern_pos += step
            return True

        if token.uses_budget:
            return False

        return self._fill_unmet_required(state, token, value_char, step)

    def _fill_unmet_required(self, state: ScanState, token: MaskToken, value_char: str, step: int) -> bool:
        if self.use_defaults and token.default_value is not None:
            self._place(state, token.default_value)
            state.pattern_pos += step
            return True

        state.valid = False
        if value_char:
            return False

        # Value exhausted: the token stays empty but anchored literals after it are kept.
        logger.debug("Required token at position %s left unfilled", state.pattern_pos)
        state.pattern_pos += step
        return True

    def _place(self, state: ScanState, character: str, token: Optional[MaskToken] = None) -> None:
        transform = token.transform if token is not None else None
        state.result = StringProcessor.place(state.result, character, self.direction, transform)


__all__ = ["MaskEngine", "ScanState"]
