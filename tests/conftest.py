"""Shared pytest fixtures for the stringmask test suite."""

from __future__ import annotations

from typing import Dict

import pytest

from stringmask.config import get_settings
from stringmask.models import MaskToken


@pytest.fixture()
def registry() -> Dict[str, MaskToken]:
    """Provide a small registry mirroring the digit, letter and escape tokens."""

    return {
        "0": MaskToken(pattern=r"[0-9]", default_value="0"),
        "9": MaskToken(pattern=r"[0-9]", optional=True),
        "#": MaskToken(pattern=r"[0-9]", optional=True, recursive=True),
        "A": MaskToken(pattern=r"[a-zA-Z0-9]"),
        "S": MaskToken(pattern=r"[a-zA-Z]"),
        "$": MaskToken(escape=True),
    }


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Ensure each test reads settings from a clean environment."""

    for key in (
        "STRINGMASK_REVERSE",
        "STRINGMASK_USE_DEFAULTS",
        "STRINGMASK_LOG_LEVEL",
        "STRINGMASK_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
