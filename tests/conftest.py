"""Shared pytest fixtures for intcalc tests."""

import pytest

from intcalc.core.environment import MAX_DEPTH_ENV_VAR


@pytest.fixture(autouse=True)
def _isolate_max_depth(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's INTCALC_MAX_DEPTH from leaking into tests."""
    monkeypatch.delenv(MAX_DEPTH_ENV_VAR, raising=False)
