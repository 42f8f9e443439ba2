"""Shared test fixtures for promptline tests."""

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def _no_user_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's PROMPTLINE_* variables out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("PROMPTLINE_"):
            monkeypatch.delenv(name)


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
