"""Shared pytest fixtures for the cfgparser test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

SITES_CFG = """
[playa]
name = PlayaVista
short_name = ddpv
prefix = dd

[portland]
name = Portland
short_name = ddpd
prefix = pd

"""


@pytest.fixture
def sites_text() -> str:
    """Provide a well-formed two-section cfg document."""

    return SITES_CFG


@pytest.fixture
def write_cfg(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write text into a file under `tmp_path` and return its path."""

    def _write(text: str, name: str = "sample.cfg") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
