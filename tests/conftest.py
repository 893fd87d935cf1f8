"""Shared fixtures for the fls test suite."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture()
def listing_root(tmp_path: Path) -> Path:
    """Root with ``a.txt`` (0640, 10 bytes), ``sub/`` and hidden ``.cfg``."""
    root = tmp_path / "root"
    root.mkdir()
    a = root / "a.txt"
    a.write_bytes(b"0123456789")
    os.chmod(a, 0o640)
    sub = root / "sub"
    sub.mkdir()
    os.chmod(sub, 0o755)
    (root / ".cfg").write_text("x=1\n")
    return root


@pytest.fixture(autouse=True)
def _reset_fls_logger() -> Generator[None, None, None]:
    """Undo handlers installed by ``--verbose`` between tests."""
    logger = logging.getLogger("fls")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
