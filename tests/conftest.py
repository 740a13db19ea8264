from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory so no real config is read.
3. Shared filesystem fixtures used by builder, renderer and CLI tests.
"""

import logging
import os
import sys
from logging.handlers import QueueListener
from pathlib import Path
from typing import Callable, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user data directory at a temporary location."""
    home = tmp_path / "xtree_home"
    monkeypatch.setenv("XTREE_HOME", str(home))
    return home


@pytest.fixture
def reset_logging():
    """Detach xtree logging handlers and listener before and after a test."""
    from xtree.infra.logging import (
        _CONFIGURED_FLAG_ATTR,
        _HANDLER_TAG_ATTR,
        _QUEUE_LISTENER_ATTR,
    )

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and listener._thread is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, Iterable[str]], Path]:
    """Return a factory creating a directory hierarchy below tmp_path."""
    def _make(name: str, rel_paths: Iterable[str]) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel in rel_paths:
            (root / rel).mkdir(parents=True, exist_ok=True)
        return root
    return _make


@pytest.fixture
def sample_tree(make_tree: Callable[[str, Iterable[str]], Path]) -> Path:
    """
    Create the reference fixture tree.

    Structure:
    /root
      /A
        /B
        /C
      /D
    """
    return make_tree("root", ["A/B", "A/C", "D"])


@pytest.fixture
def nested_tree(make_tree: Callable[[str, Iterable[str]], Path]) -> Path:
    """
    Create a deeper tree with files mixed in.

    Structure:
    /project
      /build
        core.txt
      /docs
        /Core
      /src
        /app_core
          /core_utils
        main.py
      README.md
    """
    root = make_tree("project", ["src/app_core/core_utils", "docs/Core", "build"])
    (root / "src" / "main.py").write_text("print('hi')", encoding="utf-8")
    (root / "build" / "core.txt").write_text("not a directory", encoding="utf-8")
    (root / "README.md").write_text("# Project", encoding="utf-8")
    return root
