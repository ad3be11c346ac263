"""Shared fixtures: route trees written under ``tmp_path``."""

from collections.abc import Callable
from pathlib import Path

import pytest

type TreeWriter = Callable[[dict[str, str]], Path]


@pytest.fixture
def route_tree(tmp_path: Path) -> TreeWriter:
    """Write ``{relative path: content}`` under a fresh ``pages`` directory."""

    def write(files: dict[str, str]) -> Path:
        root = tmp_path / "pages"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return write
