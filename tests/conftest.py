from pathlib import Path
from typing import Callable

import pytest

from posture_validator.utils.logger import SilentLogger


@pytest.fixture
def silent_logger() -> SilentLogger:
    return SilentLogger()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write {relative_path: content} under tmp_path and return the root."""

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
