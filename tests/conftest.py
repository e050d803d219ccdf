"""
Pytest fixtures for alpha-dirs tests.

Provides reusable test fixtures for creating temporary source trees,
a destination directory, and output capture.
"""

import pytest
from pathlib import Path

from alpha_dirs.config import Config


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration with a visible fallback bucket."""
    return Config(fallback_key="#")


@pytest.fixture
def dest_dir(temp_dir: Path) -> Path:
    """Destination root (not created; placement creates it)."""
    return temp_dir / "dest"


@pytest.fixture
def source_dir(temp_dir: Path) -> Path:
    """
    Create a source directory with files and one subdirectory.

    Layout:
        src/
        ├── Amazing.txt
        ├── baseball.jpg
        ├── The Great Gatsby.txt
        └── sub/
            └── cows.jpg
    """
    src = temp_dir / "src"
    src.mkdir()
    (src / "Amazing.txt").write_text("amazing")
    (src / "baseball.jpg").write_text("baseball")
    (src / "The Great Gatsby.txt").write_text("gatsby")
    sub = src / "sub"
    sub.mkdir()
    (sub / "cows.jpg").write_text("cows")
    return src


@pytest.fixture
def duplicate_sources(temp_dir: Path) -> list:
    """Two source directories that both contain report.txt."""
    sources = []
    for name in ("first", "second"):
        d = temp_dir / name
        d.mkdir()
        (d / "report.txt").write_text(f"report from {name}")
        sources.append(d)
    return sources


@pytest.fixture
def capture_output() -> list:
    """Create a list to capture output from operations."""
    return []


@pytest.fixture
def output_callback(capture_output: list):
    """Create an output callback that captures messages."""
    def callback(message: str) -> None:
        capture_output.append(message)
    return callback


@pytest.fixture
def snapshot():
    """Return a function listing everything under a directory (sorted, relative)."""
    def take(root: Path) -> list:
        if not root.exists():
            return []
        return sorted(str(p.relative_to(root)) for p in root.rglob("*"))
    return take
