"""
Small helpers shared by the collector, the placement engine and the CLI.

These functions are stateless and have no side effects (except reading
filesystem metadata).
"""

import os
from pathlib import Path
from typing import Callable


# Type alias for output callback
OutputCallback = Callable[[str], None]


def default_output(message: str) -> None:
    """Default output callback that prints to stdout."""
    print(message)


def is_within(path: Path, parent: Path) -> bool:
    """
    Check if a path is equal to or located beneath another path.

    Both paths are compared as given, so callers should resolve them first.

    Args:
        path: Path to test
        parent: Candidate ancestor

    Returns:
        True if path is parent or one of its descendants
    """
    try:
        path.relative_to(parent)
    except ValueError:
        return False
    return True


def is_readable(path: Path) -> bool:
    """Check if the current user may read the path."""
    return os.access(path, os.R_OK)


def is_writable_dir(path: Path) -> bool:
    """Check if the path is a directory the current user can add entries to."""
    return path.is_dir() and os.access(path, os.W_OK | os.X_OK)


def entry_exists(path: Path) -> bool:
    """
    Check if anything occupies a path, including a dangling symlink.

    Path.exists() follows symlinks, so a link whose target has gone away
    would otherwise look like a free slot.
    """
    return path.is_symlink() or path.exists()
