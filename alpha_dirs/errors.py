"""
Exceptions raised by alpha-dirs.

Everything derives from AlphaDirsError so the CLI can report any failure
with a single handler.
"""


class AlphaDirsError(Exception):
    """Base error for the project."""


class ConfigurationError(AlphaDirsError):
    """Options that contradict each other (e.g. --copy with --link)."""


class InvalidSource(AlphaDirsError):
    """A source path is missing, unreadable, or not a file/directory."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = path


class PlacementError(AlphaDirsError):
    """A file could not be placed. Always aborts the run."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result


class DirectoryCreateError(PlacementError):
    """A bucket directory (or a missing parent) could not be created."""


class TargetNotWritable(PlacementError):
    """A bucket path exists but is not a directory the user can write to."""
