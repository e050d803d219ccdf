"""
Source collection: turn the user's source arguments into candidate files.

Every source is validated before any of them is expanded, so a bad argument
stops the run before anything has been touched. Expansion is read-only.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import InvalidSource
from .utils import OutputCallback, default_output, is_readable, is_within

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class SourceSpec:
    """A validated source argument."""
    path: Path
    recurse: bool = False

    @property
    def is_dir(self) -> bool:
        return self.path.is_dir()


def validate_source(path: PathLike, recurse: bool = False) -> SourceSpec:
    """
    Check that a source exists, is readable, and is a file or directory.

    Args:
        path: Source path as given by the user
        recurse: Whether directory sources should be walked recursively

    Returns:
        SourceSpec holding the canonical path

    Raises:
        InvalidSource: If the path cannot be used as a source
    """
    logger.debug("validating '%s'", path)
    candidate = Path(path).expanduser()

    if not candidate.exists():
        raise InvalidSource(path, f"Source does not exist: {path}")
    if not is_readable(candidate):
        raise InvalidSource(path, f"Source is not readable: {path}")
    if not (candidate.is_file() or candidate.is_dir()):
        raise InvalidSource(path, f"Source is not a regular file or directory: {path}")

    return SourceSpec(path=candidate.resolve(), recurse=recurse)


def validate_sources(
    paths: Iterable[PathLike],
    recurse: bool = False,
    destination: Optional[PathLike] = None,
) -> List[SourceSpec]:
    """
    Validate every source argument, in order.

    Args:
        paths: Source paths as given by the user
        recurse: Whether directory sources should be walked recursively
        destination: Destination root; it may not itself be a source

    Returns:
        List of SourceSpec in argument order

    Raises:
        InvalidSource: On the first source that fails validation
    """
    dest = _resolve_destination(destination)
    specs = []
    for path in paths:
        spec = validate_source(path, recurse=recurse)
        if dest is not None and spec.path == dest:
            raise InvalidSource(path, f"Destination directory cannot be used as a source: {path}")
        specs.append(spec)
    return specs


def iterate_source(spec: SourceSpec, exclude: Optional[Path] = None) -> List[Path]:
    """
    List the regular files a single source contributes.

    A file source contributes itself. A directory source contributes its
    direct child files, or with recursion every file beneath it.
    Directories and special files are skipped, and a recursive walk never
    descends into `exclude`.
    Entries are listed in name order.

    Args:
        spec: Validated source
        exclude: Resolved directory the walk must not enter

    Returns:
        Canonical paths of the files found

    Raises:
        InvalidSource: If a directory in the source cannot be listed
    """
    if spec.path.is_file():
        return [spec.path]

    if spec.recurse:
        found = []
        for dirpath, dirnames, filenames in os.walk(spec.path, onerror=_unlistable):
            current = Path(dirpath)
            if exclude is not None:
                dirnames[:] = [d for d in dirnames if current / d != exclude]
            dirnames.sort()
            for name in sorted(filenames):
                entry = current / name
                if entry.is_file():
                    found.append(entry.resolve())
        return found

    try:
        entries = sorted(spec.path.iterdir())
    except OSError as e:
        _unlistable(e)
    return [entry.resolve() for entry in entries if entry.is_file()]


def _unlistable(error: OSError) -> None:
    """Raise InvalidSource for a directory that cannot be listed."""
    raise InvalidSource(
        error.filename, f"Unable to list directory {error.filename}: {error.strerror}"
    ) from error


def collect_candidates(
    specs: Iterable[SourceSpec],
    destination: Optional[PathLike] = None,
    output: OutputCallback = default_output,
) -> List[Path]:
    """
    Expand validated sources into one ordered list of candidate files.

    Args:
        specs: Validated sources, in argument order
        destination: Destination root, excluded from the walk
        output: Callback for output messages

    Returns:
        Candidate file paths, in argument order then listing order
    """
    dest = _resolve_destination(destination)
    candidates: List[Path] = []
    source_count = 0
    for spec in specs:
        found = iterate_source(spec, exclude=dest)
        logger.debug("%s: %d file(s)", spec.path, len(found))
        candidates.extend(found)
        source_count += 1

    output(f"Found {len(candidates)} files in {source_count} source(s)")
    return candidates


def collect_sources(
    paths: Iterable[PathLike],
    recurse: bool = False,
    destination: Optional[PathLike] = None,
    output: OutputCallback = default_output,
) -> List[Path]:
    """
    Validate all sources, then expand them into candidate files.

    Raises:
        InvalidSource: If any source is invalid (nothing is expanded)
    """
    specs = validate_sources(paths, recurse=recurse, destination=destination)
    return collect_candidates(specs, destination=destination, output=output)


def destination_within(destination: PathLike, specs: Iterable[SourceSpec]) -> List[SourceSpec]:
    """
    Find recursive directory sources that contain the destination.

    Such a run walks over the destination tree; its contents are skipped,
    but the user should know the trees overlap.
    """
    dest = _resolve_destination(destination)
    return [
        spec for spec in specs
        if spec.recurse and spec.is_dir and spec.path != dest and is_within(dest, spec.path)
    ]


def _resolve_destination(destination: Optional[PathLike]) -> Optional[Path]:
    if destination is None:
        return None
    return Path(destination).expanduser().resolve()
