"""
Placement engine: put each candidate file into its bucket directory.

These functions perform the actual file system operations (mkdir, move,
copy, symlink). They use a callback pattern for output to separate concerns
from the CLI. A duplicate name is skipped; every other failure aborts the run.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Set

from .config import Config, DEFAULT_CONFIG, PlacementMode
from .errors import DirectoryCreateError, PlacementError, TargetNotWritable
from .normalize import BucketAssignment
from .utils import OutputCallback, default_output, entry_exists, is_writable_dir

logger = logging.getLogger(__name__)

# Verb shown for each mode: (dry run, done)
_MODE_VERBS = {
    PlacementMode.MOVE: ("WOULD MOVE", "MOVED"),
    PlacementMode.COPY: ("WOULD COPY", "COPIED"),
    PlacementMode.LINK: ("WOULD LINK", "LINKED"),
}


class PlacementStatus(Enum):
    PLACED = "placed"
    SKIPPED_DUPLICATE = "skipped_duplicate"
    FAILED = "failed"


@dataclass
class PlacementResult:
    """Outcome of placing one file."""
    source: Path
    target: Path
    status: PlacementStatus
    reason: str = ""
    created_dir: bool = False


@dataclass
class PlacementSummary:
    """Results of a placement run with statistics."""
    results: List[PlacementResult] = field(default_factory=list)
    created_dirs: List[Path] = field(default_factory=list)
    actions: List[str] = field(default_factory=list)

    @property
    def placed_count(self) -> int:
        return sum(1 for r in self.results if r.status is PlacementStatus.PLACED)

    @property
    def skipped_count(self) -> int:
        return sum(1 for r in self.results if r.status is PlacementStatus.SKIPPED_DUPLICATE)


def ensure_bucket_dir(
    target_dir: Path,
    dry_run: bool = False,
    planned: Optional[Set[Path]] = None,
) -> bool:
    """
    Make sure a bucket directory exists and can receive files.

    The filesystem is checked on every call; an earlier answer is never
    reused. In a dry run nothing is created and `planned` remembers which
    directories would have been.

    Args:
        target_dir: Bucket directory (DEST_DIR/<key>)
        dry_run: If True, do not create anything
        planned: Directories a dry run has already "created"

    Returns:
        True if the directory was (or would be) created by this call

    Raises:
        TargetNotWritable: If the path exists but is not a writable directory
        DirectoryCreateError: If the directory cannot be created
    """
    if entry_exists(target_dir):
        if not is_writable_dir(target_dir):
            raise TargetNotWritable(
                f'Target directory "{target_dir}" exists, but is not a writeable directory'
            )
        return False

    if dry_run:
        blocker = _creation_blocker(target_dir)
        if blocker is not None:
            raise DirectoryCreateError(
                f'Unable to create directory "{target_dir}": "{blocker}" is not a writeable directory'
            )
        if planned is not None:
            if target_dir in planned:
                return False
            planned.add(target_dir)
        return True

    try:
        target_dir.mkdir(parents=True)
    except FileExistsError:
        # Appeared since the check above
        if not is_writable_dir(target_dir):
            raise TargetNotWritable(
                f'Target directory "{target_dir}" exists, but is not a writeable directory'
            )
        return False
    except OSError as e:
        raise DirectoryCreateError(f'Unable to create directory "{target_dir}": {e}') from e

    logger.debug("created %s", target_dir)
    return True


def _creation_blocker(target_dir: Path) -> Optional[Path]:
    """Nearest existing ancestor of target_dir, if it would stop mkdir."""
    for ancestor in target_dir.parents:
        if entry_exists(ancestor):
            return None if is_writable_dir(ancestor) else ancestor
    return None


def is_duplicate(destination: Path, planned: Optional[Set[Path]] = None) -> bool:
    """Check if a file of the same name already sits in the bucket."""
    if entry_exists(destination):
        return True
    return planned is not None and destination in planned


def perform(source: Path, destination: Path, mode: PlacementMode) -> None:
    """
    Move, copy or link a single file.

    Args:
        source: Canonical path of the file to place
        destination: Full target path (bucket directory / base name)
        mode: Placement mode

    Raises:
        OSError: Whatever the underlying operation raises
    """
    if mode is PlacementMode.MOVE:
        shutil.move(str(source), str(destination))
    elif mode is PlacementMode.COPY:
        shutil.copy2(str(source), str(destination))
    elif mode is PlacementMode.LINK:
        os.symlink(str(source), str(destination))
    else:
        raise ValueError(f"Unknown placement mode: {mode!r}")


def place_file(
    assignment: BucketAssignment,
    destination_root: Path,
    mode: PlacementMode = PlacementMode.MOVE,
    dry_run: bool = False,
    planned: Optional[Set[Path]] = None,
    output: OutputCallback = default_output,
) -> PlacementResult:
    """
    Place one file into DEST_DIR/<key>/.

    Args:
        assignment: Candidate file and its bucket key
        destination_root: DEST_DIR
        mode: Move, copy or link
        dry_run: If True, only report what would happen
        planned: Paths a dry run has already claimed (directories and files)
        output: Callback for output messages

    Returns:
        PlacementResult (PLACED or SKIPPED_DUPLICATE)

    Raises:
        PlacementError: If the bucket or the file cannot be written. The
            FAILED result is attached as `error.result`.
    """
    source = assignment.source
    target_dir = destination_root / assignment.key
    destination = target_dir / source.name

    try:
        created = ensure_bucket_dir(target_dir, dry_run=dry_run, planned=planned)
    except PlacementError as e:
        e.result = PlacementResult(source, destination, PlacementStatus.FAILED, reason=str(e))
        raise

    if created:
        output(f"  [{'WOULD CREATE' if dry_run else 'CREATED'}] {target_dir}/")

    if is_duplicate(destination, planned=planned if dry_run else None):
        output(f'  [SKIPPED] Duplicate file "{source}" found in {assignment.key}/')
        return PlacementResult(
            source, destination, PlacementStatus.SKIPPED_DUPLICATE,
            reason=f"{destination} already exists", created_dir=created,
        )

    would, done = _MODE_VERBS[mode]
    action = f"{source.name} -> {assignment.key}/"

    if dry_run:
        if planned is not None:
            planned.add(destination)
        output(f"  [{would}] {action}")
        return PlacementResult(source, destination, PlacementStatus.PLACED, created_dir=created)

    try:
        perform(source, destination, mode)
    except OSError as e:
        reason = f"{source}: {e}"
        output(f"  [ERROR] {reason}")
        raise PlacementError(
            f"Unable to {mode.value} {source} to {destination}: {e}",
            result=PlacementResult(source, destination, PlacementStatus.FAILED, reason=reason),
        ) from e

    logger.debug("%s %s -> %s", mode.value, source, destination)
    output(f"  [{done}] {action}")
    return PlacementResult(source, destination, PlacementStatus.PLACED, created_dir=created)


def place_files(
    assignments: Iterable[BucketAssignment],
    destination_root: Path,
    mode: PlacementMode = PlacementMode.MOVE,
    dry_run: bool = False,
    config: Config = DEFAULT_CONFIG,
    output: OutputCallback = default_output,
) -> PlacementSummary:
    """
    Place every assigned file, in order, stopping at the first fatal error.

    Files already placed stay where they are when a later one fails.

    Args:
        assignments: Candidate files paired with their bucket keys
        destination_root: DEST_DIR
        mode: Move, copy or link
        dry_run: If True, only preview changes
        config: Configuration to use
        output: Callback for output messages

    Returns:
        PlacementSummary with one result per file

    Raises:
        PlacementError: On the first file that cannot be placed
    """
    summary = PlacementSummary()
    assignments = list(assignments)

    if not assignments:
        output("No files found to place.")
        return summary

    prefix = config.dry_run_prefix if dry_run else ""
    planned: Optional[Set[Path]] = set() if dry_run else None

    output(f"\n{prefix}Placing {len(assignments)} files into: {destination_root} ({mode.value})\n")
    output("-" * 60)

    for assignment in assignments:
        result = place_file(
            assignment,
            destination_root,
            mode=mode,
            dry_run=dry_run,
            planned=planned,
            output=output,
        )
        summary.results.append(result)
        if result.created_dir:
            summary.created_dirs.append(result.target.parent)
        if result.status is PlacementStatus.PLACED:
            summary.actions.append(f"{result.source.name} -> {assignment.key}/")

    output("-" * 60)

    if dry_run:
        output(f"\n{prefix}Would place {summary.placed_count} files, skip {summary.skipped_count} duplicates")
        output("Run without --dry-run to apply changes.")
    else:
        output(f"\nSummary: {summary.placed_count} placed, {summary.skipped_count} skipped")

    return summary
