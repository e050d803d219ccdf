"""
alpha-dirs - Sort files into first-letter directories.

This package collects files from sources, works out the letter each one
belongs under, and moves, copies or links it into DEST_DIR/<letter>/.
"""

from .config import Config, PlacementMode
from .errors import (
    AlphaDirsError,
    ConfigurationError,
    DirectoryCreateError,
    InvalidSource,
    PlacementError,
    TargetNotWritable,
)
from .normalize import BucketAssignment, assign_buckets, bucket_key
from .operations import PlacementResult, PlacementStatus, PlacementSummary, place_files
from .sources import collect_sources

__version__ = "1.0.0"
__all__ = [
    "Config",
    "PlacementMode",
    "AlphaDirsError",
    "ConfigurationError",
    "DirectoryCreateError",
    "InvalidSource",
    "PlacementError",
    "TargetNotWritable",
    "BucketAssignment",
    "assign_buckets",
    "bucket_key",
    "PlacementResult",
    "PlacementStatus",
    "PlacementSummary",
    "place_files",
    "collect_sources",
]
