"""
Configuration for alpha-dirs.

Uses a dataclass to make configuration testable and injectable.
Default values match the behavior of the command-line tool.
"""

from dataclasses import dataclass
from enum import Enum


class PlacementMode(Enum):
    """How a file is placed into its bucket directory."""
    MOVE = "move"
    COPY = "copy"
    LINK = "link"


@dataclass
class Config:
    """
    Configuration for bucketing and placement.

    All settings can be overridden when creating a Config instance,
    making it easy to test with different values.

    Example:
        # Use defaults
        config = Config()

        # Put unnamed files in "#" instead of "_"
        config = Config(fallback_key="#")
    """

    # Bucket used when nothing is left of a name after stripping
    fallback_key: str = "_"

    # Article dropped by --ignore-the (matched case-insensitively)
    leading_article: str = "the"

    # Characters stripped from the front of names in addition to whitespace
    # when --ignore-the is off
    plain_strip_chars: str = "."

    # Prefix for messages printed during a dry run
    dry_run_prefix: str = "[DRY RUN] "

    # Asked when the destination lives inside a recursive source
    confirm_prompt: str = "Are you sure you want to continue? [N/y] "

    def __post_init__(self) -> None:
        if len(self.fallback_key) != 1:
            raise ValueError(f"fallback_key must be a single character, got {self.fallback_key!r}")
        if not self.leading_article:
            raise ValueError("leading_article must not be empty")

    def is_plain_strip_char(self, char: str) -> bool:
        """Check if a character is dropped from the front of names by default."""
        return char.isspace() or char in self.plain_strip_chars


# Default configuration instance
DEFAULT_CONFIG = Config()
