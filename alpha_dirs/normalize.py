"""
Bucket key derivation.

Pure functions: a file's bucket depends only on its base name and the
--ignore-the flag, never on the filesystem.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List

from .config import Config, DEFAULT_CONFIG


@dataclass(frozen=True)
class BucketAssignment:
    """A candidate file paired with the bucket it belongs in."""
    source: Path
    key: str


def is_separator(char: str) -> bool:
    """Anything that is not a letter or digit."""
    return not char.isalnum()


def strip_leading(name: str, predicate: Callable[[str], bool]) -> str:
    """
    Remove the leading run of characters matching a predicate.

    Args:
        name: String to strip
        predicate: Returns True for characters to drop

    Returns:
        name without its leading run (unchanged if the run is empty)

    Example:
        >>> strip_leading("...hidden", lambda c: c == ".")
        'hidden'
    """
    index = 0
    while index < len(name) and predicate(name[index]):
        index += 1
    return name[index:]


def strip_article(name: str, article: str) -> str:
    """
    Drop a leading article and the separators after it.

    The article only counts as a word when at least one separator follows
    it, so "Theory" is left alone while "The Thing" becomes "Thing".
    """
    size = len(article)
    if name[:size].lower() != article.lower():
        return name
    rest = name[size:]
    if not rest or not is_separator(rest[0]):
        return name
    return strip_leading(rest, is_separator)


def normalize_name(name: str, ignore_the: bool = False, config: Config = DEFAULT_CONFIG) -> str:
    """
    Normalize a base file name before its first character is taken.

    Without ignore_the, leading whitespace and periods are dropped. With it,
    any leading non-alphanumeric run is dropped, then every leading article
    (config.leading_article) together with the separators after it.

    Args:
        name: Base file name (no directory part)
        ignore_the: Drop a leading article
        config: Configuration to use

    Returns:
        The normalized name, possibly empty
    """
    if not ignore_the:
        return strip_leading(name, config.is_plain_strip_char)

    name = strip_leading(name, is_separator)
    # "The The Band" -> "Band", so normalizing twice changes nothing
    while True:
        stripped = strip_article(name, config.leading_article)
        if stripped == name:
            return name
        name = stripped


def bucket_key(name: str, ignore_the: bool = False, config: Config = DEFAULT_CONFIG) -> str:
    """
    Get the single-character bucket for a base file name.

    Args:
        name: Base file name (no directory part)
        ignore_the: Drop a leading article first
        config: Configuration to use

    Returns:
        First character of the normalized name in lower case, or
        config.fallback_key if nothing is left after normalizing

    Example:
        >>> bucket_key("The Great Gatsby.txt", ignore_the=True)
        'g'
        >>> bucket_key("...")
        '_'
    """
    normalized = normalize_name(name, ignore_the=ignore_the, config=config)
    if not normalized:
        return config.fallback_key

    # Some characters lower-case to more than one code point ("İ" -> "i" + dot)
    return normalized[0].lower()[0]


def assign_buckets(
    candidates: Iterable[Path],
    ignore_the: bool = False,
    config: Config = DEFAULT_CONFIG,
) -> List[BucketAssignment]:
    """
    Pair every candidate file with its bucket key, keeping order.

    Args:
        candidates: Candidate file paths
        ignore_the: Drop a leading article before taking the first letter
        config: Configuration to use

    Returns:
        One BucketAssignment per candidate, in the same order
    """
    return [
        BucketAssignment(source=path, key=bucket_key(path.name, ignore_the=ignore_the, config=config))
        for path in candidates
    ]
