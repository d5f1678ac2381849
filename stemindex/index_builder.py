"""
Index builder: walks text/HTML documents and feeds every stem into an
InvertedIndex as (stem, location, position) with 1-based positions.
The location is the file path as a string.
"""

import logging
from pathlib import Path

from .inverted_index import InvertedIndex
from .tokenizer import get_stems_from_file

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".text", ".html", ".htm")


def is_text_file(path: Path) -> bool:
    """True for files with an indexable extension (case-insensitive)."""
    path = Path(path)
    return path.is_file() and path.suffix.lower() in TEXT_SUFFIXES


def list_text_files(directory: Path) -> list[Path]:
    """Indexable files under directory (recursive), in sorted path order."""
    return sorted(
        (p for p in Path(directory).rglob("*") if is_text_file(p)),
        key=lambda p: str(p),
    )


def add_file(index: InvertedIndex, filepath: Path) -> int:
    """
    Add every stem of one document to the index.
    Returns the number of new (stem, location, position) triples.
    """
    stems = get_stems_from_file(filepath)
    return index.add_all(stems, str(filepath), start=1)


def build_index(path: Path, index: InvertedIndex | None = None) -> InvertedIndex:
    """
    Build (or extend) an index from a file or a directory.
    - A file is indexed whatever its extension.
    - A directory is walked recursively; only text files are indexed.
    Unreadable files are logged and skipped.
    Raises FileNotFoundError if path does not exist.
    """
    path = Path(path)
    if index is None:
        index = InvertedIndex()
    if not path.exists():
        raise FileNotFoundError(f"Text path not found: {path}")

    files = list_text_files(path) if path.is_dir() else [path]
    for filepath in files:
        try:
            added = add_file(index, filepath)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", filepath, e)
            continue
        logger.debug("Indexed %s (%d words)", filepath, added)

    logger.info("Indexed %d files, %d unique stems", len(files), index.term_count())
    return index


def build_index_from_paths(*paths: Path) -> InvertedIndex:
    """
    Build a single index from several files/directories.
    Missing paths are logged and skipped.
    """
    index = InvertedIndex()
    for path in paths:
        path = Path(path)
        if not path.exists():
            logger.warning("Skipping missing path %s", path)
            continue
        index.merge(build_index(path))
    return index
