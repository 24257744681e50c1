"""
Collects the source files to document from files and directories on the command line.
"""

from pathlib import Path
from typing import Iterable, List, Set

from . import logger


def _matches(path: Path, extensions: Set[str]) -> bool:
    return path.suffix.lstrip('.').lower() in extensions


def _scan_directory(directory: Path, depth: int, extensions: Set[str], found: Set[str]):
    for entry in sorted(directory.iterdir()):
        if entry.is_file() and _matches(entry, extensions):
            found.add(str(entry))
        elif entry.is_dir() and depth > 0:
            _scan_directory(entry, depth - 1, extensions, found)


def find_sources(paths: Iterable, recurse: int = 0, extensions: Iterable[str] = ('js',)) -> List[str]:
    """
    Expand files and directories into a sorted list of source files.

    Args:
        paths: Files (always included) and directories (scanned)
        recurse: How many directory levels below each given directory to descend
        extensions: File extensions to pick up from directories, without the dot

    Returns:
        Sorted, de-duplicated list of file paths
    """
    wanted = {ext.lstrip('.').lower() for ext in extensions}
    found: Set[str] = set()

    for path in paths:
        path = Path(path)
        if path.is_file():
            found.add(str(path))
        elif path.is_dir():
            _scan_directory(path, recurse, wanted, found)
        else:
            logger.warning(f"Source path not found: {path}")

    logger.debug(f"Found {len(found)} source files")
    return sorted(found)
