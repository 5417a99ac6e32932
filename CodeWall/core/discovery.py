# Source file discovery module

import logging
import os
from typing import Iterable, List, NamedTuple

from .constants import DEFAULT_FILE_COUNT, SKIP_DIRS, SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


class SourceFile(NamedTuple):
    path: str
    name: str
    mtime: float
    size: int


def scan_directory(root: str, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> List[SourceFile]:
    """
    Recursively collect code files under `root`.

    Directories in SKIP_DIRS are not entered. Unreadable directories are
    logged and skipped.
    """
    extensions = {ext.lower() for ext in extensions}
    files = []

    for current_dir, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS]
        for filename in filenames:
            if os.path.splitext(filename)[1].lower() not in extensions:
                continue
            full_path = os.path.join(current_dir, filename)
            try:
                stats = os.stat(full_path)
            except OSError as e:
                logger.warning("Error reading %s: %s", full_path, e)
                continue
            files.append(SourceFile(full_path, filename, stats.st_mtime, stats.st_size))

    return files


def _log_walk_error(error: OSError) -> None:
    logger.warning("Error scanning directory %s: %s", error.filename, error.strerror)


def get_recent_files(
    root: str,
    count: int = DEFAULT_FILE_COUNT,
    extensions: Iterable[str] = SOURCE_EXTENSIONS,
) -> List[SourceFile]:
    """
    Get the most recently modified code files under `root`.

    Args:
        root: Directory to scan
        count: Number of files to return
        extensions: File extensions to include

    Returns:
        Up to `count` files, most recently modified first
    """
    files = scan_directory(root, extensions)
    files.sort(key=lambda f: f.mtime, reverse=True)
    return files[:count]
