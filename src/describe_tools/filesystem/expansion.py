"""Directory expansion for describe imports.

A directory is replaced by the regular files it immediately contains.
Expansion is a single level deep: child directories are dropped, never
descended into.
"""

import asyncio
import os
from typing import Iterable

from describe_tools.core import get_logger
from describe_tools.core.exceptions import DescribeIOError

from .classification import StrPath, classify_paths, only_files

logger = get_logger(__name__)


async def expand_directory(directory: StrPath) -> list[str]:
    """List the regular files directly inside a directory.

    Entries keep the order the filesystem returned them in.

    Args:
        directory: Directory to expand

    Returns:
        Absolute paths of the files in the directory

    Raises:
        DescribeIOError: If the directory cannot be listed or an entry
            cannot be stat-ed
    """
    absolute = os.path.abspath(os.fspath(directory))

    try:
        entries = await asyncio.to_thread(os.listdir, absolute)
    except OSError as e:
        error_msg = f"Failed to list directory '{absolute}': {e}"
        logger.error(error_msg, path=absolute, error=str(e))
        raise DescribeIOError(error_msg, absolute) from e

    classified = await classify_paths(
        os.path.join(absolute, entry) for entry in entries
    )
    files = only_files(classified)

    logger.debug(
        "Directory expanded",
        path=absolute,
        entry_count=len(entries),
        file_count=len(files),
    )
    return files


async def expand_directories(directories: Iterable[StrPath]) -> list[str]:
    """Expand several directories concurrently into one flat file list.

    Results are grouped by directory in input order. Any single directory
    failure fails the whole call.

    Raises:
        DescribeIOError: If any directory cannot be expanded
    """
    per_directory = await asyncio.gather(*(expand_directory(d) for d in directories))
    return [path for files in per_directory for path in files]
