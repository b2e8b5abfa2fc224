"""Path classification for describe imports.

Every input path is stat-ed exactly once and tagged as a regular file,
a directory, or something else (special files and the like). Filters over
a batch of classified paths keep input order.
"""

import asyncio
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union

from describe_tools.core import get_logger
from describe_tools.core.exceptions import DescribeIOError

logger = get_logger(__name__)

StrPath = Union[str, os.PathLike]


class PathKind(str, Enum):
    """Kind of filesystem entry a path refers to."""

    file = "file"
    directory = "directory"
    other = "other"


@dataclass(frozen=True)
class ClassifiedPath:
    """A path paired with the kind reported by the filesystem.

    Attributes:
        path: Absolute path that was stat-ed
        kind: Kind of entry found at the path
    """

    path: str
    kind: PathKind


def _kind_from_mode(mode: int) -> PathKind:
    if stat.S_ISREG(mode):
        return PathKind.file
    if stat.S_ISDIR(mode):
        return PathKind.directory
    return PathKind.other


async def classify_path(path: StrPath) -> ClassifiedPath:
    """Stat a path and classify it.

    Symbolic links are followed, so a link to a regular file classifies as a
    file while a dangling link fails like a missing path.

    Args:
        path: Path to classify, relative paths are made absolute first

    Returns:
        ClassifiedPath for the absolute path

    Raises:
        DescribeIOError: If the path does not exist or cannot be stat-ed
    """
    absolute = os.path.abspath(os.fspath(path))

    try:
        st = await asyncio.to_thread(os.stat, absolute)
    except (OSError, ValueError) as e:
        error_msg = f"Failed to stat '{absolute}': {e}"
        logger.error(error_msg, path=absolute, error=str(e))
        raise DescribeIOError(error_msg, absolute) from e

    return ClassifiedPath(path=absolute, kind=_kind_from_mode(st.st_mode))


async def classify_paths(paths: Iterable[StrPath]) -> list[ClassifiedPath]:
    """Classify a batch of paths concurrently.

    All stats are in flight at once; the result is ordered like the input.
    The first failure aborts the whole batch.

    Raises:
        DescribeIOError: If any path cannot be stat-ed
    """
    return list(await asyncio.gather(*(classify_path(p) for p in paths)))


def only_files(classified: Sequence[ClassifiedPath]) -> list[str]:
    """Return the paths of regular files, in input order."""
    return [c.path for c in classified if c.kind is PathKind.file]


def only_directories(classified: Sequence[ClassifiedPath]) -> list[str]:
    """Return the paths of directories, in input order."""
    return [c.path for c in classified if c.kind is PathKind.directory]
