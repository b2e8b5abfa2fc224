"""Import describe documents from files and directories.

Discovery (stat and directory listing) is batch-fatal: any filesystem error
aborts the import before a single file is read. Reading and parsing is then
fanned out as one task per file, returned unawaited, so one bad file only
fails its own task.
"""

import asyncio
import os

from describe_tools.core import get_logger, get_tracer
from describe_tools.core.exceptions import DescribeIOError, DescribeParseError
from describe_tools.filesystem import (
    classify_paths,
    expand_directories,
    only_directories,
    only_files,
)
from describe_tools.filesystem.classification import StrPath

from .serialization import DescribeDocument, parse_describe

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


async def read_describe_file(path: StrPath) -> DescribeDocument:
    """Read and parse a single describe file.

    Raises:
        DescribeIOError: If the file cannot be read
        DescribeParseError: If the content is not valid UTF-8 JSON
    """
    path = os.fspath(path)

    try:
        text = await asyncio.to_thread(_read_text, path)
    except OSError as e:
        error_msg = f"Failed to read describe file '{path}': {e}"
        logger.error(error_msg, path=path, error=str(e))
        raise DescribeIOError(error_msg, path) from e
    except UnicodeDecodeError as e:
        error_msg = f"Describe file '{path}' is not valid UTF-8: {e}"
        logger.error(error_msg, path=path, error=str(e))
        raise DescribeParseError(error_msg, path) from e

    return parse_describe(text, path)


async def collect_describe_paths(*paths: StrPath) -> list[str]:
    """Resolve input paths to the flat list of describe files to read.

    Files given directly come first in input order, followed by the files
    found directly inside each given directory, grouped by directory.

    Raises:
        DescribeIOError: If any path cannot be stat-ed or listed
    """
    resolved = [os.path.abspath(os.fspath(p)) for p in paths]
    classified = await classify_paths(resolved)

    files = only_files(classified)
    directories = only_directories(classified)
    expanded = await expand_directories(directories)

    return files + expanded


async def import_describe_files(
    *paths: StrPath,
) -> list[asyncio.Task[DescribeDocument]]:
    """Read describe files and parse them to documents.

    Args:
        *paths: Describe JSON files or directories containing them

    Returns:
        One task per file, in file order, each resolving to the parsed
        document. Tasks are not awaited here.

    Raises:
        DescribeIOError: If path discovery fails
    """
    with tracer.start_as_current_span("import_describe_files"):
        files = await collect_describe_paths(*paths)

    logger.info(
        "Importing describe files", input_count=len(paths), file_count=len(files)
    )
    return [asyncio.create_task(read_describe_file(f)) for f in files]
