"""Export describe documents as ``<name>.desc.json`` files."""

import asyncio
import os
from typing import Sequence

from describe_tools.core import get_logger, get_tracer
from describe_tools.core.exceptions import DescribeIOError, ValidationError
from describe_tools.filesystem.classification import StrPath

from .serialization import DESCRIBE_FILE_SUFFIX, DescribeDocument, serialize_describe

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def describe_file_name(describe: DescribeDocument, directory: StrPath) -> str:
    """Compute the target file for a describe document.

    Raises:
        ValidationError: If the document has no string ``name``
    """
    name = describe.get("name") if isinstance(describe, dict) else None
    if not isinstance(name, str):
        raise ValidationError("Describe document has no string 'name' field")
    return os.path.join(os.fspath(directory), f"{name}{DESCRIBE_FILE_SUFFIX}")


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


async def _ensure_directory(directory: str) -> None:
    try:
        await asyncio.to_thread(os.mkdir, directory)
        logger.info("Created describe directory", path=directory)
    except FileExistsError:
        logger.debug("Describe directory already exists", path=directory)
    except (OSError, ValueError) as e:
        error_msg = f"Failed to create directory '{directory}': {e}"
        logger.error(error_msg, path=directory, error=str(e))
        raise DescribeIOError(error_msg, directory) from e


async def write_describe_file(describe: DescribeDocument, directory: StrPath) -> str:
    """Write one describe document into a directory.

    Returns:
        Path of the written file

    Raises:
        ValidationError: If the document has no string ``name`` or cannot
            be serialized
        DescribeIOError: If the file cannot be written
    """
    path = describe_file_name(describe, directory)
    text = serialize_describe(describe)

    try:
        await asyncio.to_thread(_write_text, path, text)
    except OSError as e:
        error_msg = f"Failed to write describe file '{path}': {e}"
        logger.error(error_msg, path=path, error=str(e))
        raise DescribeIOError(error_msg, path) from e

    return path


async def write_describe_files(
    describes: Sequence[DescribeDocument], directory: StrPath
) -> list[asyncio.Task[str]]:
    """Write describe documents as JSON files.

    The directory is created if missing. Documents sharing a name overwrite
    each other; which one ends up on disk is not defined.

    Args:
        describes: Describe documents to write
        directory: Directory to write describe files to

    Returns:
        One task per document, in input order, each resolving to the
        written file's path. Tasks are not awaited here.

    Raises:
        DescribeIOError: If the directory cannot be created
    """
    directory = os.fspath(directory)

    with tracer.start_as_current_span("write_describe_files"):
        await _ensure_directory(directory)

    logger.info(
        "Writing describe files", path=directory, document_count=len(describes)
    )
    return [asyncio.create_task(write_describe_file(d, directory)) for d in describes]
