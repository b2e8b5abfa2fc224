"""Fetch describe documents for every object of a remote instance."""

import asyncio

from describe_tools.core import get_logger, get_tracer
from describe_tools.describe import DescribeDocument

from .connection import DescribeConnection

logger = get_logger(__name__)
tracer = get_tracer(__name__)


async def describe_remote_objects(
    connection: DescribeConnection,
) -> list[asyncio.Task[DescribeDocument]]:
    """Describe all objects of a remote instance.

    Args:
        connection: An authenticated describe connection

    Returns:
        One task per listed object, in listing order, each resolving to the
        object's describe document. Tasks are not awaited here.

    Raises:
        RemoteDescribeError: If listing the objects fails
    """
    with tracer.start_as_current_span("describe_remote_objects"):
        names = await connection.list_object_names()

    logger.info("Describing remote objects", object_count=len(names))
    return [asyncio.create_task(connection.describe(name)) for name in names]
