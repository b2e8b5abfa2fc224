"""Remote describe sources."""

from .connection import DescribeConnection, SalesforceConnection
from .fetcher import describe_remote_objects

__all__ = [
    "DescribeConnection",
    "SalesforceConnection",
    "describe_remote_objects",
]
