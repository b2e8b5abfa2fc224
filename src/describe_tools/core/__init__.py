"""Core utilities and shared components for describe-tools."""

from .config import settings
from .exceptions import DescribeToolsError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "DescribeToolsError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
