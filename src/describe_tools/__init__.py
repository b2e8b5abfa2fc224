"""Import, export and fetch of describe metadata documents.

A describe document is a JSON description of one remote data object's
schema (its name, fields and so on). This package moves such documents
between a directory tree and memory, and fetches them from a remote
instance.

Key Features:
    - Import from any mix of files and directories (one level deep)
    - Export as ``<name>.desc.json`` files
    - Remote fetch through a pluggable describe connection (Salesforce REST)
    - CLI interface

Recommended Usage:
    The import, export and fetch functions return unawaited tasks, one per
    document, so callers decide how to wait for them:

    >>> from describe_tools import import_describe_files
    >>> tasks = await import_describe_files("describes/", "extra/Account.json")
    >>> documents = await asyncio.gather(*tasks, return_exceptions=True)
"""

__version__ = "0.1.0"

from .describe import (
    DescribeDocument,
    describe_file_name,
    import_describe_files,
    write_describe_files,
)
from .filesystem import (
    ClassifiedPath,
    PathKind,
    classify_path,
    expand_directories,
    expand_directory,
)
from .remote import DescribeConnection, SalesforceConnection, describe_remote_objects
from .schemas import SalesforceConnectionConfig

__all__ = [
    # Describe files
    "DescribeDocument",
    "describe_file_name",
    "import_describe_files",
    "write_describe_files",
    # Filesystem scanning
    "ClassifiedPath",
    "PathKind",
    "classify_path",
    "expand_directories",
    "expand_directory",
    # Remote
    "DescribeConnection",
    "SalesforceConnection",
    "SalesforceConnectionConfig",
    "describe_remote_objects",
]
