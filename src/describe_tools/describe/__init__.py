"""Import and export of describe documents on the local filesystem."""

from .exporter import describe_file_name, write_describe_file, write_describe_files
from .importer import collect_describe_paths, import_describe_files, read_describe_file
from .serialization import (
    DESCRIBE_FILE_SUFFIX,
    DescribeDocument,
    parse_describe,
    serialize_describe,
)

__all__ = [
    "DESCRIBE_FILE_SUFFIX",
    "DescribeDocument",
    "collect_describe_paths",
    "describe_file_name",
    "import_describe_files",
    "parse_describe",
    "read_describe_file",
    "serialize_describe",
    "write_describe_file",
    "write_describe_files",
]
