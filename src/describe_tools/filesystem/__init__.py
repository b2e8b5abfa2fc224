"""Filesystem scanning: path classification and directory expansion."""

from .classification import (
    ClassifiedPath,
    PathKind,
    classify_path,
    classify_paths,
    only_directories,
    only_files,
)
from .expansion import expand_directories, expand_directory

__all__ = [
    "ClassifiedPath",
    "PathKind",
    "classify_path",
    "classify_paths",
    "only_directories",
    "only_files",
    "expand_directories",
    "expand_directory",
]
