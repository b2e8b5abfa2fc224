"""Tests for path classification."""

import os

import pytest

from describe_tools.core.exceptions import DescribeIOError
from describe_tools.filesystem import (
    ClassifiedPath,
    PathKind,
    classify_path,
    classify_paths,
    only_directories,
    only_files,
)


class TestClassifyPath:
    """Test single path classification."""

    @pytest.mark.asyncio
    async def test_classify_file(self, describe_tree):
        """Test that a regular file classifies as a file."""
        result = await classify_path(str(describe_tree / "file1.json"))

        assert result == ClassifiedPath(
            path=str(describe_tree / "file1.json"), kind=PathKind.file
        )

    @pytest.mark.asyncio
    async def test_classify_directory(self, describe_tree):
        """Test that a directory classifies as a directory."""
        result = await classify_path(describe_tree / "dir1")

        assert result.kind is PathKind.directory
        assert result.path == str(describe_tree / "dir1")

    @pytest.mark.asyncio
    async def test_relative_path_made_absolute(self, describe_tree, monkeypatch):
        """Test that relative paths are resolved against the working directory."""
        monkeypatch.chdir(describe_tree)

        result = await classify_path("dir1/file2.json")

        assert os.path.isabs(result.path)
        assert result.path == str(describe_tree / "dir1" / "file2.json")
        assert result.kind is PathKind.file

    @pytest.mark.asyncio
    async def test_missing_path(self, temp_dir):
        """Test that a missing path raises with the failing path attached."""
        missing = str(temp_dir / "missing.json")

        with pytest.raises(DescribeIOError) as exc_info:
            await classify_path(missing)

        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @pytest.mark.asyncio
    async def test_embedded_nul_byte(self, temp_dir):
        """Test that an unrepresentable path fails with the path attached."""
        path = str(temp_dir / "bad\x00name.json")

        with pytest.raises(DescribeIOError) as exc_info:
            await classify_path(path)

        assert exc_info.value.path == path

    @pytest.mark.asyncio
    async def test_dangling_symlink(self, temp_dir):
        """Test that a broken symlink fails like a missing path."""
        link = temp_dir / "dangling.json"
        link.symlink_to(temp_dir / "nowhere.json")

        with pytest.raises(DescribeIOError):
            await classify_path(link)

    @pytest.mark.asyncio
    async def test_symlink_to_file_is_file(self, describe_tree):
        """Test that symlinks are followed."""
        link = describe_tree / "link.json"
        link.symlink_to(describe_tree / "file1.json")

        result = await classify_path(link)

        assert result.kind is PathKind.file

    @pytest.mark.asyncio
    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
    async def test_fifo_is_other(self, temp_dir):
        """Test that special files classify as other."""
        fifo = temp_dir / "pipe"
        os.mkfifo(fifo)

        result = await classify_path(fifo)

        assert result.kind is PathKind.other


class TestClassifyPaths:
    """Test batch classification."""

    @pytest.mark.asyncio
    async def test_preserves_input_order(self, describe_tree):
        """Test that results line up with input positions."""
        paths = [
            str(describe_tree / "dir1"),
            str(describe_tree / "file1.json"),
            str(describe_tree / "dir1" / "file3.json"),
        ]

        result = await classify_paths(paths)

        assert [c.path for c in result] == paths
        assert [c.kind for c in result] == [
            PathKind.directory,
            PathKind.file,
            PathKind.file,
        ]

    @pytest.mark.asyncio
    async def test_empty_batch(self):
        """Test that an empty batch classifies to an empty list."""
        assert await classify_paths([]) == []

    @pytest.mark.asyncio
    async def test_one_failure_fails_batch(self, describe_tree):
        """Test that a single missing path aborts the batch."""
        with pytest.raises(DescribeIOError):
            await classify_paths(
                [str(describe_tree / "file1.json"), str(describe_tree / "nope")]
            )


class TestFilters:
    """Test file and directory filters."""

    def setup_method(self, method):
        """Set up a mixed batch of classified paths."""
        self.classified = [
            ClassifiedPath("/a/one.json", PathKind.file),
            ClassifiedPath("/a/sub", PathKind.directory),
            ClassifiedPath("/a/pipe", PathKind.other),
            ClassifiedPath("/a/two.json", PathKind.file),
            ClassifiedPath("/a/other", PathKind.directory),
        ]

    def test_only_files(self):
        """Test that only files are kept, in order."""
        assert only_files(self.classified) == ["/a/one.json", "/a/two.json"]

    def test_only_directories(self):
        """Test that only directories are kept, in order."""
        assert only_directories(self.classified) == ["/a/sub", "/a/other"]

    def test_other_never_selected(self):
        """Test that other entries are dropped by both filters."""
        selected = only_files(self.classified) + only_directories(self.classified)
        assert "/a/pipe" not in selected
