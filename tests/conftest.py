"""Test configuration and fixtures for describe-tools."""

import json

import pytest

from describe_tools.core.exceptions import RemoteDescribeError


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def describe_tree(temp_dir):
    """Create a sample describe tree.

    Layout::

        file1.json          {"name": "Account"}
        dir1/file2.json     {"name": "Contact"}
        dir1/file3.json     {"name": "Lead"}
        dir1/dir2/file4.json
    """
    (temp_dir / "file1.json").write_text(json.dumps({"name": "Account"}))

    dir1 = temp_dir / "dir1"
    dir1.mkdir()
    (dir1 / "file2.json").write_text(json.dumps({"name": "Contact"}))
    (dir1 / "file3.json").write_text(json.dumps({"name": "Lead"}))

    dir2 = dir1 / "dir2"
    dir2.mkdir()
    (dir2 / "file4.json").write_text(json.dumps({"name": "Nested"}))

    return temp_dir


class FakeConnection:
    """In-memory describe connection."""

    def __init__(self, describes, failing=(), fail_listing=False):
        self.describes = {d["name"]: d for d in describes}
        self.failing = set(failing)
        self.fail_listing = fail_listing
        self.described = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def list_object_names(self):
        if self.fail_listing:
            raise RemoteDescribeError("listing unavailable")
        return list(self.describes)

    async def describe(self, name):
        self.described.append(name)
        if name in self.failing:
            raise RemoteDescribeError(f"cannot describe {name}", name)
        return self.describes[name]


@pytest.fixture
def fake_connection():
    """Connection describing Account, Contact and Lead."""
    return FakeConnection(
        [
            {"name": "Account", "fields": [{"name": "Id"}]},
            {"name": "Contact", "fields": []},
            {"name": "Lead", "fields": [{"name": "Id"}, {"name": "Email"}]},
        ]
    )


@pytest.fixture
def make_connection():
    """Factory for in-memory describe connections."""
    return FakeConnection
