"""Shared pytest fixtures for emby2openlist tests."""

from unittest.mock import Mock

import pytest

from emby2openlist.config import Config, EmbyConfig, PathConfig, PathMapping
from emby2openlist.openlist.models import FsEntry, FsListData, FsListResponse


def _make_listing(*entries, code=200, message="success"):
    return FsListResponse(
        code=code,
        message=message,
        data=FsListData(
            content=[FsEntry(name=name, is_dir=is_dir) for name, is_dir in entries],
            total=len(entries),
        ),
    )


@pytest.fixture
def default_config():
    """Configuration with a mount path and no mappings."""
    return Config(emby=EmbyConfig(mount_path="/media"))


@pytest.fixture
def mapped_config():
    """Configuration with explicit emby2openlist mappings."""
    return Config(
        emby=EmbyConfig(mount_path="/media"),
        path=PathConfig(
            emby2openlist=[
                PathMapping(emby="/Movies/Special", openlist="/quark/Special"),
                PathMapping(emby="/Movies", openlist="/115/Movies"),
            ]
        ),
    )


@pytest.fixture
def make_listing():
    """Factory building a listing response from (name, is_dir) pairs."""
    return _make_listing


@pytest.fixture
def root_listing():
    """Openlist root with two storage directories and one file."""
    return _make_listing(("115", True), ("readme", False), ("quark", True))


@pytest.fixture
def listing_client(root_listing):
    """Fake listing client returning the root listing."""
    client = Mock()
    client.fetch_fs_list.return_value = root_listing
    return client
