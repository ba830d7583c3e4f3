"""Openlist listing service client."""

from emby2openlist.openlist.client import OpenlistClient
from emby2openlist.openlist.models import FsEntry, FsListData, FsListOptions, FsListResponse

__all__ = ["OpenlistClient", "FsEntry", "FsListData", "FsListOptions", "FsListResponse"]
