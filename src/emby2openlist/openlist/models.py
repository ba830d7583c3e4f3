"""Pydantic models for the Openlist fs list API."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

SUCCESS_CODE = 200


class FsEntry(BaseModel):
    """One entry of a directory listing."""

    name: str
    is_dir: bool = False
    size: Optional[int] = None


class FsListData(BaseModel):
    """Payload of a successful listing."""

    content: List[FsEntry] = Field(default_factory=list)
    total: int = 0

    @field_validator("content", mode="before")
    @classmethod
    def null_content(cls, v):
        """Openlist sends ``null`` for empty directories."""
        return [] if v is None else v


class FsListResponse(BaseModel):
    """Envelope returned by ``/api/fs/list``."""

    code: int
    message: str = ""
    data: Optional[FsListData] = None

    @property
    def ok(self) -> bool:
        """Whether the service reported success."""
        return self.code == SUCCESS_CODE

    @property
    def entries(self) -> List[FsEntry]:
        """Listing entries, empty when there is no payload."""
        return self.data.content if self.data else []


class FsListOptions(BaseModel):
    """Optional filters for a listing request."""

    password: str = ""
    page: int = 1
    per_page: int = 0
    refresh: bool = False
