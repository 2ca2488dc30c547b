"""Pydantic models for Ghost Admin API payloads."""

from typing import Literal

from pydantic import BaseModel, Field


class GhostTag(BaseModel):
    """A tag reference; Ghost creates unknown tags by name."""

    name: str = Field(..., min_length=1)


class GhostPost(BaseModel):
    """Request body for creating a post through the Ghost Admin API."""

    title: str = Field(..., min_length=1, description="Post title")
    status: Literal["draft", "published"] = Field(
        default="published", description="Publication status"
    )
    mobiledoc: str = Field(..., description="Serialized mobiledoc document")
    tags: list[GhostTag] = Field(default_factory=list)


class GhostPostsRequest(BaseModel):
    """Envelope expected by POST /ghost/api/admin/posts/."""

    posts: list[GhostPost]
