# clean_api/application/dtos/post_dto.py

"""
Schemas for posts.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from clean_api.application.dtos.base_dto import CustomBaseModel, RecordStatus

MAX_TITLE_LENGTH = 200


class PostCreate(CustomBaseModel):
    """
    Schema for creating a post.
    """
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="Title of the post")
    content: str = Field(..., min_length=1, description="Body of the post")


class PostUpdate(CustomBaseModel):
    """
    Partial update of a post. Omitted fields are left unchanged.
    """
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True, extra="forbid")

    title: Optional[str] = Field(None, min_length=1, max_length=MAX_TITLE_LENGTH, description="New title")
    content: Optional[str] = Field(None, min_length=1, description="New body")
    status: Optional[RecordStatus] = Field(None, description="New status")


class PostOutput(CustomBaseModel):
    id: UUID = Field(..., description="Unique identifier of the post")
    title: str = Field(..., description="Title of the post")
    content: str = Field(..., description="Body of the post")
    status: str = Field(..., description="Post status")
    created_at: Optional[datetime] = Field(None, description="Creation date")
    updated_at: Optional[datetime] = Field(None, description="Last update date")
