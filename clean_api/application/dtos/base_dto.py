# clean_api/application/dtos/base_dto.py

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Lifecycle state shared by users and posts
RecordStatus = Literal["active", "inactive"]


class CustomBaseModel(BaseModel):
    """
    Base for every DTO: reads from ORM/domain attributes and strips surrounding whitespace.
    """
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)


class SuccessOutput(CustomBaseModel):
    """Body of endpoints that only report success (deletes)."""
    success: bool = Field(True, description="Always true on success")
