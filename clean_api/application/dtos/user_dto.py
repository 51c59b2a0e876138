# clean_api/application/dtos/user_dto.py

"""
Schemas for user data returned and accepted by the API.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from clean_api.application.dtos.base_dto import CustomBaseModel, RecordStatus


class UserOutput(CustomBaseModel):
    """
    Public projection of a user. Never carries the password hash.
    """
    id: UUID = Field(..., description="Unique identifier of the user")
    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Email of the user")
    status: str = Field(..., description="Account status")
    created_at: Optional[datetime] = Field(None, description="Creation date")
    updated_at: Optional[datetime] = Field(None, description="Last update date")


class UserUpdate(CustomBaseModel):
    """
    Partial update of the caller's own account. Omitted fields are left unchanged.
    """
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True, extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=100, description="New display name")
    email: Optional[EmailStr] = Field(None, description="New email")
    password: Optional[str] = Field(None, min_length=8, max_length=128, description="New password")
    status: Optional[RecordStatus] = Field(None, description="New account status")

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value else value
