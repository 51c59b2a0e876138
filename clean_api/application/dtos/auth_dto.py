# clean_api/application/dtos/auth_dto.py

"""
Schemas for the authentication flows.

Sign-up and sign-in payloads, and the response shared by sign-up,
sign-in and refresh.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from clean_api.application.dtos.base_dto import CustomBaseModel
from clean_api.application.dtos.user_dto import UserOutput
from clean_api.domain.models.refresh_token import AuthenticatedUser

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
MAX_NAME_LENGTH = 100


class SignInRequest(CustomBaseModel):
    """
    Schema for sign-in.
    """
    email: EmailStr = Field(..., description="Email of a registered user")
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_LENGTH, description="Password of the user")

    @field_validator("email")
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class SignUpRequest(SignInRequest):
    """
    Schema for sign-up.
    """
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Display name")
    password: str = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        max_length=MAX_PASSWORD_LENGTH,
        description=f"Password ({MIN_PASSWORD_LENGTH} to {MAX_PASSWORD_LENGTH} characters)",
    )


class AuthResponse(CustomBaseModel):
    """
    Returned by sign-up, sign-in and refresh. The refresh token itself only
    travels in the HttpOnly cookie.
    """
    user: UserOutput
    access_token: str = Field(..., description="Signed JWT access token")
    access_token_expires_at: datetime = Field(..., description="Access token expiry (UTC)")
    refresh_token_expires_at: datetime = Field(..., description="Refresh token expiry (UTC)")
    csrf_token: str = Field(..., description="Value to echo in the CSRF header on refresh")

    @classmethod
    def from_authenticated(cls, authenticated: AuthenticatedUser, csrf_token: str) -> "AuthResponse":
        tokens = authenticated.tokens
        return cls(
            user=UserOutput.model_validate(authenticated.user),
            access_token=tokens.access_token,
            access_token_expires_at=tokens.access_token_expires_at,
            refresh_token_expires_at=tokens.refresh_token_expires_at,
            csrf_token=csrf_token,
        )


class AccessTokenClaims(CustomBaseModel):
    """
    Claims of a verified access token.
    """
    sub: str = Field(..., min_length=1, description="User id")
    email: Optional[str] = Field(None, description="Email of the user at issuance")
    jti: Optional[str] = Field(None, description="Id of the session that issued the token")
    iat: Optional[int] = None
    exp: int


class LogoutResponse(CustomBaseModel):
    success: bool = True
