# clean_api/adapters/inbound/api/v1/endpoints/auth_endpoint.py

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from clean_api.adapters.inbound.api.cookies import auth_cookie_manager, require_refresh_csrf
from clean_api.adapters.inbound.api.deps import get_auth_service
from clean_api.application.dtos.auth_dto import (
    AuthResponse,
    LogoutResponse,
    SignInRequest,
    SignUpRequest,
)
from clean_api.application.use_cases.auth_use_cases import AsyncAuthService
from clean_api.domain.models.refresh_token import AuthenticatedUser
from clean_api.shared.utils.error_responses import auth_errors
from clean_api.shared.utils.success_responses import auth_success, logout_success, signup_success

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={404: {"description": "Not found"}}
)


def _session_response(response: Response, authenticated: AuthenticatedUser) -> AuthResponse:
    """Set the session cookies and build the response body."""
    csrf_token = auth_cookie_manager.create_csrf_token()
    auth_cookie_manager.set_auth_cookies(response, authenticated.tokens.refresh_token, csrf_token)
    return AuthResponse.from_authenticated(authenticated, csrf_token)


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates the account and opens its first session (refresh and CSRF cookies).",
    responses={**signup_success, **auth_errors}
)
async def sign_up(
        user_input: SignUpRequest,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
):
    authenticated = await service.sign_up(user_input)
    return _session_response(response, authenticated)


@router.post(
    "/signin",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Sign in",
    description="Authenticates email and password. Every earlier session of the user is revoked.",
    responses={**auth_success, **auth_errors}
)
async def sign_in(
        user_input: SignInRequest,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
):
    authenticated = await service.sign_in(user_input)
    return _session_response(response, authenticated)


@router.post(
    "/refresh",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Rotate the refresh token",
    description=(
        "Requires the refresh token cookie, the CSRF cookie and a matching CSRF header. "
        "The presented refresh token is revoked and a new session is issued."
    ),
    responses={**auth_success, **auth_errors},
    dependencies=[Depends(require_refresh_csrf)],
)
async def refresh_session(
        request: Request,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
):
    authenticated = await service.refresh_session(auth_cookie_manager.get_refresh_token(request))
    return _session_response(response, authenticated)


@router.post(
    "/logout",
    response_model=LogoutResponse,
    status_code=status.HTTP_200_OK,
    summary="Logout",
    description="Revokes the session of the refresh token cookie and clears the session cookies.",
    responses={**logout_success, **auth_errors}
)
async def logout(
        request: Request,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
):
    await service.logout(auth_cookie_manager.get_refresh_token(request))
    auth_cookie_manager.clear_auth_cookies(response)
    return LogoutResponse(success=True)
