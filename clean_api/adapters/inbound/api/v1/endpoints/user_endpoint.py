# clean_api/adapters/inbound/api/v1/endpoints/user_endpoint.py

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from fastapi_pagination import Page, Params

from clean_api.adapters.inbound.api.deps import get_current_user_id, get_user_service
from clean_api.application.dtos.base_dto import SuccessOutput
from clean_api.application.dtos.user_dto import UserOutput, UserUpdate
from clean_api.application.use_cases.user_use_cases import AsyncUserService
from clean_api.shared.utils.error_responses import bearer_errors, user_errors
from clean_api.shared.utils.pagination import ListQuery, pagination_params
from clean_api.shared.utils.success_responses import delete_success

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get(
    "/me",
    response_model=UserOutput,
    status_code=status.HTTP_200_OK,
    summary="Current user",
    description="Returns the user identified by the bearer access token.",
    responses=bearer_errors,
)
async def read_current_user(
        current_user_id: UUID = Depends(get_current_user_id),
        service: AsyncUserService = Depends(get_user_service),
):
    return await service.get_current_user(current_user_id)


@router.get(
    "",
    response_model=Page[UserOutput],
    summary="List users",
    description="Returns a paginated list of users, filtered by name or email when `search` is given.",
    responses=bearer_errors,
)
async def list_users(
        _: UUID = Depends(get_current_user_id),
        params: Params = Depends(pagination_params),
        query: ListQuery = Depends(),
        service: AsyncUserService = Depends(get_user_service),
):
    return await service.list_users(params, query)


@router.get(
    "/{user_id}",
    response_model=UserOutput,
    summary="Get user by ID",
    responses=bearer_errors,
)
async def get_user(
        user_id: UUID = Path(..., description="ID of the user"),
        _: UUID = Depends(get_current_user_id),
        service: AsyncUserService = Depends(get_user_service),
):
    return await service.get_user(user_id)


@router.put(
    "/{user_id}",
    response_model=UserOutput,
    summary="Update user",
    description="Updates name, email, password or status. Only the account owner may do this.",
    responses=user_errors,
)
async def update_user(
        update_data: UserUpdate,
        user_id: UUID = Path(..., description="ID of the user to update"),
        current_user_id: UUID = Depends(get_current_user_id),
        service: AsyncUserService = Depends(get_user_service),
):
    return await service.update_user(current_user_id, user_id, update_data)


@router.delete(
    "/{user_id}",
    response_model=SuccessOutput,
    summary="Delete user",
    description="Deletes the account and its sessions. Only the account owner may do this.",
    responses={**delete_success, **user_errors},
)
async def delete_user(
        user_id: UUID = Path(..., description="ID of the user to delete"),
        current_user_id: UUID = Depends(get_current_user_id),
        service: AsyncUserService = Depends(get_user_service),
):
    await service.delete_user(current_user_id, user_id)
    return SuccessOutput(success=True)
