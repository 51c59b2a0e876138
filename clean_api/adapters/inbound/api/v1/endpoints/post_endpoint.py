# clean_api/adapters/inbound/api/v1/endpoints/post_endpoint.py

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from fastapi_pagination import Page, Params

from clean_api.adapters.inbound.api.deps import get_current_claims, get_post_service
from clean_api.application.dtos.base_dto import SuccessOutput
from clean_api.application.dtos.post_dto import PostCreate, PostOutput, PostUpdate
from clean_api.application.use_cases.post_use_cases import AsyncPostService
from clean_api.shared.utils.error_responses import post_errors
from clean_api.shared.utils.pagination import ListQuery, pagination_params
from clean_api.shared.utils.success_responses import delete_success

logger = logging.getLogger(__name__)

# Every route here requires a valid bearer access token
router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
    dependencies=[Depends(get_current_claims)],
)


@router.post(
    "",
    response_model=PostOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    responses=post_errors,
)
async def create_post(
        post_input: PostCreate,
        service: AsyncPostService = Depends(get_post_service),
):
    return await service.create_post(post_input)


@router.get(
    "",
    response_model=Page[PostOutput],
    summary="List posts",
    description="Returns a paginated list of posts, filtered by title or content when `search` is given.",
    responses=post_errors,
)
async def list_posts(
        params: Params = Depends(pagination_params),
        query: ListQuery = Depends(),
        service: AsyncPostService = Depends(get_post_service),
):
    return await service.list_posts(params, query)


@router.get(
    "/{post_id}",
    response_model=PostOutput,
    summary="Get post by ID",
    responses=post_errors,
)
async def get_post(
        post_id: UUID = Path(..., description="ID of the post"),
        service: AsyncPostService = Depends(get_post_service),
):
    return await service.get_post(post_id)


@router.put(
    "/{post_id}",
    response_model=PostOutput,
    summary="Update post",
    description="Updates title, content or status. Omitted fields are left unchanged.",
    responses=post_errors,
)
async def update_post(
        update_data: PostUpdate,
        post_id: UUID = Path(..., description="ID of the post to update"),
        service: AsyncPostService = Depends(get_post_service),
):
    return await service.update_post(post_id, update_data)


@router.delete(
    "/{post_id}",
    response_model=SuccessOutput,
    summary="Delete post",
    responses={**delete_success, **post_errors},
)
async def delete_post(
        post_id: UUID = Path(..., description="ID of the post to delete"),
        service: AsyncPostService = Depends(get_post_service),
):
    await service.delete_post(post_id)
    return SuccessOutput(success=True)
