# clean_api/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
# Keep in alphabetical order
from clean_api.adapters.inbound.api.v1.endpoints import (
    auth_endpoint,
    health_endpoint,
    post_endpoint,
    user_endpoint,
)

api_router = APIRouter()

api_router.include_router(auth_endpoint.router)
api_router.include_router(user_endpoint.router)
api_router.include_router(post_endpoint.router)
api_router.include_router(health_endpoint.router)
