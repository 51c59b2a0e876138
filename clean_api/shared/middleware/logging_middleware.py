# clean_api/shared/middleware/logging_middleware.py

"""
Middleware for HTTP request logging.

Logs method, path and status of every request. Query strings are only
logged outside production; cookies and bodies never are.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from clean_api.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs HTTP requests.
    """

    async def dispatch(self, request: Request, call_next):
        # Log the request
        if settings.ENVIRONMENT == "production":
            logger.info(f"Request: {request.method} {request.url.path}")
        else:
            query_params = dict(request.query_params)
            logger.info(
                f"Request: {request.method} {request.url.path} | "
                f"Query: {query_params if query_params else 'N/A'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} | "
            f"Time: {process_time:.4f}s"
        )

        return response
