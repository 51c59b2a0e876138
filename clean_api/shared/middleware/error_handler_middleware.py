# clean_api/shared/middleware/error_handler_middleware.py

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError, HTTPException
from fastapi.encoders import jsonable_encoder
from starlette.middleware.base import BaseHTTPMiddleware

from clean_api.domain.exceptions import DomainException
import logging

logger = logging.getLogger(__name__)


def domain_error_response(e: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=e.status_code,
        content={
            "success": False,
            "error": e.message,
            "code": e.internal_code,
            "details": e.details,
        },
        headers=e.headers,
    )


async def domain_exception_handler(request: Request, e: DomainException) -> JSONResponse:
    if e.status_code >= 500:
        logger.error(f"[{e.internal_code}] {e.message} on {request.url.path}")
    else:
        logger.warning(f"[{e.internal_code}] DomainException: {e.message}")
    return domain_error_response(e)


async def validation_exception_handler(request: Request, e: RequestValidationError) -> JSONResponse:
    logger.warning(f"RequestValidationError on {request.url.path}")
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "Validation error in the submitted data.",
            "code": "VALIDATION_ERROR",
            "details": jsonable_encoder(e.errors()),
        },
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Last line of defence: anything that escaped the registered exception
    handlers is turned into the standard error body.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)

        # 1. Custom domain exceptions
        except DomainException as e:
            return await domain_exception_handler(request, e)

        # 2. Validation errors (Pydantic/FastAPI)
        except RequestValidationError as e:
            return await validation_exception_handler(request, e)

        # 3. Standard HTTP exceptions
        except HTTPException as e:
            logger.warning(f"HTTPException: {e.detail}")
            return JSONResponse(
                status_code=e.status_code,
                content={
                    "success": False,
                    "error": str(e.detail),
                    "code": "HTTP_EXCEPTION",
                },
            )

        # 4. Unexpected errors
        except Exception:
            logger.exception(f"Unexpected error on {request.url.path}")
            return JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "error": "Internal server error.",
                    "code": "INTERNAL_SERVER_ERROR",
                },
            )
