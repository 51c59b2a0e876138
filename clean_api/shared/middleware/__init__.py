# clean_api/shared/middleware/__init__.py

from clean_api.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware
from clean_api.shared.middleware.error_handler_middleware import (
    ErrorHandlerMiddleware,
    domain_exception_handler,
    validation_exception_handler,
)

# Export all for easy imports
__all__ = [
    "AsyncRequestLoggingMiddleware",
    "ErrorHandlerMiddleware",
    "domain_exception_handler",
    "validation_exception_handler",
]
