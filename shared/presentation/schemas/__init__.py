"""Shared presentation schemas."""
from .errors import ErrorBody, ErrorCode
from .pagination import PaginationQuery
from .responses import (
    ApiResponse,
    ResponseMeta,
    create_error_response,
    create_success_response,
    error_response_from_exception,
)

__all__ = [
    "ApiResponse",
    "ErrorBody",
    "ErrorCode",
    "PaginationQuery",
    "ResponseMeta",
    "create_error_response",
    "create_success_response",
    "error_response_from_exception",
]
