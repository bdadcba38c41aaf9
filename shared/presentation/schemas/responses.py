"""API response envelope.

Every endpoint answers with the same shape::

    {"success": true, "data": ..., "meta": {"pagination": ..., "timestamp": ..., "requestId": ...}}
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from starlette.responses import JSONResponse

from shared.application.dtos.base_dto import PaginationMetaDTO
from shared.core.exceptions import HubException, InvalidArgumentException
from shared.domain.value_objects.pagination import PaginationMeta
from shared.presentation.schemas.errors import ErrorBody, ErrorCode

T = TypeVar("T")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _request_id() -> str:
    return str(uuid.uuid4())


class ResponseMeta(BaseModel):
    """Metadados anexados a toda resposta."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    pagination: Optional[PaginationMetaDTO] = None
    timestamp: str = Field(default_factory=_now_iso)
    request_id: str = Field(default_factory=_request_id)


class ApiResponse(BaseModel, Generic[T]):
    """Envelope padrão das respostas da API."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    success: bool
    data: Optional[T] = None
    error: Optional[ErrorBody] = None
    meta: ResponseMeta = Field(default_factory=ResponseMeta)

    def to_json_response(self, status_code: int = 200) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content=self.model_dump(mode="json", by_alias=True, exclude_none=True),
        )


def create_success_response(
    data: Any,
    pagination: Optional[PaginationMeta] = None,
) -> ApiResponse:
    """Monta o envelope de sucesso, com paginação opcional."""
    meta = ResponseMeta(
        pagination=PaginationMetaDTO.from_meta(pagination) if pagination else None
    )
    return ApiResponse(success=True, data=data, meta=meta)


def create_error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
) -> ApiResponse:
    """Monta o envelope de erro."""
    return ApiResponse(
        success=False,
        error=ErrorBody(code=code, message=message, details=details),
    )


def error_response_from_exception(exc: HubException) -> tuple[int, ApiResponse]:
    """Converte uma HubException em (status_code, envelope)."""
    if isinstance(exc, InvalidArgumentException):
        status_code, code = 400, ErrorCode.VALIDATION_ERROR
    else:
        status_code, code = 500, ErrorCode.INTERNAL_ERROR

    return status_code, create_error_response(code.value, exc.message, exc.details or None)
