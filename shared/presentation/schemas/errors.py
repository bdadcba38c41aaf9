"""Error response schemas."""
from enum import Enum
from typing import Optional, Any

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Códigos de erro expostos pela API."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorBody(BaseModel):
    """Corpo do erro dentro do envelope da API."""
    code: str
    message: str
    details: Optional[Any] = None
