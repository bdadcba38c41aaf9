"""Middleware components for API infrastructure."""

from shared.infrastructure.middleware.security_headers import (
    SecurityHeadersMiddleware,
    SecurityHeadersConfig,
    build_csp_header,
)

__all__ = [
    "SecurityHeadersMiddleware",
    "SecurityHeadersConfig",
    "build_csp_header",
]
