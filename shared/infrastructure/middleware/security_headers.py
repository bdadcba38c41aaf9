"""
Security headers middleware for Starlette/FastAPI.

Adds CSP and the usual hardening headers to every response.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from shared.infrastructure.config.settings import get_settings
from shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def build_csp_header(
    allow_inline: bool = False,
    allow_eval: bool = False,
    custom_sources: Sequence[str] = (),
) -> str:
    """
    Build a Content-Security-Policy header value.

    Args:
        allow_inline: Allow inline scripts/styles (development only)
        allow_eval: Allow eval() in scripts
        custom_sources: Extra origins allowed for scripts and connections
    """
    extra = [source for source in custom_sources if source]

    script_src = ["'self'"]
    if allow_inline:
        script_src.append("'unsafe-inline'")
    if allow_eval:
        script_src.append("'unsafe-eval'")
    script_src.extend(extra)

    style_src = ["'self'", "'unsafe-inline'"] if allow_inline else ["'self'"]

    directives = {
        "default-src": ["'self'"],
        "script-src": script_src,
        "style-src": style_src,
        "img-src": ["'self'", "data:", "https:"],
        "font-src": ["'self'", "data:"],
        "connect-src": ["'self'", *extra],
        "frame-ancestors": ["'none'"],
        "base-uri": ["'self'"],
        "form-action": ["'self'"],
        "object-src": ["'none'"],
    }
    return "; ".join(f"{name} {' '.join(values)}" for name, values in directives.items())


@dataclass
class SecurityHeadersConfig:
    """Configuration for security headers."""
    allow_inline: bool = False
    allow_eval: bool = False
    custom_sources: list[str] = field(default_factory=list)
    api_prefix: str = "/api/"
    api_version: str = "1.0"

    @classmethod
    def from_settings(cls) -> "SecurityHeadersConfig":
        """Inline scripts are only allowed in development (hot reload)."""
        current = get_settings()
        custom_sources = list(current.csp_custom_sources)
        if current.is_development:
            custom_sources.append("ws://localhost:5173")
        return cls(
            allow_inline=current.is_development,
            custom_sources=custom_sources,
            api_version=current.api_version,
        )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds security headers to every response:
    - Content-Security-Policy
    - X-Content-Type-Options / X-Frame-Options / X-XSS-Protection
    - Referrer-Policy / Permissions-Policy
    - X-API-Version for API routes
    """

    def __init__(self, app, config: Optional[SecurityHeadersConfig] = None):
        super().__init__(app)
        self.config = config or SecurityHeadersConfig.from_settings()
        self.headers = {
            "Content-Security-Policy": build_csp_header(
                allow_inline=self.config.allow_inline,
                allow_eval=self.config.allow_eval,
                custom_sources=self.config.custom_sources,
            ),
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "X-XSS-Protection": "1; mode=block",
            "Referrer-Policy": "strict-origin-when-cross-origin",
            "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
        }

        logger.info(
            "Security headers middleware initialized",
            allow_inline=self.config.allow_inline,
            custom_sources=len(self.config.custom_sources),
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        for name, value in self.headers.items():
            response.headers[name] = value

        if request.url.path.startswith(self.config.api_prefix):
            response.headers["X-API-Version"] = self.config.api_version

        return response
