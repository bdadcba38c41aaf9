"""Structured logging setup."""
from .structlog_config import setup_logging, get_logger
from .rate_limit import LogRateLimiter

__all__ = [
    "setup_logging",
    "get_logger",
    "LogRateLimiter",
]
