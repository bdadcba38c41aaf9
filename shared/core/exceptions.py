"""
Exceções customizadas do Productivity Hub.
"""

from typing import Any, Optional


class HubException(Exception):
    """Exceção base para erros do Productivity Hub."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentException(HubException):
    """Argumento inválido (ex.: limit zero na paginação)."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            message=f"Argumento inválido '{field}': {message}",
            details={"field": field, "value": value}
        )
        self.field = field


class LegacySessionParseException(HubException):
    """Sessão legada com formato inválido."""

    def __init__(self, provider: str, error: str):
        super().__init__(
            message=f"Sessão legada de {provider} inválida: {error}",
            details={"provider": provider, "error": error}
        )
        self.provider = provider


class SessionStoreWriteException(HubException):
    """Session store rejeitou a gravação de uma sessão."""

    def __init__(self, provider: str, error: str):
        super().__init__(
            message=f"Falha ao salvar sessão de {provider}: {error}",
            details={"provider": provider, "error": error}
        )
        self.provider = provider


class KeyValueStoreException(HubException):
    """Erro de leitura/escrita no key-value store."""

    def __init__(self, key: str, error: str):
        super().__init__(
            message=f"Erro no key-value store para '{key}': {error}",
            details={"key": key, "error": error}
        )
        self.key = key
